"""Tests for the in-memory store: per-request units of work over shared tables."""
import threading

import pytest

from travel_records.application.services import UserService
from travel_records.domain.entities import User
from travel_records.domain.exceptions import (
    ConflictError,
    StoreConcurrencyError,
    StoreConstraintError,
)
from travel_records.infrastructure.persistence.repositories.in_memory_entity_store import (
    InMemoryDatabase,
    InMemoryEntityStore,
)


class TestUnitOfWork:

    def test_pending_changes_are_private(self, make_user):
        database = InMemoryDatabase()
        first = InMemoryEntityStore(database)
        second = InMemoryEntityStore(database)

        first.add(make_user())
        second.save()
        assert second.get(User, 1) is None

        first.save()
        assert second.get(User, 1).username == "alice"

    def test_failed_save_discards_only_own_changes(self, make_user):
        database = InMemoryDatabase()
        first = InMemoryEntityStore(database)
        second = InMemoryEntityStore(database)
        first.add(make_user())
        first.save()

        first.add(make_user(id=2, username="bob"))
        first.add(make_user(id=3, username="alice", email="x@example.com"))
        second.add(make_user(id=4, username="carol"))

        with pytest.raises(StoreConstraintError):
            first.save()
        second.save()

        assert [u.id for u in second.list_all(User)] == [1, 4]

    def test_update_missing_row(self, store, make_user):
        store.update(make_user(id=3))
        with pytest.raises(StoreConcurrencyError):
            store.save()

    def test_returned_records_are_copies(self, store, seed_records, make_user):
        seed_records(store, make_user())
        store.get(User, 1).username = "mallory"
        assert store.get(User, 1).username == "alice"


def test_concurrent_creates_racing_for_the_same_id(seed_records, make_user):
    """Both requests allocate id 2 before either saves: one wins, the other conflicts."""
    database = InMemoryDatabase()
    seed_records(InMemoryEntityStore(database), make_user(username="ana"))
    barrier = threading.Barrier(2, timeout=5)
    outcomes = {}

    def create(username):
        store = InMemoryEntityStore(database)
        queue = store.add

        def add_then_wait(entity):
            queue(entity)
            barrier.wait()

        store.add = add_then_wait
        try:
            outcomes[username] = ("ok", UserService(store).create(make_user(id=None, username=username)).id)
        except ConflictError:
            outcomes[username] = ("conflict", None)

    threads = [threading.Thread(target=create, args=(name,)) for name in ("bob", "carol")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(result for result, _ in outcomes.values()) == ["conflict", "ok"]
    winner = next(name for name, (result, _) in outcomes.items() if result == "ok")
    persisted = InMemoryEntityStore(database).list_all(User)
    assert [(u.id, u.username) for u in persisted] == [(1, "ana"), (2, winner)]
