"""In-memory implementation of EntityStore for testing.

Enforces the same rules the relational schema does: unique primary keys,
unique usernames and emails, and keyed updates/deletes that fail when the
row is gone. Nothing else is enforced, in particular no foreign keys.

Tables live in an ``InMemoryDatabase`` shared by every store. Each
``InMemoryEntityStore`` is one unit of work with its own pending changes,
like a SQLAlchemy session over a shared engine.
"""
import copy
import threading
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple, Type

from travel_records.domain.entities import AttractionStage, User
from travel_records.domain.exceptions import StoreConcurrencyError, StoreConstraintError
from travel_records.domain.repositories.entity_store import E, EntityStore

UNIQUE_FIELDS: Dict[type, Tuple[str, ...]] = {
    User: ("username", "email"),
}

# Kinds whose ids are assigned by the store rather than the allocator
AUTO_ID_KINDS = (AttractionStage,)


class InMemoryDatabase:
    """Shared tables. Commits are serialized and replace the tables wholesale."""

    def __init__(self):
        self.tables: Dict[type, Dict[int, Any]] = defaultdict(dict)
        self.sequences: Dict[type, int] = defaultdict(int)
        self._lock = threading.Lock()

    def rows(self, kind: type) -> Dict[int, Any]:
        return self.tables.get(kind, {})

    def commit(self, changes: List[Tuple[str, Any]]) -> None:
        """Apply all changes or none of them."""
        with self._lock:
            tables = defaultdict(dict, {kind: dict(rows) for kind, rows in self.tables.items()})
            sequences = defaultdict(int, self.sequences)
            for op, entity in changes:
                kind = type(entity)
                rows = tables[kind]
                if op == "add":
                    if entity.id is None and kind in AUTO_ID_KINDS:
                        sequences[kind] += 1
                        entity.id = sequences[kind]
                    if entity.id is None or entity.id in rows:
                        raise StoreConstraintError(
                            f"Duplicate or missing primary key {entity.id} for {kind.__name__}"
                        )
                    _check_unique(kind, rows, entity)
                    rows[entity.id] = copy.deepcopy(entity)
                elif op == "update":
                    if entity.id not in rows:
                        raise StoreConcurrencyError(f"{kind.__name__} {entity.id} was not updated")
                    _check_unique(kind, rows, entity)
                    rows[entity.id] = copy.deepcopy(entity)
                elif op == "remove":
                    if entity.id not in rows:
                        raise StoreConcurrencyError(f"{kind.__name__} {entity.id} was not deleted")
                    del rows[entity.id]
            self.tables = tables
            self.sequences = sequences


def _check_unique(kind: type, rows: Dict[int, Any], entity: Any):
    for name in UNIQUE_FIELDS.get(kind, ()):
        value = getattr(entity, name)
        for other_id, other in rows.items():
            if other_id != entity.id and getattr(other, name) == value:
                raise StoreConstraintError(
                    f"Duplicate {name} '{value}' for {kind.__name__}"
                )


class InMemoryEntityStore(EntityStore):
    """In-memory implementation for testing.

    Records are copied on the way in and out, so changes made to a returned
    entity are invisible until queued and saved.
    """

    def __init__(self, database: Optional[InMemoryDatabase] = None):
        self.database = database if database is not None else InMemoryDatabase()
        self._pending: List[Tuple[str, Any]] = []

    def get(self, kind: Type[E], record_id: int) -> Optional[E]:
        row = self.database.rows(kind).get(record_id)
        return copy.deepcopy(row) if row is not None else None

    def find(self, kind: Type[E], **criteria: Any) -> List[E]:
        return [
            copy.deepcopy(row)
            for _, row in sorted(self.database.rows(kind).items())
            if all(getattr(row, name) == value for name, value in criteria.items())
        ]

    def list_all(self, kind: Type[E]) -> List[E]:
        return [copy.deepcopy(row) for _, row in sorted(self.database.rows(kind).items())]

    def max_id(self, kind: Type[E]) -> Optional[int]:
        rows = self.database.rows(kind)
        return max(rows) if rows else None

    def add(self, entity: Any) -> None:
        self._pending.append(("add", entity))

    def update(self, entity: Any) -> None:
        self._pending.append(("update", entity))

    def remove(self, entity: Any) -> None:
        self._pending.append(("remove", entity))

    def save(self) -> None:
        changes, self._pending = self._pending, []
        self.database.commit(changes)
