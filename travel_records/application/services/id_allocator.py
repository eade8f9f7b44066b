"""Sequential identifier allocation."""
from typing import Type

from travel_records.constants import FIRST_ID
from travel_records.domain.repositories.entity_store import EntityStore


class IdAllocator:
    """Derive the next id of a collection from its current maximum.

    This is a read-then-write sequence with no reservation and no locking:
    two callers that allocate before either saves get the same id. The
    store's primary key rejection on save is the backstop, and the entity
    services turn that rejection into a ConflictError. Deleted ids are never
    reused unless they were the maximum, and gaps are never filled.
    """

    def __init__(self, store: EntityStore):
        self._store = store

    def next_id(self, kind: Type) -> int:
        """Return max(id) + 1, or 1 for an empty collection."""
        current = self._store.max_id(kind)
        if current is None:
            return FIRST_ID
        return current + 1
