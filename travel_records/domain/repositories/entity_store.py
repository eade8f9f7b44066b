"""Entity store interface - abstraction over the persistent record store.

The store is a unit of work: ``add``, ``update`` and ``remove`` queue changes
and ``save`` applies them. ``save`` is the only call that may fail because of
a constraint the store enforces on its own (primary keys, unique usernames
and emails). On failure the pending changes are discarded.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TypeVar

E = TypeVar("E")


class EntityStore(ABC):
    """Repository interface shared by every entity kind."""

    @abstractmethod
    def get(self, kind: Type[E], record_id: int) -> Optional[E]:
        """Get a record by id."""
        pass

    @abstractmethod
    def find(self, kind: Type[E], **criteria: Any) -> List[E]:
        """Get every record whose fields equal the given values."""
        pass

    def exists(self, kind: Type[E], **criteria: Any) -> bool:
        """Check whether any record matches the given values."""
        return bool(self.find(kind, **criteria))

    @abstractmethod
    def list_all(self, kind: Type[E]) -> List[E]:
        """Get every record of a kind, ordered by id."""
        pass

    @abstractmethod
    def max_id(self, kind: Type[E]) -> Optional[int]:
        """Highest id in the collection, or None when it is empty."""
        pass

    @abstractmethod
    def add(self, entity: Any) -> None:
        """Queue an insert."""
        pass

    @abstractmethod
    def update(self, entity: Any) -> None:
        """Queue a full-row update keyed by the entity id."""
        pass

    @abstractmethod
    def remove(self, entity: Any) -> None:
        """Queue a delete keyed by the entity id."""
        pass

    @abstractmethod
    def save(self) -> None:
        """Apply queued changes.

        Raises:
            StoreConstraintError: a unique or primary key rule was broken
            StoreConcurrencyError: an update or delete matched no row
        """
        pass
