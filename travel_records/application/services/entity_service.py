"""Generic create/read/update/delete over one entity kind.

Every write runs as a two-phase pipeline: validate against the store, then
persist and translate the store's own rejections. A rejection the service
can explain by querying again becomes a ConflictError or NotFoundError;
anything else is re-raised untouched.
"""
import logging
from typing import Generic, List, Optional, Type

from travel_records.application.services.id_allocator import IdAllocator
from travel_records.application.services.validation import EntityValidator
from travel_records.domain.exceptions import (
    ConflictError,
    IdMismatchError,
    NotFoundError,
    StoreConcurrencyError,
    StoreConstraintError,
)
from travel_records.domain.repositories.entity_store import E, EntityStore

logger = logging.getLogger(__name__)


class EntityService(Generic[E]):
    """Base service; subclasses set ``kind`` and override the hooks."""

    kind: Type[E]

    def __init__(
        self,
        store: EntityStore,
        allocator: Optional[IdAllocator] = None,
        validator: Optional[EntityValidator] = None,
    ):
        self._store = store
        self._allocator = allocator or IdAllocator(store)
        self._validator = validator or EntityValidator(store)

    @property
    def kind_name(self) -> str:
        return self.kind.__name__

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self) -> List[E]:
        return self._store.list_all(self.kind)

    def get(self, record_id: int) -> E:
        entity = self._store.get(self.kind, record_id)
        if entity is None:
            raise NotFoundError(f"{self.kind_name} {record_id} not found")
        return entity

    def exists(self, record_id: int) -> bool:
        return self._store.get(self.kind, record_id) is not None

    def _children_of(self, parent_kind: Type, parent_id: int, field: str) -> List[E]:
        """Records of this kind whose ``field`` points at an existing parent."""
        if self._store.get(parent_kind, parent_id) is None:
            raise NotFoundError(f"{parent_kind.__name__} {parent_id} not found")
        return self._store.find(self.kind, **{field: parent_id})

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, entity: E) -> E:
        """Allocate an id, validate, and insert."""
        entity.id = self._allocator.next_id(self.kind)
        self._validator.check_fields(entity)
        self._validator.check_references(entity)
        self._check_create_conflicts(entity)
        self._prepare_create(entity)

        self._store.add(entity)
        try:
            self._store.save()
        except StoreConstraintError as e:
            if self._explains_create_conflict(entity):
                logger.warning(f"Create {self.kind_name} {entity.id} lost a race: {e}")
                raise ConflictError(f"{self.kind_name} {entity.id} conflicts with an existing record") from e
            raise

        logger.info(f"Created {self.kind_name} {entity.id}")
        return entity

    def update(self, record_id: int, entity: E) -> E:
        """Replace a record; ``record_id`` must equal ``entity.id``."""
        if record_id != entity.id:
            raise IdMismatchError(record_id, entity.id)

        self._validator.check_fields(entity)
        self._validator.check_references(entity)
        persisted = self._store.get(self.kind, entity.id)
        self._check_update_conflicts(entity, persisted)
        self._prepare_update(entity, persisted)

        self._store.update(entity)
        try:
            self._store.save()
        except StoreConcurrencyError:
            if not self.exists(record_id):
                raise NotFoundError(f"{self.kind_name} {record_id} not found")
            raise
        except StoreConstraintError as e:
            if self._explains_update_conflict(entity):
                logger.warning(f"Update {self.kind_name} {entity.id} lost a race: {e}")
                raise ConflictError(f"{self.kind_name} {entity.id} conflicts with an existing record") from e
            raise

        logger.info(f"Updated {self.kind_name} {entity.id}")
        return entity

    def delete(self, record_id: int) -> None:
        """Remove a record. Dependent records are left in place."""
        entity = self.get(record_id)
        self._store.remove(entity)
        try:
            self._store.save()
        except StoreConcurrencyError:
            if not self.exists(record_id):
                raise NotFoundError(f"{self.kind_name} {record_id} not found")
            raise
        logger.info(f"Deleted {self.kind_name} {record_id}")

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _check_create_conflicts(self, entity: E):
        pass

    def _check_update_conflicts(self, entity: E, persisted: Optional[E]):
        pass

    def _prepare_create(self, entity: E):
        pass

    def _prepare_update(self, entity: E, persisted: Optional[E]):
        pass

    def _explains_create_conflict(self, entity: E) -> bool:
        """After a rejected insert: was the allocated id taken meanwhile?"""
        return self.exists(entity.id)

    def _explains_update_conflict(self, entity: E) -> bool:
        return False
