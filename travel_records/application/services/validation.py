"""Field, referential and uniqueness rules per entity kind.

All checks are query-then-act: they read the store and decide, leaving a
window in which a concurrent writer can invalidate the answer. The store's
own constraints remain the last line of defense.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

from travel_records.constants import NULL_LITERAL
from travel_records.domain.entities import (
    Attraction,
    AttractionStage,
    Post,
    Stage,
    Trip,
    User,
)
from travel_records.domain.exceptions import ConflictError, ReferentialError, ValidationError
from travel_records.domain.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """None, zero-length, or the literal string "null"."""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value) == 0 or value == NULL_LITERAL
    return False


@dataclass(frozen=True)
class RequiredField:
    name: str
    reason: str


@dataclass(frozen=True)
class Reference:
    field: str
    kind: Type


@dataclass(frozen=True)
class EntityRules:
    """Rule set for one entity kind."""
    required: Tuple[RequiredField, ...] = ()
    references: Tuple[Reference, ...] = ()
    unique: Tuple[str, ...] = ()


RULES: Dict[Type, EntityRules] = {
    User: EntityRules(
        required=(
            RequiredField("username", "invalid username"),
            RequiredField("password", "invalid password"),
            RequiredField("email", "invalid email"),
        ),
        unique=("username", "email"),
    ),
    Trip: EntityRules(
        required=(
            RequiredField("title", "invalid title"),
            RequiredField("description", "invalid description"),
        ),
        references=(Reference("user_id", User),),
    ),
    Stage: EntityRules(
        required=(
            RequiredField("title", "invalid title"),
            RequiredField("description", "invalid description"),
        ),
        references=(Reference("trip_id", Trip), Reference("user_id", User)),
    ),
    Post: EntityRules(
        required=(RequiredField("story", "invalid story value"),),
        references=(
            Reference("stage_id", Stage),
            Reference("trip_id", Trip),
            Reference("user_id", User),
        ),
    ),
    Attraction: EntityRules(
        required=(
            RequiredField("name", "invalid attraction name"),
            RequiredField("description", "invalid attraction description"),
        ),
    ),
    AttractionStage: EntityRules(
        references=(Reference("attraction_id", Attraction), Reference("stage_id", Stage)),
    ),
}


class EntityValidator:
    """Applies the rule table against a store."""

    def __init__(self, store: EntityStore, rules: Optional[Dict[Type, EntityRules]] = None):
        self._store = store
        self._rules = rules if rules is not None else RULES

    def rules_for(self, kind: Type) -> EntityRules:
        return self._rules.get(kind, EntityRules())

    def check_fields(self, entity: Any):
        """Raise ValidationError for the first empty required field."""
        for field in self.rules_for(type(entity)).required:
            if is_empty(getattr(entity, field.name)):
                raise ValidationError(field.reason)

    def check_references(self, entity: Any):
        """Raise ReferentialError for the first reference that does not resolve."""
        for ref in self.rules_for(type(entity)).references:
            value = getattr(entity, ref.field)
            if value is None or self._store.get(ref.kind, value) is None:
                logger.info(f"{type(entity).__name__}.{ref.field} points to missing {ref.kind.__name__} {value}")
                raise ReferentialError(ref.kind.__name__, value)

    def check_unique(self, entity: Any):
        """Raise ConflictError if any unique field value is already taken."""
        kind = type(entity)
        for name in self.rules_for(kind).unique:
            self._ensure_free(kind, name, getattr(entity, name))

    def check_unique_changes(self, entity: Any, persisted: Optional[Any]):
        """Like check_unique, but only for fields whose value changed.

        Nothing is checked when the record is not persisted: the save that
        follows reports it as missing.
        """
        if persisted is None:
            return
        kind = type(entity)
        for name in self.rules_for(kind).unique:
            value = getattr(entity, name)
            if getattr(persisted, name) != value:
                self._ensure_free(kind, name, value)

    def _ensure_free(self, kind: Type, name: str, value: Any):
        if self._store.exists(kind, **{name: value}):
            logger.warning(f"{kind.__name__} {name} '{value}' already exists")
            raise ConflictError(f"{name} '{value}' already exists")
