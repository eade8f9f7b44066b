"""SQLAlchemy implementation of EntityStore."""
import logging
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type

from sqlalchemy import delete as sa_delete
from sqlalchemy import func
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from travel_records.domain.entities import (
    Attraction,
    AttractionStage,
    Post,
    Stage,
    Trip,
    User,
)
from travel_records.domain.exceptions import StoreConcurrencyError, StoreConstraintError
from travel_records.domain.repositories.entity_store import E, EntityStore
from travel_records.infrastructure.persistence import models

logger = logging.getLogger(__name__)

_MODELS: Dict[type, Any] = {
    User: models.User,
    Trip: models.Trip,
    Stage: models.Stage,
    Post: models.Post,
    Attraction: models.Attraction,
    AttractionStage: models.HasAttraction,
}


def _model_for(kind: type):
    try:
        return _MODELS[kind]
    except KeyError:
        raise TypeError(f"No table mapped for {kind.__name__}")


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _to_entity(kind: Type[E], row: Any) -> E:
    """Map ORM model to domain entity."""
    return kind(**{f.name: getattr(row, f.name) for f in fields(kind)})


def _to_values(entity: Any) -> Dict[str, Any]:
    """Map domain entity to column values."""
    return {f.name: _column_value(getattr(entity, f.name)) for f in fields(entity)}


class SQLAlchemyEntityStore(EntityStore):
    """Entity store using a SQLAlchemy session.

    Updates and deletes are issued as keyed statements so a row that vanished
    since it was read shows up as a zero rowcount instead of being silently
    re-inserted.
    """

    def __init__(self, session: Session):
        self.session = session
        self._pending: List[Tuple[str, Any]] = []

    def get(self, kind: Type[E], record_id: int) -> Optional[E]:
        row = self.session.get(_model_for(kind), record_id)
        return _to_entity(kind, row) if row else None

    def find(self, kind: Type[E], **criteria: Any) -> List[E]:
        model = _model_for(kind)
        rows = (
            self.session.query(model)
            .filter_by(**{k: _column_value(v) for k, v in criteria.items()})
            .order_by(model.id)
            .all()
        )
        return [_to_entity(kind, r) for r in rows]

    def exists(self, kind: Type[E], **criteria: Any) -> bool:
        model = _model_for(kind)
        return (
            self.session.query(model.id)
            .filter_by(**{k: _column_value(v) for k, v in criteria.items()})
            .first()
        ) is not None

    def list_all(self, kind: Type[E]) -> List[E]:
        model = _model_for(kind)
        rows = self.session.query(model).order_by(model.id).all()
        return [_to_entity(kind, r) for r in rows]

    def max_id(self, kind: Type[E]) -> Optional[int]:
        model = _model_for(kind)
        return self.session.query(func.max(model.id)).scalar()

    def add(self, entity: Any) -> None:
        self._pending.append(("add", entity))

    def update(self, entity: Any) -> None:
        self._pending.append(("update", entity))

    def remove(self, entity: Any) -> None:
        self._pending.append(("remove", entity))

    def save(self) -> None:
        inserted = []
        try:
            for op, entity in self._pending:
                model = _model_for(type(entity))
                if op == "add":
                    values = _to_values(entity)
                    if values.get("id") is None:
                        values.pop("id")
                    row = model(**values)
                    self.session.add(row)
                    inserted.append((entity, row))
                elif op == "update":
                    values = _to_values(entity)
                    values.pop("id")
                    result = self.session.execute(
                        sa_update(model)
                        .where(model.id == entity.id)
                        .values(**values)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        raise StoreConcurrencyError(
                            f"{type(entity).__name__} {entity.id} was not updated"
                        )
                elif op == "remove":
                    result = self.session.execute(
                        sa_delete(model)
                        .where(model.id == entity.id)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        raise StoreConcurrencyError(
                            f"{type(entity).__name__} {entity.id} was not deleted"
                        )
            self.session.flush()
            for entity, row in inserted:
                entity.id = row.id
            self.session.commit()
        except (IntegrityError, FlushError) as e:
            # FlushError: new row reuses a key already loaded in this session
            self.session.rollback()
            reason = getattr(e, "orig", e)
            logger.warning(f"Save rejected by database constraint: {reason}")
            raise StoreConstraintError(str(reason)) from e
        except StoreConcurrencyError:
            self.session.rollback()
            raise
        finally:
            self._pending.clear()
