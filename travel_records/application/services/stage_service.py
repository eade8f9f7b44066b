"""Stage service."""
from datetime import datetime
from typing import List, Optional

from travel_records.application.services.entity_service import EntityService
from travel_records.domain.entities import Stage, Trip


class StageService(EntityService[Stage]):
    kind = Stage

    def list_for_trip(self, trip_id: int) -> List[Stage]:
        """Stages of a trip; NotFoundError if the trip does not exist."""
        return self._children_of(Trip, trip_id, "trip_id")

    def _prepare_create(self, entity: Stage):
        entity.created_at = datetime.now()

    def _prepare_update(self, entity: Stage, persisted: Optional[Stage]):
        if persisted is not None:
            entity.created_at = persisted.created_at
