"""Trip service."""
from datetime import datetime
from typing import List, Optional

from travel_records.application.services.entity_service import EntityService
from travel_records.domain.entities import Trip, User


class TripService(EntityService[Trip]):
    kind = Trip

    def list_for_user(self, user_id: int) -> List[Trip]:
        """Trips of a user; NotFoundError if the user does not exist."""
        return self._children_of(User, user_id, "user_id")

    def _prepare_create(self, entity: Trip):
        entity.created_at = datetime.now()

    def _prepare_update(self, entity: Trip, persisted: Optional[Trip]):
        if persisted is not None:
            entity.created_at = persisted.created_at
