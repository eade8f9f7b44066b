"""Post service."""
from datetime import datetime
from typing import List, Optional

from travel_records.application.services.entity_service import EntityService
from travel_records.domain.entities import Post, Stage, Trip


class PostService(EntityService[Post]):
    kind = Post

    def list_for_stage(self, stage_id: int) -> List[Post]:
        return self._children_of(Stage, stage_id, "stage_id")

    def list_for_trip(self, trip_id: int) -> List[Post]:
        return self._children_of(Trip, trip_id, "trip_id")

    def _prepare_create(self, entity: Post):
        entity.created_at = datetime.now()

    def _prepare_update(self, entity: Post, persisted: Optional[Post]):
        if persisted is not None:
            entity.created_at = persisted.created_at
