"""Attraction service - CRUD plus the popularity scoring state machine."""
import logging
from typing import List, Optional

from travel_records.application.services.entity_service import EntityService
from travel_records.domain.entities import Attraction, AttractionStage, Stage
from travel_records.domain.exceptions import NotFoundError
from travel_records.domain.value_objects.popularity import PopularityTier

logger = logging.getLogger(__name__)


class AttractionService(EntityService[Attraction]):
    """Attractions.

    Every successful update counts as one visit: the score grows by one and
    the tier flips to HIGH once the score exceeds the popularity limit.
    Score and tier supplied by the caller are ignored; the transition always
    starts from the persisted state.
    """

    kind = Attraction

    def list_popular(self) -> List[Attraction]:
        return self._store.find(Attraction, popularity=PopularityTier.HIGH)

    def list_for_stage(self, stage_id: int) -> List[Attraction]:
        """Attractions linked to a stage, one entry per link.

        Raises:
            NotFoundError: the stage does not exist, or a link points at a
                deleted attraction
        """
        if self._store.get(Stage, stage_id) is None:
            raise NotFoundError(f"Stage {stage_id} not found")

        attractions = []
        for relation in self._store.find(AttractionStage, stage_id=stage_id):
            attraction = self._store.get(Attraction, relation.attraction_id)
            if attraction is None:
                logger.warning(
                    f"Stage {stage_id} links to missing attraction {relation.attraction_id}"
                )
                raise NotFoundError("Attraction not found.")
            attractions.append(attraction)
        return attractions

    def _prepare_create(self, entity: Attraction):
        entity.reset_popularity()

    def _prepare_update(self, entity: Attraction, persisted: Optional[Attraction]):
        current = persisted.popularity_state if persisted is not None else entity.popularity_state
        advanced = current.advance()
        if advanced.is_high and not current.is_high:
            logger.info(f"Attraction {entity.id} became popular at score {advanced.score}")
        entity.apply_popularity(advanced)
