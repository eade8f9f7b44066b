"""AttractionStage relation service."""
import logging
from typing import List, Optional

from travel_records.application.services.validation import EntityValidator
from travel_records.domain.entities import AttractionStage
from travel_records.domain.exceptions import NotFoundError
from travel_records.domain.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)


class AttractionStageService:
    """Links attractions to stages.

    Links form a multiset: linking the same pair twice stores two rows, and
    unlinking removes one of them.
    """

    def __init__(self, store: EntityStore, validator: Optional[EntityValidator] = None):
        self._store = store
        self._validator = validator or EntityValidator(store)

    def list(self) -> List[AttractionStage]:
        return self._store.list_all(AttractionStage)

    def link(self, attraction_id: int, stage_id: int) -> AttractionStage:
        """Add a link.

        Raises:
            ReferentialError: the attraction or the stage does not exist
        """
        relation = AttractionStage(attraction_id=attraction_id, stage_id=stage_id)
        self._validator.check_references(relation)
        self._store.add(relation)
        self._store.save()
        logger.info(f"Linked attraction {attraction_id} to stage {stage_id}")
        return relation

    def unlink(self, attraction_id: int, stage_id: int) -> None:
        """Remove one link between the pair.

        Raises:
            ReferentialError: the attraction or the stage does not exist
            NotFoundError: the pair is not linked
        """
        self._validator.check_references(
            AttractionStage(attraction_id=attraction_id, stage_id=stage_id)
        )
        relations = self._store.find(
            AttractionStage, attraction_id=attraction_id, stage_id=stage_id
        )
        if not relations:
            raise NotFoundError("Relation not found.")

        self._store.remove(relations[0])
        self._store.save()
        logger.info(f"Unlinked attraction {attraction_id} from stage {stage_id}")
