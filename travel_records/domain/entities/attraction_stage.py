"""AttractionStage relation entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class AttractionStage:
    """Many-to-many link between an attraction and a stage.

    Pairs are not unique: the same attraction may be linked to the same
    stage more than once. ``id`` is a store-assigned surrogate key.
    """
    attraction_id: Optional[int]
    stage_id: Optional[int]
    id: Optional[int] = None
