"""Domain entities."""
from travel_records.domain.entities.user import User
from travel_records.domain.entities.trip import Trip
from travel_records.domain.entities.stage import Stage
from travel_records.domain.entities.post import Post
from travel_records.domain.entities.attraction import Attraction
from travel_records.domain.entities.attraction_stage import AttractionStage

__all__ = [
    "Attraction",
    "AttractionStage",
    "Post",
    "Stage",
    "Trip",
    "User",
]
