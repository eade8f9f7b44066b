"""Value objects."""
from travel_records.domain.value_objects.popularity import Popularity, PopularityTier
from travel_records.domain.value_objects.media_name import MediaName

__all__ = [
    "MediaName",
    "Popularity",
    "PopularityTier",
]
