"""Attraction domain entity - carries the popularity state machine."""
from dataclasses import dataclass
from typing import Optional

from travel_records.domain.value_objects.popularity import Popularity, PopularityTier


@dataclass
class Attraction:
    """Attraction domain entity."""
    id: Optional[int]
    name: Optional[str]
    description: Optional[str]
    popularity: PopularityTier = PopularityTier.LOW
    score: int = 0

    def __post_init__(self):
        if not isinstance(self.popularity, PopularityTier):
            self.popularity = PopularityTier(self.popularity)

    @property
    def popularity_state(self) -> Popularity:
        return Popularity(score=self.score, tier=self.popularity)

    def apply_popularity(self, state: Popularity):
        """Copy a popularity state onto the entity."""
        self.score = state.score
        self.popularity = state.tier

    def reset_popularity(self):
        """New attractions always start at score 0 with LOW popularity."""
        self.apply_popularity(Popularity.initial())
