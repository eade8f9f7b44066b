"""Popularity value object - immutable one-way LOW -> HIGH state machine."""
from dataclasses import dataclass
from enum import Enum

from travel_records.constants import (
    INITIAL_SCORE,
    POPULARITY_HIGH,
    POPULARITY_LIMIT,
    POPULARITY_LOW,
    SCORE_STEP,
)


class PopularityTier(str, Enum):
    """Attraction popularity classification."""
    LOW = POPULARITY_LOW
    HIGH = POPULARITY_HIGH


@dataclass(frozen=True)
class Popularity:
    """Score and tier of an attraction.

    The score only grows. The tier becomes HIGH the first time the score
    exceeds the threshold and stays HIGH afterwards.
    """
    score: int = INITIAL_SCORE
    tier: PopularityTier = PopularityTier.LOW

    def __post_init__(self):
        """Validate popularity."""
        if self.score < 0:
            raise ValueError(f"Score cannot be negative, got {self.score}")
        if not isinstance(self.tier, PopularityTier):
            object.__setattr__(self, "tier", PopularityTier(self.tier))

    @classmethod
    def initial(cls) -> "Popularity":
        """State of a freshly created attraction."""
        return cls(score=INITIAL_SCORE, tier=PopularityTier.LOW)

    def advance(self, delta: int = SCORE_STEP, threshold: int = POPULARITY_LIMIT) -> "Popularity":
        """Return the state after one update call."""
        if delta < 0:
            raise ValueError(f"Score delta cannot be negative, got {delta}")
        score = self.score + delta
        tier = PopularityTier.HIGH if score > threshold else self.tier
        return Popularity(score=score, tier=tier)

    @property
    def is_high(self) -> bool:
        return self.tier is PopularityTier.HIGH

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"score": self.score, "popularity": self.tier.value}
