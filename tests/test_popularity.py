"""Tests for the attraction popularity state machine."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from travel_records.application.services import AttractionService
from travel_records.domain.entities import Attraction
from travel_records.domain.exceptions import ValidationError
from travel_records.domain.value_objects import Popularity, PopularityTier


class TestPopularityValueObject:

    def test_initial_state(self):
        assert Popularity.initial() == Popularity(score=0, tier=PopularityTier.LOW)

    def test_advance_below_threshold_stays_low(self):
        state = Popularity(score=9).advance()
        assert state.score == 10
        assert state.tier is PopularityTier.LOW

    def test_advance_past_threshold_turns_high(self):
        state = Popularity(score=10).advance()
        assert state.score == 11
        assert state.is_high

    def test_high_is_sticky(self):
        assert Popularity(score=3, tier=PopularityTier.HIGH).advance().is_high

    def test_negative_score_rejected(self):
        with pytest.raises(ValueError):
            Popularity(score=-1)

    def test_tier_coerced_from_string(self):
        assert Popularity(score=0, tier="HIGH").tier is PopularityTier.HIGH

    def test_to_dict(self):
        assert Popularity(score=4).to_dict() == {"score": 4, "popularity": "LOW"}

    @given(st.integers(min_value=1, max_value=40))
    def test_tier_after_n_updates(self, n):
        state = Popularity.initial()
        for _ in range(n):
            state = state.advance()
        assert state.score == n
        assert state.is_high == (n > 10)


class TestAttractionPopularity:

    def _create(self, store):
        return AttractionService(store).create(
            Attraction(id=None, name="Louvre", description="Museum", popularity="HIGH", score=50)
        )

    def test_create_resets_score_and_tier(self, store):
        created = self._create(store)
        assert created.score == 0
        assert created.popularity is PopularityTier.LOW

    def test_eleven_updates_flip_to_high(self, store):
        service = AttractionService(store)
        self._create(store)
        tiers = []
        for _ in range(11):
            service.update(1, Attraction(id=1, name="Louvre", description="Museum"))
            tiers.append(service.get(1).popularity)
        assert tiers[:10] == [PopularityTier.LOW] * 10
        assert tiers[10] is PopularityTier.HIGH
        assert service.get(1).score == 11

    def test_client_score_is_ignored(self, store):
        service = AttractionService(store)
        self._create(store)
        service.update(1, Attraction(id=1, name="Louvre", description="Museum", popularity="HIGH", score=99))
        stored = service.get(1)
        assert stored.score == 1
        assert stored.popularity is PopularityTier.LOW

    def test_list_popular(self, store):
        service = AttractionService(store)
        self._create(store)
        service.create(Attraction(id=None, name="Orsay", description="Museum"))
        for _ in range(11):
            service.update(2, Attraction(id=2, name="Orsay", description="Museum"))
        assert [a.id for a in service.list_popular()] == [2]

    def test_failed_validation_does_not_count(self, store):
        service = AttractionService(store)
        self._create(store)
        with pytest.raises(ValidationError):
            service.update(1, Attraction(id=1, name="", description="Museum"))
        assert service.get(1).score == 0
