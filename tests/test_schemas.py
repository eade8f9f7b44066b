"""Tests for request/response schemas."""
import inspect

import pytest
from pydantic import BaseModel

from travel_records.api.v1.schemas import media_schemas, record_schemas
from travel_records.domain.entities import Attraction, User
from travel_records.domain.value_objects import PopularityTier


def _models(module):
    return [
        cls for _, cls in inspect.getmembers(module, inspect.isclass)
        if issubclass(cls, BaseModel) and cls.__module__ == module.__name__
    ]


@pytest.mark.parametrize("module", [record_schemas, media_schemas])
def test_response_models_read_attributes_via_model_config(module):
    for cls in _models(module):
        assert "Config" not in vars(cls), cls.__name__
        if cls.__name__.endswith("ResponseSchema") or cls.__name__ == "ImageSchema":
            assert cls.model_config.get("from_attributes") is True, cls.__name__


def test_response_from_entity_hides_password():
    user = User(id=1, username="alice", email="alice@example.com", password="hash")
    assert record_schemas.UserResponseSchema.model_validate(user).model_dump() == {
        "id": 1, "username": "alice", "email": "alice@example.com",
    }


class TestAttractionRequestSchema:

    @pytest.mark.parametrize("popularity, score", [("HIGH", 40), ("LEGENDARY", -3), (None, None)])
    def test_popularity_and_score_are_discarded(self, popularity, score):
        payload = record_schemas.AttractionRequestSchema(
            id=3, name="Louvre", description="Museum", popularity=popularity, score=score
        )
        entity = payload.to_entity()
        assert entity == Attraction(id=3, name="Louvre", description="Museum")
        assert (entity.popularity, entity.score) == (PopularityTier.LOW, 0)
