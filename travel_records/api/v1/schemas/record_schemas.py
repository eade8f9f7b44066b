"""Request and response schemas for users, trips, stages, posts and attractions.

Request bodies accept missing or empty strings: the services decide what is
invalid so that every client error carries the same reason strings.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from travel_records.domain.entities import (
    Attraction,
    Post,
    Stage,
    Trip,
    User,
)
from travel_records.domain.value_objects.popularity import PopularityTier


class UserRequestSchema(BaseModel):
    """User body for create/update; password is plain text."""
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def to_entity(self) -> User:
        return User(id=self.id, username=self.username, email=self.email, password=self.password)


class UserResponseSchema(BaseModel):
    """User as returned to clients; the password hash is never exposed."""
    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class TripRequestSchema(BaseModel):
    id: Optional[int] = None
    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None

    def to_entity(self) -> Trip:
        return Trip(
            id=self.id,
            user_id=self.user_id,
            title=self.title,
            description=self.description,
        )


class TripResponseSchema(BaseModel):
    id: int
    user_id: int
    title: str
    description: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class StageRequestSchema(BaseModel):
    id: Optional[int] = None
    trip_id: Optional[int] = None
    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None

    def to_entity(self) -> Stage:
        return Stage(
            id=self.id,
            trip_id=self.trip_id,
            user_id=self.user_id,
            title=self.title,
            description=self.description,
        )


class StageResponseSchema(BaseModel):
    id: int
    trip_id: int
    user_id: int
    title: str
    description: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostRequestSchema(BaseModel):
    id: Optional[int] = None
    stage_id: Optional[int] = None
    trip_id: Optional[int] = None
    user_id: Optional[int] = None
    story: Optional[str] = None

    def to_entity(self) -> Post:
        return Post(
            id=self.id,
            stage_id=self.stage_id,
            trip_id=self.trip_id,
            user_id=self.user_id,
            story=self.story,
        )


class PostResponseSchema(BaseModel):
    id: int
    stage_id: int
    trip_id: int
    user_id: int
    story: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AttractionRequestSchema(BaseModel):
    """Attraction body.

    Popularity and score are accepted in any form and discarded: the server
    owns both.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    popularity: Optional[str] = None
    score: Optional[int] = None

    def to_entity(self) -> Attraction:
        return Attraction(id=self.id, name=self.name, description=self.description)


class AttractionResponseSchema(BaseModel):
    id: int
    name: str
    description: str
    popularity: PopularityTier
    score: int

    model_config = ConfigDict(from_attributes=True)


class AttractionStageResponseSchema(BaseModel):
    id: Optional[int] = None
    attraction_id: int
    stage_id: int

    model_config = ConfigDict(from_attributes=True)

