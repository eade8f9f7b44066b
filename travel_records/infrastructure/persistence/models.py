"""SQLAlchemy models for the travel records tables.

Reference columns (user_id, trip_id, ...) are plain indexed integers, not
foreign keys: referential checks happen in the application layer and deletes
never cascade. Primary keys are assigned by the application, except for the
has_attractions surrogate key.
"""
from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    String,
    Text,
)

from travel_records.infrastructure.persistence.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=False)
    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime)


class Stage(Base):
    __tablename__ = "stages"

    id = Column(Integer, primary_key=True, autoincrement=False)
    trip_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=False)
    stage_id = Column(Integer, nullable=False, index=True)
    trip_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    story = Column(Text, nullable=False)
    created_at = Column(DateTime)


class Attraction(Base):
    __tablename__ = "attractions"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    popularity = Column(String(16), nullable=False, default="LOW", index=True)
    score = Column(Integer, nullable=False, default=0)


class HasAttraction(Base):
    __tablename__ = "has_attractions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    attraction_id = Column(Integer, nullable=False, index=True)
    stage_id = Column(Integer, nullable=False, index=True)
