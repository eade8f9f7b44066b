"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- Entity and blob stores (in-memory)
- FastAPI test client with overridden dependencies
- Test data factories
"""

import os
from typing import Generator

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("USE_DB_REPOS", "false")
os.environ.setdefault("BLOB_BACKEND", "memory")
os.environ.setdefault("SWEEP_STAGING_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from travel_records.application.services import MediaService
from travel_records.core.dependencies import get_blob_store, get_entity_store, get_media_service
from travel_records.domain.entities import Attraction, AttractionStage, Stage, Trip, User
from travel_records.infrastructure.persistence import models  # noqa: F401 - registers tables
from travel_records.infrastructure.persistence.db import Base
from travel_records.infrastructure.persistence.repositories.in_memory_entity_store import (
    InMemoryEntityStore,
)
from travel_records.infrastructure.persistence.repositories.sqlalchemy_entity_store import (
    SQLAlchemyEntityStore,
)
from travel_records.infrastructure.storage.in_memory_blob_store import InMemoryBlobStore
from travel_records.main import app


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def sql_store(test_db_session) -> SQLAlchemyEntityStore:
    return SQLAlchemyEntityStore(test_db_session)


# ==============================================================================
# STORE FIXTURES
# ==============================================================================

@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def staging_dir(tmp_path):
    return tmp_path / "staging"


@pytest.fixture
def media_service(blob_store, staging_dir) -> MediaService:
    return MediaService(blob_store, staging_dir=str(staging_dir))


# ==============================================================================
# TEST CLIENT
# ==============================================================================

@pytest.fixture(scope="function")
def client(store, blob_store, staging_dir) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by fresh in-memory stores."""

    def override_get_entity_store():
        yield InMemoryEntityStore(store.database)

    app.dependency_overrides[get_entity_store] = override_get_entity_store
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    app.dependency_overrides[get_media_service] = lambda: MediaService(
        blob_store, staging_dir=str(staging_dir)
    )

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

def seed(store, *entities):
    """Insert records directly, bypassing the services."""
    for entity in entities:
        store.add(entity)
    store.save()
    return entities


@pytest.fixture
def seed_records():
    return seed


@pytest.fixture
def make_user():
    def _make(id=1, username="alice", email=None, password="secret"):
        return User(id=id, username=username, email=email or f"{username}@example.com", password=password)
    return _make


@pytest.fixture
def seeded_trip(store):
    """One user with one trip and one stage."""
    seed(
        store,
        User(id=1, username="alice", email="alice@example.com", password="x"),
        Trip(id=1, user_id=1, title="Alps", description="Summer hike"),
        Stage(id=1, trip_id=1, user_id=1, title="Day 1", description="Chamonix"),
    )
    return store


@pytest.fixture
def seeded_attractions(seeded_trip):
    """Two attractions, the first linked to stage 1."""
    seed(
        seeded_trip,
        Attraction(id=1, name="Mont Blanc", description="Summit"),
        Attraction(id=2, name="Mer de Glace", description="Glacier"),
        AttractionStage(attraction_id=1, stage_id=1),
    )
    return seeded_trip
