"""Dependency injection for FastAPI routes.

Routes depend on services; services depend on the store abstractions.
"""
from functools import lru_cache
from typing import Iterator

from fastapi import Depends

from travel_records.application.services import (
    AttractionService,
    AttractionStageService,
    MediaService,
    PostService,
    StageService,
    TripService,
    UserService,
)
from travel_records.config import settings
from travel_records.domain.repositories import BlobStore, EntityStore
from travel_records.infrastructure.persistence.db import SessionLocal
from travel_records.infrastructure.persistence.repositories.in_memory_entity_store import (
    InMemoryDatabase,
    InMemoryEntityStore,
)
from travel_records.infrastructure.persistence.repositories.sqlalchemy_entity_store import (
    SQLAlchemyEntityStore,
)
from travel_records.infrastructure.storage.gcs_blob_store import GCSBlobStore
from travel_records.infrastructure.storage.in_memory_blob_store import InMemoryBlobStore


@lru_cache()
def get_in_memory_database() -> InMemoryDatabase:
    """Process-wide in-memory tables used when USE_DB_REPOS is off."""
    return InMemoryDatabase()


def get_entity_store() -> Iterator[EntityStore]:
    """Get the entity store for one request.

    - Default: in-memory unit of work over shared tables (fast tests/dev)
    - If USE_DB_REPOS=true: SQLAlchemy store on a per-request session
    """
    if not settings.USE_DB_REPOS:
        yield InMemoryEntityStore(get_in_memory_database())
        return

    session = SessionLocal()
    try:
        yield SQLAlchemyEntityStore(session)
    finally:
        session.close()


@lru_cache()
def get_blob_store() -> BlobStore:
    """Get blob store instance ("gcs" or in-memory)."""
    if settings.BLOB_BACKEND == "gcs":
        return GCSBlobStore()
    return InMemoryBlobStore()


def get_user_service(store: EntityStore = Depends(get_entity_store)) -> UserService:
    return UserService(store)


def get_trip_service(store: EntityStore = Depends(get_entity_store)) -> TripService:
    return TripService(store)


def get_stage_service(store: EntityStore = Depends(get_entity_store)) -> StageService:
    return StageService(store)


def get_post_service(store: EntityStore = Depends(get_entity_store)) -> PostService:
    return PostService(store)


def get_attraction_service(store: EntityStore = Depends(get_entity_store)) -> AttractionService:
    return AttractionService(store)


def get_attraction_stage_service(
    store: EntityStore = Depends(get_entity_store),
) -> AttractionStageService:
    return AttractionStageService(store)


def get_media_service(blob_store: BlobStore = Depends(get_blob_store)) -> MediaService:
    return MediaService(blob_store, staging_dir=settings.MEDIA_STAGING_DIR)
