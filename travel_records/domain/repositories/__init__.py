"""Store interfaces."""
from travel_records.domain.repositories.entity_store import EntityStore
from travel_records.domain.repositories.blob_store import BlobItem, BlobStore

__all__ = [
    "BlobItem",
    "BlobStore",
    "EntityStore",
]
