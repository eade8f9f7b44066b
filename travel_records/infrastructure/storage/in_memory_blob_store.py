"""In-memory implementation of BlobStore for testing and local development."""
from typing import BinaryIO, Dict, Iterator, Optional, Tuple

from travel_records.domain.exceptions import BlobAlreadyExistsError, BlobNotFoundError
from travel_records.domain.repositories.blob_store import BlobItem, BlobStore


class InMemoryBlobStore(BlobStore):
    """Dictionary-backed container keyed by blob name."""

    def __init__(self, container_url: str = "memory://images"):
        self._container_url = container_url
        self._blobs: Dict[str, Tuple[bytes, Optional[str]]] = {}

    @property
    def container_url(self) -> str:
        return self._container_url

    def get(self, name: str) -> Optional[BlobItem]:
        if name not in self._blobs:
            return None
        return BlobItem(name=name, content_type=self._blobs[name][1])

    def read(self, name: str) -> bytes:
        """Raw content of a blob (test helper)."""
        if name not in self._blobs:
            raise BlobNotFoundError(name)
        return self._blobs[name][0]

    def put(self, name: str, data: BinaryIO, content_type: Optional[str] = None) -> BlobItem:
        if name in self._blobs:
            raise BlobAlreadyExistsError(name)
        self._blobs[name] = (data.read(), content_type)
        return BlobItem(name=name, content_type=content_type)

    def delete(self, name: str) -> None:
        if name not in self._blobs:
            raise BlobNotFoundError(name)
        del self._blobs[name]

    def list(self) -> Iterator[BlobItem]:
        # Snapshot so deletes during iteration are safe
        for name, (_, content_type) in sorted(self._blobs.items()):
            yield BlobItem(name=name, content_type=content_type)
