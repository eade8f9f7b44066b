"""Blob store interface - flat key/value container for stage photos."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional


@dataclass(frozen=True)
class BlobItem:
    """Name and content type of a stored object."""
    name: str
    content_type: Optional[str] = None


class BlobStore(ABC):
    """Repository interface for the blob container."""

    @property
    @abstractmethod
    def container_url(self) -> str:
        """Public base URL of the container."""
        pass

    def url_for(self, name: str) -> str:
        """Public URL of a blob."""
        return f"{self.container_url}/{name}"

    @abstractmethod
    def get(self, name: str) -> Optional[BlobItem]:
        """Get blob properties, or None if it does not exist."""
        pass

    @abstractmethod
    def put(self, name: str, data: BinaryIO, content_type: Optional[str] = None) -> BlobItem:
        """Store a new blob.

        Raises:
            BlobAlreadyExistsError: a blob with this name exists
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete a blob.

        Raises:
            BlobNotFoundError: no blob with this name exists
        """
        pass

    @abstractmethod
    def list(self) -> Iterator[BlobItem]:
        """Iterate over every blob in the container."""
        pass
