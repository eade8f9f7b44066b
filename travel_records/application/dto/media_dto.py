"""Data Transfer Objects for media operations."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ImageDTO:
    """Stored image as seen by clients."""
    uri: Optional[str] = None
    name: Optional[str] = None
    content_type: Optional[str] = None


@dataclass
class ImageResponseDTO:
    """Outcome of an upload or delete.

    Expected failures (missing file, duplicate name, unknown image) are
    reported here with ``error=True`` instead of being raised.
    """
    status: str = ""
    error: bool = False
    image: ImageDTO = field(default_factory=ImageDTO)
