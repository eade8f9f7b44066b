"""Media name value object - the filename-encoded stage association.

Stage photos are stored under names shaped like
``{prefix}_{ownerId}_{stageId}_{suffix}.jpg``. The stage id is the third
underscore-delimited segment, and only names with more than three segments
take part in stage filtering.
"""
from dataclasses import dataclass
from typing import Optional

from travel_records.constants import (
    MEDIA_EXTENSION,
    MEDIA_MIN_SEGMENTS,
    MEDIA_NAME_SEPARATOR,
    MEDIA_STAGE_SEGMENT,
)


@dataclass(frozen=True)
class MediaName:
    """Structured view of a stage photo name."""
    prefix: str
    owner_id: int
    stage_id: int
    suffix: str
    extension: str = MEDIA_EXTENSION

    def __post_init__(self):
        """Validate segments."""
        for label, value in (("prefix", self.prefix), ("suffix", self.suffix)):
            if not value or MEDIA_NAME_SEPARATOR in value:
                raise ValueError(f"Media name {label} must be non-empty and contain no '{MEDIA_NAME_SEPARATOR}'")
        if self.extension and not self.extension.startswith("."):
            raise ValueError(f"Extension must start with '.', got {self.extension!r}")

    @property
    def base_name(self) -> str:
        """Name without extension, used as the upload image id."""
        return MEDIA_NAME_SEPARATOR.join(
            [self.prefix, str(self.owner_id), str(self.stage_id), self.suffix]
        )

    def __str__(self) -> str:
        return f"{self.base_name}{self.extension}"


def encode_media_name(
    prefix: str, owner_id: int, stage_id: int, suffix: str, extension: str = MEDIA_EXTENSION
) -> str:
    """Build a stage photo name, e.g. ``img_12_5_a.jpg``."""
    return str(MediaName(prefix, owner_id, stage_id, suffix, extension))


def stage_id_from_name(name: Optional[str]) -> Optional[str]:
    """Return the raw stage segment of a blob name, or None if it has none.

    Names with three or fewer segments carry no stage association.
    """
    if not name:
        return None
    segments = name.split(MEDIA_NAME_SEPARATOR)
    if len(segments) < MEDIA_MIN_SEGMENTS:
        return None
    return segments[MEDIA_STAGE_SEGMENT]


def belongs_to_stage(name: Optional[str], stage_id: int) -> bool:
    """Check whether a blob name is associated with the given stage."""
    return stage_id_from_name(name) == str(stage_id)
