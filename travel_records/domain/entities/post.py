"""Post domain entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """Story posted on a stage."""
    id: Optional[int]
    stage_id: Optional[int]
    trip_id: Optional[int]
    user_id: Optional[int]
    story: Optional[str]
    created_at: Optional[datetime] = None
