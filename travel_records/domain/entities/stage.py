"""Stage domain entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Stage:
    """Stage of a trip."""
    id: Optional[int]
    trip_id: Optional[int]
    user_id: Optional[int]
    title: Optional[str]
    description: Optional[str]
    created_at: Optional[datetime] = None
