"""User domain entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """User domain entity.

    ``password`` holds the hash once the user has been persisted.
    """
    id: Optional[int]
    username: Optional[str]
    email: Optional[str]
    password: Optional[str]
