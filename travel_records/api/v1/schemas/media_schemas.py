"""Schemas for image endpoints."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ImageSchema(BaseModel):
    """Stored image."""
    uri: Optional[str] = None
    name: Optional[str] = None
    content_type: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ImageResponseSchema(BaseModel):
    """Outcome of an upload or delete."""
    status: str
    error: bool
    image: ImageSchema

    model_config = ConfigDict(from_attributes=True)
