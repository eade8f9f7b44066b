"""Media association resolver - stage photos in the blob store.

Uploads are stored as ``{image_id}{ext}``, keeping the extension of the
incoming file. Downloads and deletes always look for ``{image_id}.jpg``.
Stage listings rely on the ``{prefix}_{ownerId}_{stageId}_{suffix}`` naming
convention; names that do not follow it only show up in the full listing.
"""
import logging
import mimetypes
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from PIL import Image, UnidentifiedImageError

from travel_records.application.dto.media_dto import ImageDTO, ImageResponseDTO
from travel_records.application.services.validation import is_empty
from travel_records.constants import MEDIA_EXTENSION, MEDIA_STAGING_PREFIX
from travel_records.domain.exceptions import (
    BlobAlreadyExistsError,
    BlobNotFoundError,
    BlobStoreError,
)
from travel_records.domain.repositories.blob_store import BlobItem, BlobStore
from travel_records.domain.value_objects.media_name import belongs_to_stage

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def detect_content_type(path: Path, name: str) -> str:
    """Sniff the image format with Pillow, falling back to the file name."""
    try:
        with Image.open(path) as img:
            mime = Image.MIME.get(img.format)
            if mime:
                return mime
    except (UnidentifiedImageError, OSError):
        pass
    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_CONTENT_TYPE


class MediaService:
    """Upload, download, delete and list stage photos."""

    def __init__(self, blob_store: BlobStore, staging_dir: Optional[str] = None):
        self._blobs = blob_store
        self._staging_dir = Path(staging_dir or ".")

    def upload(
        self,
        data: Optional[BinaryIO],
        filename: Optional[str],
        image_id: str,
        content_type: Optional[str] = None,
    ) -> ImageResponseDTO:
        """Store an incoming file as ``{image_id}{ext}``."""
        if data is None or is_empty(filename) or is_empty(image_id):
            return ImageResponseDTO(error=True, status="Invalid file or filename is null.")

        name = f"{image_id}{os.path.splitext(filename)[1]}"
        if os.path.basename(name) != name or "/" in name:
            return ImageResponseDTO(error=True, status=f"Invalid file name {name}.")

        try:
            staged = self._stage(data, name)
        except OSError as e:
            logger.error(f"Could not stage upload {name}: {e}")
            return ImageResponseDTO(error=True, status=f"Unexpected error: {e}")

        try:
            content_type = content_type or detect_content_type(staged, name)
            with open(staged, "rb") as fh:
                item = self._blobs.put(name, fh, content_type)
        except BlobAlreadyExistsError:
            logger.error(f"File with name {name} already exists in container")
            return ImageResponseDTO(
                error=True,
                status=f"File with name {name} already exists. Please use another name.",
            )
        except (BlobStoreError, OSError) as e:
            logger.error(f"Unexpected error uploading {name}: {e}")
            return ImageResponseDTO(error=True, status=f"Unexpected error: {e}")
        finally:
            staged.unlink(missing_ok=True)

        logger.info(f"Uploaded {name}")
        return ImageResponseDTO(
            error=False,
            status=f"File {name} Uploaded Successfully",
            image=self._to_dto(item),
        )

    def download(self, image_id: str) -> Optional[ImageDTO]:
        """Look up ``{image_id}.jpg``; None if it does not exist."""
        name = f"{image_id}{MEDIA_EXTENSION}"
        item = self._blobs.get(name)
        if item is None:
            logger.error(f"File {name} was not found.")
            return None
        return self._to_dto(item)

    def delete(self, image_id: str) -> ImageResponseDTO:
        """Delete ``{image_id}.jpg``."""
        name = f"{image_id}{MEDIA_EXTENSION}"
        try:
            self._blobs.delete(name)
        except BlobNotFoundError:
            logger.error(f"File {name} was not found.")
            return ImageResponseDTO(error=True, status=f"File with name {name} not found.")

        return ImageResponseDTO(error=False, status=f"File: {name} has been successfully deleted.")

    def list(self) -> Iterator[ImageDTO]:
        """Every image in the container. Each call starts a fresh listing."""
        for item in self._blobs.list():
            yield self._to_dto(item)

    def list_by_stage(self, stage_id: int) -> Iterator[ImageDTO]:
        """Images whose name carries ``stage_id`` in its stage segment."""
        for item in self._blobs.list():
            if belongs_to_stage(item.name, stage_id):
                yield self._to_dto(item)

    def _to_dto(self, item: BlobItem) -> ImageDTO:
        return ImageDTO(
            uri=self._blobs.url_for(item.name),
            name=item.name,
            content_type=item.content_type,
        )

    def _stage(self, data: BinaryIO, name: str) -> Path:
        """Spool the upload to a staging file of its own.

        Concurrent uploads of the same name never share a staged file.
        """
        self._staging_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=self._staging_dir,
            prefix=MEDIA_STAGING_PREFIX,
            suffix=os.path.splitext(name)[1],
            delete=False,
        ) as fh:
            staged = Path(fh.name)
            try:
                shutil.copyfileobj(data, fh)
            except OSError:
                fh.close()
                staged.unlink(missing_ok=True)
                raise
        return staged
