"""Google Cloud Storage implementation of BlobStore."""
import logging
import os
from typing import BinaryIO, Iterator, Optional

from google.api_core.exceptions import GoogleAPICallError, NotFound, PreconditionFailed
from google.cloud import storage

from travel_records.config import settings
from travel_records.domain.exceptions import (
    BlobAlreadyExistsError,
    BlobNotFoundError,
    BlobStoreError,
)
from travel_records.domain.repositories.blob_store import BlobItem, BlobStore

logger = logging.getLogger(__name__)


class GCSBlobStore(BlobStore):
    """Stage photo container backed by a GCS bucket."""

    def __init__(self, bucket_name: Optional[str] = None, base_url: Optional[str] = None):
        self.bucket_name = bucket_name or settings.GCS_BUCKET_NAME
        self.base_url = base_url or settings.GCS_BASE_URL
        self._client: Optional[storage.Client] = None
        self._bucket: Optional[storage.Bucket] = None

    @property
    def client(self) -> storage.Client:
        """Lazy initialization of GCS client."""
        if self._client is None:
            creds_path = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
            if creds_path and os.path.exists(creds_path):
                self._client = storage.Client.from_service_account_json(
                    creds_path,
                    project=settings.GCS_PROJECT_ID
                )
            elif settings.GCS_PROJECT_ID:
                self._client = storage.Client(project=settings.GCS_PROJECT_ID)
            else:
                # Use default credentials
                self._client = storage.Client()
        return self._client

    @property
    def bucket(self) -> storage.Bucket:
        """Lazy initialization of bucket."""
        if self._bucket is None:
            self._bucket = self.client.bucket(self.bucket_name)
        return self._bucket

    @property
    def container_url(self) -> str:
        return f"{self.base_url}/{self.bucket_name}"

    def get(self, name: str) -> Optional[BlobItem]:
        blob = self.bucket.get_blob(name)
        if blob is None:
            return None
        return BlobItem(name=blob.name, content_type=blob.content_type)

    def put(self, name: str, data: BinaryIO, content_type: Optional[str] = None) -> BlobItem:
        blob = self.bucket.blob(name)
        try:
            # generation 0 means "only if no live object has this name"
            blob.upload_from_file(data, content_type=content_type, if_generation_match=0)
        except PreconditionFailed as e:
            raise BlobAlreadyExistsError(name) from e
        except GoogleAPICallError as e:
            logger.error(f"GCS upload failed for {name}: {e}")
            raise BlobStoreError(str(e)) from e
        logger.info(f"Uploaded blob to GCS: {self.url_for(name)}")
        return BlobItem(name=name, content_type=blob.content_type or content_type)

    def delete(self, name: str) -> None:
        try:
            self.bucket.delete_blob(name)
        except NotFound as e:
            raise BlobNotFoundError(name) from e
        logger.info(f"Deleted blob from GCS: {name}")

    def list(self) -> Iterator[BlobItem]:
        for blob in self.client.list_blobs(self.bucket_name):
            yield BlobItem(name=blob.name, content_type=blob.content_type)
