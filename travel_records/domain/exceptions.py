"""Domain and store exceptions.

Domain errors describe outcomes the HTTP layer maps to client responses.
Store errors are raised by EntityStore.save(); the services translate the
ones they can explain and re-raise the rest untouched.
"""
from typing import Optional


class TravelRecordsError(Exception):
    """Base class for all domain errors."""


class ValidationError(TravelRecordsError):
    """A required field is empty or invalid."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class IdMismatchError(TravelRecordsError):
    """Path id and body id differ on an update."""

    def __init__(self, path_id: int, body_id: Optional[int]):
        super().__init__(f"Path id {path_id} does not match body id {body_id}")
        self.path_id = path_id
        self.body_id = body_id


class ReferentialError(TravelRecordsError):
    """A referenced record does not exist."""

    def __init__(self, kind: str, record_id: Optional[int]):
        super().__init__(f"{kind} {record_id} does not exist")
        self.kind = kind
        self.record_id = record_id


class ConflictError(TravelRecordsError):
    """Uniqueness violated, either by pre-check or by the store on save."""


class NotFoundError(TravelRecordsError):
    """Lookup by id, username or relation found nothing."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message


class InvalidCredentialsError(TravelRecordsError):
    """Username exists but the password does not match."""


class StoreError(Exception):
    """Base class for persistent store failures."""


class StoreConstraintError(StoreError):
    """The store rejected a save because of a constraint it enforces."""


class StoreConcurrencyError(StoreError):
    """An update or delete affected no row (lost update)."""


class BlobStoreError(Exception):
    """Base class for blob store failures."""


class BlobNotFoundError(BlobStoreError):
    """The requested blob does not exist."""


class BlobAlreadyExistsError(BlobStoreError):
    """A blob with the same name already exists."""
