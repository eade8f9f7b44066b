"""Map domain exceptions to HTTP responses."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from travel_records.domain.exceptions import (
    ConflictError,
    IdMismatchError,
    InvalidCredentialsError,
    NotFoundError,
    ReferentialError,
    ValidationError,
)


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.reason})


async def id_mismatch_handler(request: Request, exc: IdMismatchError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def referential_error_handler(request: Request, exc: ReferentialError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def conflict_error_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": "Invalid credentials"})


def register_exception_handlers(app: FastAPI):
    """Install handlers for every client-facing domain error.

    Store errors are not handled here and surface as 500s.
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(IdMismatchError, id_mismatch_handler)
    app.add_exception_handler(ReferentialError, referential_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
