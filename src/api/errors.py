"""Mapping of domain errors to HTTP responses."""

import logging

from fastapi import HTTPException, status

from domain.model.errors import (
    DomainError,
    DuplicateError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error raised by a service into an HTTPException."""
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.errors)
    if isinstance(error, UnauthorizedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, DuplicateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))

    # StorageError and anything unexpected stay opaque to the caller
    if not isinstance(error, StorageError):
        logger.error("Unhandled domain error", extra={"error": str(error), "type": type(error).__name__})
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
