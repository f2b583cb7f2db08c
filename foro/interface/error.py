"""Mapping from domain and adapter errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from foro.adapter.error import AdapterError, StorageError
from foro.domain.error import (
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def to_http_exception(error: DomainError | AdapterError, action: str) -> HTTPException:
    """Translate an error raised while performing ``action``.

    ValidationError → 400 (with the offending field), NotFoundError → 404,
    PersistenceError and StorageError → 503, anything else → 500.
    """
    if isinstance(error, ValidationError):
        logfire.warn(f"{action} validation error", error=str(error), field=error.field)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": error.message, "field": error.field},
        )
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action}: not found", identifier=error.identifier)
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": str(error)},
        )
    if isinstance(error, PersistenceError):
        logfire.error(
            f"{action}: store unavailable",
            operation=error.operation,
            error=str(error.cause),
        )
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": "Post store is unavailable"},
        )
    if isinstance(error, StorageError):
        logfire.error(f"{action}: image storage unavailable", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"message": "Image storage is unavailable"},
        )

    logfire.error(f"Unexpected error in {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": f"Failed to {action}"},
    )
