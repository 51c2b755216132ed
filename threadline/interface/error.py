"""Mapping of domain errors onto HTTP errors."""

from typing import TypeVar

import logfire
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from threadline.domain.error import (
    DomainError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from threadline.domain.result import Err, Result

T = TypeVar("T")


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a rejected command into an HTTP error."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, InvariantViolationError):
        logfire.error("Invariant violation", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )


def unwrap_or_raise(result: Result[T]) -> T:
    """Return the value of an Ok result, raising HTTPException for Err."""
    if isinstance(result, Err):
        raise to_http_exception(result.error)
    return result.value


async def source_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report comment source failures as a bad gateway."""
    logfire.error("Comment source failed", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Comment source unavailable: {exc}"},
    )
