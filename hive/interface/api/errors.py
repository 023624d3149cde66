"""Exception handlers translating domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hive.domain.error import (
    DomainError,
    DuplicateError,
    ForbiddenError,
    NotFoundError,
    QuotaExceededError,
    UnauthorizedError,
    UpstreamFailureError,
    ValidationError,
)

# Checked in order; the first matching type wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (QuotaExceededError, status.HTTP_403_FORBIDDEN),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UpstreamFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (400 for unmapped subclasses)."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    content: dict[str, str | None] = {"detail": exc.message}

    if isinstance(exc, UpstreamFailureError):
        content["error"] = exc.detail
        logfire.error(
            "Upstream failure",
            path=request.url.path,
            error=exc.message,
            detail=exc.detail,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
            error=exc.message,
        )

    return JSONResponse(status_code=status_code, content=content)


async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures surface as upstream failures."""
    return await handle_domain_error(
        request, UpstreamFailureError("Internal Server Error", detail=str(exc))
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
