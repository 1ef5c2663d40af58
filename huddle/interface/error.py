"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from huddle.domain.error import (
    ConflictError,
    DepthExceededError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotAuthenticatedError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

# Most specific first; DomainError catches anything unlisted
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (DepthExceededError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail": ...}``."""
    status_code = status_for(exc)
    body: dict = {"detail": str(exc)}

    if isinstance(exc, DepthExceededError):
        body["depth"] = exc.depth
        body["max_depth"] = exc.max_depth

    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    headers = {"Retry-After": "5"} if isinstance(exc, StoreUnavailableError) else None
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
