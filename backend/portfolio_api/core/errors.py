"""
Exception handlers: translate domain errors into HTTP responses.

The services raise kinds, never status codes; this is the only place the
mapping lives. Every response body has the shape {"detail": "..."}.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.utils.exceptions import (
    AppException,
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    UnavailableError,
)

STATUS_BY_EXCEPTION: dict[type[AppException], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    UnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: AppException) -> int:
    """HTTP status for a domain exception (subclasses inherit their parent's)."""
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_BY_EXCEPTION:
            return STATUS_BY_EXCEPTION[exc_type]  # type: ignore[index]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    headers = {"Retry-After": "5"} if isinstance(exc, UnavailableError) else None
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": exc.detail},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
