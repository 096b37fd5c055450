"""Exception handlers with request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.pitchdesk.core.errors import (
    DomainError,
    DuplicateResourceError,
    ForbiddenError,
    InvalidCursorError,
    InvalidReferenceError,
    NotFoundError,
    PaginationError,
)
from src.pitchdesk.core.logging import get_logger

logger = get_logger(__name__)

_DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (PaginationError, status.HTTP_400_BAD_REQUEST),
    (InvalidReferenceError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateResourceError, status.HTTP_409_CONFLICT),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
]


def _error_response(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": correlation_id.get(),
        },
    )


def status_for_domain_error(exc: DomainError) -> int:
    """Map a domain error to its HTTP status (400 for anything unlisted)."""
    for error_type, status_code in _DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for_domain_error(exc)
        if isinstance(exc, InvalidCursorError):
            # Never echo the token back
            logger.info("Rejected pagination cursor", path=request.url.path)
        else:
            logger.warning(
                "Domain error",
                error=type(exc).__name__,
                detail=exc.message,
                path=request.url.path,
            )
        return _error_response(status_code, exc.message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
