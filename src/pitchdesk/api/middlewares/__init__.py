"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from src.pitchdesk.core.config import Settings
from src.pitchdesk.core.logging import bind_request_context, clear_request_context

__all__ = ["logging_context_middleware", "setup_middlewares"]


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id, method and path to log context for the request."""
    clear_request_context()
    bind_request_context(correlation_id.get(), method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_request_context()


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps in reverse order of registration: the last one added
    is the outermost, so the correlation ID is registered last.
    """
    # Logging context - needs the correlation ID already set
    app.middleware("http")(logging_context_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)
