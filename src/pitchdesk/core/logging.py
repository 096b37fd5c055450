"""Logging configuration using structlog."""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set library log levels to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_request_context(
    request_id: str | None,
    method: str | None = None,
    path: str | None = None,
) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID for the current request.
        method: HTTP method, if known.
        path: Request path (never the query string, which may carry cursors).
    """
    if request_id:
        bind_contextvars(request_id=request_id)
    if method:
        bind_contextvars(method=method)
    if path:
        bind_contextvars(path=path)


def bind_user_context(user_id: UUID, email: str | None = None) -> None:
    """Bind user-level context to all subsequent log calls.

    Args:
        user_id: The authenticated user's ID.
        email: Optional user email for additional context.
               Only logged if settings.log_user_emails is True (GDPR compliance).
    """
    from src.pitchdesk.core.config import get_settings

    bind_contextvars(user_id=str(user_id))
    settings = get_settings()
    if email and settings.log_user_emails:
        bind_contextvars(user_email=email)


def bind_organization_context(organization_id: UUID) -> None:
    """Bind the organization a request is scoped to."""
    bind_contextvars(organization_id=str(organization_id))


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
