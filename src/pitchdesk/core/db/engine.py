"""Database engine management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.pitchdesk.core.config import get_settings

_engine: AsyncEngine | None = None


def _get_engine_kwargs() -> dict[str, Any]:
    """Pool sizing applies to server databases only; SQLite uses its own pool."""
    settings = get_settings()
    kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if not settings.is_sqlite:
        kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
        )
    return kwargs


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(settings.database_url, **_get_engine_kwargs())
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
