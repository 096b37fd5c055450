"""Pagination query parameter dependency."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status

from src.pitchdesk.core.config import get_settings
from src.pitchdesk.core.errors import InvalidCursorError, InvalidQueryError
from src.pitchdesk.core.logging import get_logger
from src.pitchdesk.core.pagination import PaginationQuery

logger = get_logger(__name__)


async def get_pagination_query(
    limit: Annotated[
        int | None,
        Query(description="Number of items to return (default and maximum set by server config)"),
    ] = None,
    cursor: Annotated[
        str | None,
        Query(
            description=(
                "Opaque cursor for fetching the next page. "
                "Use the value of `nextCursor` from the previous response."
            )
        ),
    ] = None,
) -> PaginationQuery:
    """Decode `limit` and `cursor` into a PaginationQuery before any query runs."""
    settings = get_settings()
    if limit is None:
        limit = settings.default_page_limit

    try:
        return PaginationQuery.from_params(limit, cursor, max_limit=settings.max_page_limit)
    except InvalidCursorError as e:
        logger.info("Rejected pagination cursor")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid cursor",
        ) from e
    except InvalidQueryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e


Pagination = Annotated[PaginationQuery, Depends(get_pagination_query)]
