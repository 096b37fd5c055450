"""Base repository with common CRUD operations and keyset pagination."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.pitchdesk.core.logging import get_logger
from src.pitchdesk.core.pagination import KeysetPlanner, Page, PaginationQuery

logger = get_logger(__name__)


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def paginate[T](
        self,
        statement: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        query: PaginationQuery,
        planner: KeysetPlanner,
        to_item: Callable[[Any], T],
        *,
        scalars: bool = True,
    ) -> Page[T]:
        """Execute keyset pagination on a scoped query.

        Args:
            statement: Base query carrying the caller's scope filters
            query: Page size and decoded cursor
            planner: Sort / tie-break columns for this listing
            to_item: Maps a fetched row to its list item
            scalars: True when the statement selects a single entity,
                False for column projections (rows read by label)

        Returns:
            Page of list items, ordered by (sort key desc, tie-break desc)
        """
        statement = planner.apply(statement, query)
        result = await self.session.execute(statement)
        rows = list(result.scalars().all()) if scalars else list(result.all())

        page = planner.build_page(rows, query, planner.cursor_of, to_item)
        logger.debug(
            "Fetched page",
            entity=self.model.__tablename__,
            limit=query.limit,
            returned=len(page.items),
            has_more=page.has_more,
            after_cursor=query.cursor is not None,
        )
        return page
