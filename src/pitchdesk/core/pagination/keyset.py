"""Keyset (seek) pagination planner.

Builds the range scan for one page and turns the fetched rows into a Page.
For ORDER BY sort DESC, id DESC with cursor at (t, i) the seek condition is:

    WHERE sort < t OR (sort = t AND id < i)

One extra row is fetched to detect whether another page exists.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, or_

from src.pitchdesk.core.errors import InvalidCursorError, InvalidQueryError
from src.pitchdesk.core.pagination.cursor import (
    PaginationCursor,
    decode_cursor,
    encode_cursor,
)


@dataclass(frozen=True, slots=True)
class PaginationQuery:
    """A request for one page: page size and optional position."""

    limit: int
    cursor: PaginationCursor | None = None

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise InvalidQueryError(f"limit must be a positive integer, got {self.limit!r}")

    @property
    def take(self) -> int:
        """Rows to fetch: one more than the page size."""
        return self.limit + 1

    @classmethod
    def from_params(
        cls,
        limit: int,
        cursor: str | None = None,
        *,
        max_limit: int | None = None,
    ) -> "PaginationQuery":
        """Build a query from raw request parameters.

        The cursor is decoded here, before any query is issued.

        Raises:
            InvalidQueryError: If limit is not positive or exceeds max_limit
            InvalidCursorError: If the cursor token cannot be decoded
        """
        if max_limit is not None and limit > max_limit:
            raise InvalidQueryError(f"limit must not exceed {max_limit}")
        decoded = decode_cursor(cursor) if cursor else None
        return cls(limit=limit, cursor=decoded)


@dataclass
class Page[T]:
    """One page of results plus its pagination metadata."""

    items: list[T]
    limit: int
    has_more: bool = False
    next_cursor: str | None = None


@dataclass(frozen=True, slots=True)
class KeysetPlanner:
    """Ordering and seek predicate over a (timestamp, unique id) column pair.

    A cursor whose id is well-formed JSON but not parseable by
    ``parse_tie_break`` (a non-UUID string for UUID columns) is rejected with
    InvalidCursorError, since the database cannot compare it to the column.
    Any parseable id is accepted, even one that matches no row.

    Attributes:
        sort_column: Timestamp column used as the primary sort key
        tie_break_column: Unique column that makes the ordering total
        parse_tie_break: Converts the cursor's string id into the column's
            Python type. Defaults to UUID.
    """

    sort_column: Any
    tie_break_column: Any
    parse_tie_break: Callable[[str], Any] = field(default=UUID)

    def seek_condition(self, cursor: PaginationCursor) -> ColumnElement[bool]:
        """Rows strictly after the cursor under descending order."""
        try:
            tie_break = self.parse_tie_break(cursor.tie_break_key)
        except (TypeError, ValueError) as e:
            raise InvalidCursorError() from e

        return or_(
            self.sort_column < cursor.sort_key,
            and_(
                self.sort_column == cursor.sort_key,
                self.tie_break_column < tie_break,
            ),
        )

    def cursor_of(self, row: Any) -> PaginationCursor:
        """Read the cursor position from a model instance or a labeled row."""
        return PaginationCursor(
            sort_key=getattr(row, self.sort_column.key),
            tie_break_key=str(getattr(row, self.tie_break_column.key)),
        )

    def apply(self, statement: Select[Any], query: PaginationQuery) -> Select[Any]:
        """Add seek condition, ordering and over-fetch limit to a scoped statement.

        Scope filters already on the statement are ANDed with the seek
        condition by ``Select.where``.
        """
        if query.cursor is not None:
            statement = statement.where(self.seek_condition(query.cursor))
        return statement.order_by(
            self.sort_column.desc(),
            self.tie_break_column.desc(),
        ).limit(query.take)

    def build_page[R, T](
        self,
        rows: Sequence[R],
        query: PaginationQuery,
        cursor_of: Callable[[R], PaginationCursor],
        to_item: Callable[[R], T],
    ) -> Page[T]:
        """Trim the over-fetched row and derive has_more / next_cursor.

        Args:
            rows: Up to ``query.take`` rows in planner order
            query: The query the rows were fetched for
            cursor_of: Extracts (sort key, tie-break key) from a row
            to_item: Maps a row to its list item
        """
        has_more = len(rows) > query.limit
        kept = rows[: query.limit] if has_more else rows

        next_cursor = None
        if has_more and kept:
            next_cursor = encode_cursor(cursor_of(kept[-1]))

        return Page(
            items=[to_item(row) for row in kept],
            limit=query.limit,
            has_more=has_more,
            next_cursor=next_cursor,
        )
