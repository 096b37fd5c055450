"""Cursor-based keyset pagination.

The cursor codec turns a row position into an opaque token and back. The
keyset planner turns a PaginationQuery into an ordered, bounded range scan
and the fetched rows into a Page.
"""

from src.pitchdesk.core.pagination.cursor import (
    PaginationCursor,
    decode_cursor,
    encode_cursor,
)
from src.pitchdesk.core.pagination.keyset import KeysetPlanner, Page, PaginationQuery

__all__ = [
    "KeysetPlanner",
    "Page",
    "PaginationCursor",
    "PaginationQuery",
    "decode_cursor",
    "encode_cursor",
]
