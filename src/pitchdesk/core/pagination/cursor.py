"""Cursor encoding and decoding for keyset pagination.

A cursor marks the last row of a page. It is the row's sort timestamp plus
its unique id, serialized as compact JSON and base64-encoded:

    {"createdAt": "2026-02-18T19:30:15.665000Z", "id": "0b0e...c1"}

Clients treat it as an opaque token and pass it back unchanged.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from src.pitchdesk.core.errors import InvalidCursorError

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")

# Upper bound on token length, far above the ~150 characters of a real cursor.
MAX_CURSOR_LENGTH = 1024


@dataclass(frozen=True, slots=True)
class PaginationCursor:
    """Position of the last item of the previous page.

    Attributes:
        sort_key: Naive UTC timestamp of the row (primary ordering field)
        tie_break_key: Stable unique identifier of the row, as a string
    """

    sort_key: datetime
    tie_break_key: str


def _format_timestamp(value: datetime) -> str:
    """Render a timestamp as canonical ISO-8601 UTC with a trailing Z.

    Naive datetimes are UTC by convention (see models.base.utc_now).
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"


def _parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp into a naive UTC datetime."""
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def encode_cursor(cursor: PaginationCursor) -> str:
    """Encode a cursor to an opaque, URL-safe string.

    Args:
        cursor: Position of the last item on the current page

    Returns:
        URL-safe base64 of the JSON payload. Deterministic for equal cursors.
    """
    payload = {
        "createdAt": _format_timestamp(cursor.sort_key),
        "id": cursor.tie_break_key,
    }
    raw = json.dumps(payload, separators=(",", ":"))
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode_cursor(token: str) -> PaginationCursor:
    """Decode an opaque cursor string.

    Both the URL-safe and the standard base64 alphabets are accepted, so
    tokens minted by older clients keep working.

    Args:
        token: Cursor string from a previous page's ``nextCursor``

    Returns:
        The decoded PaginationCursor

    Raises:
        InvalidCursorError: If the token is too long, not base64, not JSON,
            lacks a field, has a field of the wrong type, or carries a bad
            timestamp
    """
    if len(token) > MAX_CURSOR_LENGTH:
        raise InvalidCursorError()

    try:
        raw = base64.b64decode(token.translate(_URLSAFE_TO_STANDARD), validate=True)
        payload: Any = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError) as e:
        raise InvalidCursorError() from e

    if not isinstance(payload, dict):
        raise InvalidCursorError()

    created_at = payload.get("createdAt")
    row_id = payload.get("id")
    if not isinstance(created_at, str) or not isinstance(row_id, str):
        raise InvalidCursorError()

    try:
        sort_key = _parse_timestamp(created_at)
    except (ValueError, OverflowError) as e:
        raise InvalidCursorError() from e

    return PaginationCursor(sort_key=sort_key, tie_break_key=row_id)
