"""Pagination schemas for cursor-based pagination."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.pitchdesk.core.pagination import Page

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for API schemas: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(ApiModel):
    """Pagination metadata for one page."""

    limit: int = Field(description="Limit applied to this page", examples=[50])
    has_more: bool = Field(
        default=False,
        description="Whether there is another page after this one",
    )
    next_cursor: str | None = Field(
        default=None,
        description="Opaque cursor for fetching the next page. None if no more pages.",
    )


class PaginatedResponse(ApiModel, Generic[T]):
    """Generic paginated response with cursor-based pagination.

    The cursor is an opaque string that encodes the position in the result set.
    Clients should treat it as an opaque token and pass it back to get the next page.
    """

    items: list[T]
    pagination: PaginationMeta

    @classmethod
    def from_page(cls, page: Page[T]) -> "PaginatedResponse[T]":
        return cls(
            items=page.items,
            pagination=PaginationMeta(
                limit=page.limit,
                has_more=page.has_more,
                next_cursor=page.next_cursor,
            ),
        )
