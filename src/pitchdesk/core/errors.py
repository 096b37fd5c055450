"""Domain errors.

Raised by services and the pagination engine. They carry no HTTP knowledge;
routers and the handlers in ``core.exceptions`` map them to status codes.
"""


class DomainError(Exception):
    """Base class for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """A referenced entity does not exist (or is outside the caller's scope)."""


class DuplicateResourceError(DomainError):
    """An operation would violate a uniqueness invariant."""


class ForbiddenError(DomainError):
    """The caller lacks the role required for an operation."""


class PaginationError(DomainError):
    """Base class for client-side pagination input errors."""


class InvalidCursorError(PaginationError):
    """Cursor token is malformed, not base64, not JSON, or has the wrong shape."""

    def __init__(self, message: str = "Invalid cursor") -> None:
        super().__init__(message)


class InvalidQueryError(PaginationError):
    """Page size is not a positive integer within the allowed range."""


class InvalidReferenceError(DomainError):
    """A referenced entity exists but lies outside the scope of the operation."""
