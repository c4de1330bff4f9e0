"""Order domain error taxonomy.

Every domain failure derives from :class:`OrderError` and carries a stable
``code`` that the service layer copies into ``ServiceError.code``.
"""

from __future__ import annotations

from typing import ClassVar


class OrderError(Exception):
    """Base class for all order-domain failures."""

    code: ClassVar[str] = "ORDER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(OrderError, ValueError):
    """A structurally invalid value was supplied by the caller."""

    code: ClassVar[str] = "INVALID_ARGUMENT"


class LimitExceededError(OrderError):
    """An order already holds the configured maximum number of items."""

    code: ClassVar[str] = "LIMIT_EXCEEDED"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Maximum number of items per order ({limit}) exceeded.")
        self.limit = limit


class IncompleteStateError(OrderError):
    """``build()`` was called before all required fields were supplied."""

    code: ClassVar[str] = "INCOMPLETE_STATE"


class BuilderFinalizedError(IncompleteStateError):
    """A builder was used again after producing its order."""

    code: ClassVar[str] = "BUILDER_FINALIZED"
