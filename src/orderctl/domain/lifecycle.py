"""Order status defaults.

Status is free text chosen by the caller. Only the two-stage default is
owned by the tool: a builder starts at ``initial-pending`` and ``build()``
promotes that exact value to ``pending``. Any caller-supplied status is
left untouched.
"""

from __future__ import annotations

from enum import StrEnum


class OrderStatus(StrEnum):
    """Statuses assigned by the builder itself."""

    INITIAL_PENDING = "initial-pending"
    PENDING = "pending"


def finalize_status(status: str) -> str:
    """Return the status an order carries once built."""
    if status == OrderStatus.INITIAL_PENDING:
        return str(OrderStatus.PENDING)
    return status
