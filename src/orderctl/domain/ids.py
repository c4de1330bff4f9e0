"""Order ID generation.

Order ids are the first 8 hex chars of a random UUID4. Short enough to read
aloud, unique enough for a single run.

INVARIANT: IDs are permanent. Once assigned by a builder, an ID never changes.
"""

from __future__ import annotations

import uuid

ORDER_ID_LENGTH = 8


def generate_order_id() -> str:
    """Return a fresh short order id."""
    return uuid.uuid4().hex[:ORDER_ID_LENGTH]
