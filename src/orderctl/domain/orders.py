"""Order and Item entities produced by :class:`~orderctl.domain.builder.OrderBuilder`.

The order owns its item list exclusively. Readers get a tuple copy from
:attr:`Order.items`; only the builder appends, through ``_append_item``.
``total`` is computed once at build time and is not kept in sync with
later item changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from orderctl.domain.customer import Customer
from orderctl.domain.errors import InvalidArgumentError
from orderctl.domain.products import Product, to_decimal


@dataclass(frozen=True)
class Item:
    """A line item: product, quantity, and unit price captured at add-time."""

    product: Product
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        if self.product is None:
            raise InvalidArgumentError("Item product must not be None.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgumentError("Item quantity must be an integer.")
        if self.quantity <= 0:
            raise InvalidArgumentError("Item quantity must be positive.")
        unit_price = to_decimal(self.unit_price, "Item unit price")
        if not unit_price.is_finite() or unit_price <= 0:
            raise InvalidArgumentError("Item unit price must be positive.")
        object.__setattr__(self, "unit_price", unit_price)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "description": self.product.describe(),
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "subtotal": str(self.subtotal),
        }


@dataclass(eq=False)
class Order:
    """A purchase order. Equality is by ``id`` only."""

    id: str
    created_at: datetime
    status: str
    customer: Customer | None = None
    total: Decimal = Decimal("0")
    currency: str = ""
    _items: list[Item] = field(default_factory=list, init=False, repr=False)

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the item sequence in insertion order."""
        return tuple(self._items)

    def _append_item(self, item: Item) -> None:
        self._items.append(item)

    def _compute_total(self) -> Decimal:
        self.total = sum((item.subtotal for item in self._items), Decimal("0"))
        return self.total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customer": self.customer.to_dict() if self.customer else None,
            "created_at": self.created_at.isoformat(),
            "status": self.status,
            "currency": self.currency,
            "items": [item.to_dict() for item in self._items],
            "item_count": len(self._items),
            "total": str(self.total),
        }
