"""OrderBuilder — stepwise, validating assembly of an :class:`Order`.

Lifecycle: *collecting* → *finalized*. Setters and ``add_item`` may be
called in any order while collecting; required fields are only checked by
``build()``, since a half-built order is a valid intermediate state.

- ``with_customer`` / ``with_date`` / ``with_initial_status``: last write wins.
- ``add_item``: counts calls, not distinct products, against the current
  ``max_items_per_order`` read from the configuration at call time.
- ``build()``: validates, computes the total once, promotes the
  provisional status, and seals the builder.

A failed call leaves the builder unchanged. After a successful ``build()``
every further call raises :class:`BuilderFinalizedError`.

Builders are single-use and single-threaded. Concurrent calls on one
instance are the caller's responsibility to prevent.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Self

import structlog

from orderctl.domain.errors import (
    BuilderFinalizedError,
    IncompleteStateError,
    InvalidArgumentError,
    LimitExceededError,
)
from orderctl.domain.ids import generate_order_id
from orderctl.domain.lifecycle import OrderStatus, finalize_status
from orderctl.domain.orders import Item, Order

if TYPE_CHECKING:
    from orderctl.config.shared import SharedConfiguration
    from orderctl.domain.customer import Customer
    from orderctl.domain.products import Product

log = structlog.get_logger(__name__)


class OrderBuilder:
    """Fluent builder for a single order.

    Usage::

        order = (
            OrderBuilder()
            .with_customer(customer)
            .add_item(book, 1)
            .add_item(ebook, 2)
            .build()
        )
    """

    def __init__(self, config: SharedConfiguration | None = None) -> None:
        if config is None:
            from orderctl.config.shared import get_shared_configuration

            config = get_shared_configuration()
        self._config = config
        self._order = Order(
            id=generate_order_id(),
            created_at=datetime.now(UTC),
            status=str(OrderStatus.INITIAL_PENDING),
        )
        self._item_count = 0
        self._built = False

    @property
    def order_id(self) -> str:
        return self._order.id

    @property
    def item_count(self) -> int:
        """Number of successful ``add_item`` calls so far."""
        return self._item_count

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderFinalizedError(f"Order {self._order.id} has already been built.")

    def with_customer(self, customer: Customer | None) -> Self:
        self._ensure_open()
        if customer is None:
            raise InvalidArgumentError("Customer must not be None.")
        self._order.customer = customer
        return self

    def add_item(self, product: Product | None, quantity: Any) -> Self:
        """Append a line item, snapshotting the product's current price.

        Raises:
            InvalidArgumentError: Missing product or non-positive quantity.
            LimitExceededError: The configured item limit is already reached.
        """
        self._ensure_open()
        if product is None:
            raise InvalidArgumentError("Product must not be None when adding an item.")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgumentError("Item quantity must be a positive integer.")

        limit = self._config.max_items_per_order
        if self._item_count >= limit:
            log.info("order.limit_exceeded", order_id=self._order.id, limit=limit)
            raise LimitExceededError(limit)

        self._order._append_item(Item(product=product, quantity=quantity, unit_price=product.price))
        self._item_count += 1
        return self

    def with_date(self, timestamp: datetime | None) -> Self:
        self._ensure_open()
        if timestamp is None:
            raise InvalidArgumentError("Order date must not be None.")
        self._order.created_at = timestamp
        return self

    def with_initial_status(self, status: str | None) -> Self:
        self._ensure_open()
        if not isinstance(status, str) or not status.strip():
            raise InvalidArgumentError("Initial status must not be empty.")
        self._order.status = status
        return self

    def build(self) -> Order:
        """Validate and return the finished order.

        Raises:
            IncompleteStateError: No customer, or no items.
            BuilderFinalizedError: The builder already produced its order.
        """
        self._ensure_open()
        order = self._order
        if order.customer is None:
            raise IncompleteStateError("customer is required to build the order")
        if not order.items:
            raise IncompleteStateError("at least one item is required to build the order")

        order._compute_total()
        order.status = finalize_status(order.status)
        order.currency = self._config.default_currency
        self._built = True
        log.debug(
            "order.built",
            order_id=order.id,
            items=self._item_count,
            total=str(order.total),
            status=order.status,
        )
        return order
