"""OrderService — assemble an order from plain mappings.

Pipeline: CUSTOMER → PRODUCTS → BUILDER CHAIN → BUILD → RESPOND

Input shapes (as read from JSON)::

    customer = {"id": "CLI001", "name": "Ana Silva", "email": "ana@example.com"}
    items = [
        {"kind": "physical", "name": "Book", "price": 75.90, "extra": 1.2, "quantity": 1},
        {"kind": "digital", "name": "Ebook", "price": 29.99, "quantity": 2},
    ]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from orderctl.domain.builder import OrderBuilder
from orderctl.domain.customer import Customer
from orderctl.domain.errors import InvalidArgumentError, OrderError
from orderctl.domain.factory import create_product
from orderctl.services.base import BaseService
from orderctl.services.result import ServiceResult


def _parse_timestamp(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid order date: {value!r}") from exc


def _extra_args(item: Mapping[str, Any]) -> tuple[Any, ...]:
    extra = item.get("extra")
    if extra is None:
        return ()
    if isinstance(extra, list):
        return tuple(extra)
    return (extra,)


class OrderService(BaseService):
    """Builds orders against the service's shared configuration."""

    def build_order(
        self,
        customer: Mapping[str, Any],
        items: Sequence[Mapping[str, Any]],
        *,
        status: str | None = None,
        created_at: datetime | str | None = None,
    ) -> ServiceResult:
        """Assemble and finalize one order.

        Failures carry the domain error code. Item-level failures add the
        item's ``index`` to ``error.detail``.
        """
        op = "build_order"
        warnings: list[str] = []
        builder = OrderBuilder(self._config)

        try:
            builder.with_customer(
                Customer(
                    id=customer.get("id", ""),
                    name=customer.get("name", ""),
                    email=customer.get("email", ""),
                )
            )
            if status is not None:
                builder.with_initial_status(status)
            if created_at is not None:
                builder.with_date(_parse_timestamp(created_at))
        except OrderError as exc:
            return self._failure(op, exc, warnings=warnings)

        for index, item in enumerate(items):
            try:
                product = create_product(
                    item.get("kind"),
                    item.get("name", ""),
                    item.get("price"),
                    *_extra_args(item),
                    warnings=warnings,
                )
                builder.add_item(product, item.get("quantity", 1))
            except OrderError as exc:
                return self._failure(op, exc, warnings=warnings, index=index)

        try:
            order = builder.build()
        except OrderError as exc:
            return self._failure(op, exc, warnings=warnings)

        return ServiceResult(ok=True, op=op, data=order.to_dict(), warnings=warnings)
