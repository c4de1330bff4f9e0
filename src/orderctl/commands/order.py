"""Command group: order assembly from a JSON file."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from orderctl.commands._base import OrderGroup
from orderctl.services.order import OrderService
from orderctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from orderctl.commands._context import AppContext


def _invalid_file(message: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="build_order",
        error=ServiceError(code="INVALID_FILE", message=message),
    )


@click.group(
    cls=OrderGroup,
    examples="""\
  orderctl order build order.json
  orderctl --json order build order.json""",
)
def order() -> None:
    """Assemble orders."""


@order.command(
    examples="""\
  orderctl order build order.json
  orderctl -v order build order.json
  orderctl --json order build order.json"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def build(app: AppContext, file: str) -> None:
    """Build an order described by a JSON file.

    FILE must contain a JSON object with "customer" (id, name, email) and
    "items" (kind, name, price, optional extra, quantity), plus optional
    "status" and "date" (ISO 8601).
    """
    try:
        with open(file, encoding="utf-8") as f:
            payload: Any = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        app.emit(_invalid_file(f"Error reading {file}: {exc}"))
        return

    if not isinstance(payload, dict):
        app.emit(_invalid_file("Order file must contain a JSON object."))
        return

    customer = payload.get("customer")
    items = payload.get("items", [])
    if not isinstance(customer, dict) or not isinstance(items, list):
        app.emit(_invalid_file('Order file needs a "customer" object and an "items" array.'))
        return
    if not all(isinstance(item, dict) for item in items):
        app.emit(_invalid_file('Every entry in "items" must be a JSON object.'))
        return

    app.emit(
        OrderService(app.config).build_order(
            customer,
            items,
            status=payload.get("status"),
            created_at=payload.get("date"),
        )
    )
