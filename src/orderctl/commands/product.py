"""Command group: product creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.commands._base import OrderGroup
from orderctl.services.product import ProductService

if TYPE_CHECKING:
    from orderctl.commands._context import AppContext


def _coerce_extra(kind: str, raw: str | None) -> tuple[object, ...]:
    """Turn the EXTRA argument into the factory's loosely-typed argument.

    Physical products expect a number; text that does not parse is passed
    through as-is so the factory reports it and falls back to weight 0.
    """
    if raw is None:
        return ()
    if kind.strip().lower() != "digital":
        try:
            return (float(raw),)
        except ValueError:
            return (raw,)
    return (raw,)


@click.group(
    cls=OrderGroup,
    examples="""\
  orderctl product create physical "The Lord of the Rings" 75.90 1.2
  orderctl product create digital "Python Ebook" 29.99 https://example.com/ebook.pdf""",
)
def product() -> None:
    """Create products."""


@product.command(
    examples="""\
  orderctl product create physical Book 75.90 1.2
  orderctl product create FISICO Book 75.90
  orderctl --json product create digital "Antivirus Pro" 99.50 https://example.com/key"""
)
@click.argument("kind")
@click.argument("name")
@click.argument("price")
@click.argument("extra", required=False)
@click.pass_obj
def create(app: AppContext, kind: str, name: str, price: str, extra: str | None) -> None:
    """Create a product of KIND (physical or digital).

    EXTRA is the weight in kg for physical products, or the download URL
    for digital products.
    """
    app.emit(ProductService(app.config).create_product(kind, name, price, *_coerce_extra(kind, extra)))
