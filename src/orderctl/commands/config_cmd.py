"""Command group: inspect and change the shared configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.commands._base import OrderGroup
from orderctl.services.configuration import ConfigService

if TYPE_CHECKING:
    from orderctl.commands._context import AppContext


@click.group(
    cls=OrderGroup,
    examples="""\
  orderctl config show
  orderctl config set --max-items 10 --currency USD""",
)
def config() -> None:
    """Show or change order assembly limits."""


@config.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the current configuration."""
    app.emit(ConfigService(app.config).show())


@config.command(
    name="set",
    examples="""\
  orderctl config set --max-items 10
  orderctl config set --currency USD""",
)
@click.option("--max-items", type=int, default=None, help="Maximum items per order.")
@click.option("--currency", default=None, help="Default currency code.")
@click.pass_obj
def set_cmd(app: AppContext, max_items: int | None, currency: str | None) -> None:
    """Change configuration values for this process only.

    Changes are not saved. To persist them, set [orders] in orderctl.toml
    or the ORDERCTL_ORDERS__MAX_ITEMS_PER_ORDER and
    ORDERCTL_ORDERS__DEFAULT_CURRENCY environment variables.

    Non-positive limits and blank currency codes are ignored with a warning.
    """
    app.emit(ConfigService(app.config).update(max_items_per_order=max_items, default_currency=currency))
