"""Subcommand modules for orderctl.

Provides register_commands() which uses deferred imports to keep
``orderctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from orderctl.commands.config_cmd import config
    from orderctl.commands.order import order
    from orderctl.commands.product import product

    cli.add_command(product)
    cli.add_command(order)
    cli.add_command(config)
