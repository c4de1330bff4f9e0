"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the shared configuration handle,
and result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.output.formatters import OutputSettings, format_result
from orderctl.output.renderers import render_warnings

if TYPE_CHECKING:
    from orderctl.config.settings import OrderSettings
    from orderctl.config.shared import SharedConfiguration
    from orderctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The shared configuration is seeded from settings on first use, so
    ``--help`` and ``--version`` never touch it.
    """

    def __init__(self, settings: OrderSettings) -> None:
        self.settings = settings
        self._config: SharedConfiguration | None = None

        from orderctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def config(self) -> SharedConfiguration:
        """The process-wide configuration, seeded from settings once."""
        if self._config is None:
            from orderctl.config.shared import configure_shared

            self._config = configure_shared(self.settings)
        return self._config

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr so they
          don't pollute piped output.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payloads already carry their warnings.
            if result.warnings and not settings.json_output:
                click.echo(render_warnings(result.warnings), err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
