"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robotsim.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from robotsim.config.settings import RobotsimSettings
    from robotsim.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RobotsimSettings) -> None:
        self.settings = settings

        from robotsim.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            human=self.settings.human,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            indent=self.settings.output.indent,
            sort_keys=self.settings.output.sort_keys,
            map_max_size=self.settings.output.map_max_size,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): stdout, exit 0, whatever the run status.
          Warnings go to stderr so they never pollute piped output.
        * Failure: stderr, exit 1.
        """
        output = format_result(result, settings=self.output_settings())
        if result.ok:
            click.echo(output)
            if not self.settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
