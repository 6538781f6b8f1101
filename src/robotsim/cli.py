"""`robotsim` entry point: global output and logging flags, then subcommands."""

from __future__ import annotations

import click

from robotsim import __version__
from robotsim.commands import register_commands
from robotsim.commands._context import AppContext
from robotsim.config.settings import RobotsimSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="robotsim")
@click.option("--human", is_flag=True, help="Rich, human-readable output instead of JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the run status.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and extra detail.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    human: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Simulate a robot driving around a bounded grid.

    Results are JSON on stdout; logs and refusals go to stderr.
    """
    settings = RobotsimSettings.from_cli(
        config_path=config_path,
        human=human,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
