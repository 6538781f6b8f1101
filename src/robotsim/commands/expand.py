"""Command: show how a direction list expands into atomic commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robotsim.commands._base import SimCommand

if TYPE_CHECKING:
    from robotsim.commands._context import AppContext


@click.command(
    cls=SimCommand,
    examples="""\
  robotsim expand 'forward(3)' right forward
  robotsim --human expand 'left(2)' jump""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def expand(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Expand repeat shorthand in TOKENS and flag unknown commands."""
    from robotsim.services.simulate import SimulationService

    app.emit(SimulationService(app.settings).expand(list(tokens)))
