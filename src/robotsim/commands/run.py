"""Command: simulate one request read from a file or stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from robotsim.commands._base import SimCommand

if TYPE_CHECKING:
    from robotsim.commands._context import AppContext


@click.command(
    cls=SimCommand,
    examples="""\
  echo '{"location":{"x":0,"y":0},"heading":"north",
         "arena":{"corner1":{"x":0,"y":0},"corner2":{"x":5,"y":5}},
         "directions":["forward","right","forward"]}' | robotsim run
  robotsim run request.json
  robotsim --human run request.json
  robotsim -q run request.json""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def run(app: AppContext, source: TextIO) -> None:
    """Simulate the request in SOURCE (default: stdin) and print the result."""
    from robotsim.services.simulate import SimulationService

    app.emit(SimulationService(app.settings).run(source.read()))
