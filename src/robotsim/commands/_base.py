"""Shared Click command class for robotsim subcommands.

Request payloads are awkward to show inside ``--help``, so each command
keeps its sample invocations separately and prints them on
``--examples``.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    assert isinstance(command, SimCommand)
    click.echo(f"Sample invocations of '{ctx.command_path}':\n")
    click.echo(command.examples)
    ctx.exit(0)


class SimCommand(click.Command):
    """A command that can print sample invocations.

    Pass ``examples=`` through ``@click.command(cls=SimCommand, ...)``; an
    eager ``--examples`` flag is added only when text is supplied.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples or ""
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Print sample invocations and exit.",
                )
            )
