"""Rich Console factory and theme for robotsim output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich drops the
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROBOTSIM_THEME = Theme(
    {
        "sim.ok": "bold green",
        "sim.error": "bold red",
        "sim.crash": "bold magenta",
        "sim.op": "bold cyan",
        "sim.key": "dim",
        "sim.warning": "bold yellow",
        "sim.cell": "dim",
        "sim.trail": "cyan",
        "sim.start": "bold blue",
        "sim.robot": "bold green",
        "sim.wreck": "bold magenta",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "ok": "sim.ok",
    "error": "sim.error",
    "crash": "sim.crash",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ROBOTSIM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return _STATUS_STYLES.get(status, "")
