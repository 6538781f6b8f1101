"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; every
op a service can return has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING, Any

from rich.text import Text

from robotsim.domain.models import Arena
from robotsim.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from robotsim.services.result import ServiceResult

_ARROWS: dict[str, str] = {"north": "^", "east": ">", "south": "v", "west": "<"}


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    map_max_size: int = 40,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose, map_max_size=map_max_size)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    A simulation prints just its status word so scripts can branch on it.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "status" in result.data:
        return str(result.data["status"])
    return f"OK: {result.op}"


def compress_path(path: list[str]) -> str:
    """Collapse runs of the same token into repeat shorthand.

    ``["forward", "forward", "right"]`` becomes ``"forward(2) right"``.
    """
    parts: list[str] = []
    for token, run in groupby(path):
        count = sum(1 for _ in run)
        parts.append(f"{token}({count})" if count > 1 else token)
    return " ".join(parts)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="sim.ok")
    op = Text(f"  {result.op}", style="sim.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sim.key")
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _arena_map(
    data: dict[str, Any],
    meta: dict[str, Any],
    max_size: int,
) -> list[Text] | None:
    """Draw the arena top row first; None if it is too big to be useful."""
    if not meta.get("arena"):
        return None
    arena = Arena.model_validate(meta["arena"])
    if arena.width > max_size or arena.height > max_size:
        return None
    x_lo, x_hi = arena.x_range
    y_lo, y_hi = arena.y_range

    trail = {tuple(cell) for cell in meta.get("trail", [])}
    start = meta.get("start", {}).get("location", {})
    start_xy = (start.get("x"), start.get("y"))
    robot_xy = (data["location"]["x"], data["location"]["y"])
    robot_style = "sim.wreck" if data["status"] == "crash" else "sim.robot"

    rows: list[Text] = []
    for y in range(y_hi, y_lo - 1, -1):
        row = Text("    ")
        for x in range(x_lo, x_hi + 1):
            if (x, y) == robot_xy:
                row.append(_ARROWS.get(data["heading"], "?"), style=robot_style)
            elif (x, y) == start_xy:
                row.append("S", style="sim.start")
            elif (x, y) in trail:
                row.append("o", style="sim.trail")
            else:
                row.append(".", style="sim.cell")
            row.append(" ")
        rows.append(row)
    return rows


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sim.error")
    op = Text(f"  {result.op}", style="sim.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_simulate(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    map_max_size: int = 40,
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "status", d["status"], style_for_status(d["status"]))
    _field(console, "location", f"({d['location']['x']}, {d['location']['y']})")
    _field(console, "heading", d["heading"])
    _field(console, "steps", len(d["path"]))
    if d["path"]:
        _field(console, "path", compress_path(d["path"]))

    rows = _arena_map(d, result.meta or {}, map_max_size)
    if rows:
        console.print()
        for row in rows:
            console.print(row)

    if verbose and result.meta and "start" in result.meta:
        start = result.meta["start"]
        console.print()
        _field(
            console,
            "start",
            f"({start['location']['x']}, {start['location']['y']}) {start['heading']}",
        )


def _render_expand(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    map_max_size: int = 40,
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "count", d["count"])
    invalid = set(d.get("invalid", []))
    for idx, token in enumerate(d["commands"], start=1):
        style = "sim.error" if token in invalid else ""
        console.print(Text(f"  {idx:>4}  "), Text(token, style=style), end="")
        console.print()


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "simulate": _render_simulate,
    "expand": _render_expand,
}
