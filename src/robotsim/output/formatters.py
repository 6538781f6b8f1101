"""Dispatch a ServiceResult to the requested output mode.

JSON is the default: a successful result prints its bare ``data``
payload, which for ``simulate`` is exactly the result document
(``location``, ``heading``, ``status``, ``path``). Failures print the
whole ServiceResult so the error code travels with it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel

from robotsim.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from robotsim.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering switches, built by AppContext from RobotsimSettings."""

    model_config = {"frozen": True}

    human: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int | None = None
    sort_keys: bool = False
    map_max_size: int = 40


def format_json(result: ServiceResult, settings: OutputSettings) -> str:
    if result.ok:
        separators = (",", ":") if settings.indent is None else None
        return json.dumps(
            result.data,
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            separators=separators,
        )
    return result.model_dump_json(indent=settings.indent, exclude_none=True)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Precedence: quiet, then human, then JSON.
    """
    settings = settings or OutputSettings()
    if settings.quiet:
        return render_quiet(result)
    if settings.human:
        return render_result(
            result,
            verbose=settings.verbose,
            map_max_size=settings.map_max_size,
        )
    return format_json(result, settings)
