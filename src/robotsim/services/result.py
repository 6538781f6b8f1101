"""What every robotsim service call hands back to the CLI.

A run that ends in ``error`` or ``crash`` is a normal answer: the robot
report sits in ``data`` and ``ok`` stays True. ``ok=False`` means the
request never reached the simulator (bad JSON, bad shape, or more
commands than the configured ceiling) and ``error`` says why.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a request was refused.

    ``code`` is one of ``INVALID_JSON``, ``INVALID_REQUEST`` or
    ``TOO_MANY_COMMANDS``; ``detail`` carries the validation errors or the
    limit that was hit.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of ``simulate`` or ``expand``.

    Only ``data`` is printed in JSON mode. ``meta`` holds what the Rich
    renderer needs on top of it (arena, start pose, visited cells) and
    ``warnings`` lists unknown tokens found by ``expand``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
