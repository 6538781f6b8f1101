"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, robotsim.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SimulatorConfig(BaseModel):
    """[simulator] section."""

    model_config = {"frozen": True}

    # Ceiling on the expanded command count; guards against "forward(999999999)".
    max_commands: int = Field(default=1_000_000, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int | None = None
    sort_keys: bool = False
    map_max_size: int = 40
