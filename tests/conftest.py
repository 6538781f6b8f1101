"""Shared pytest fixtures and test helpers for robotsim tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from robotsim.config.settings import RobotsimSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo handlers the CLI installs, so later tests never log into a closed stream."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger("robotsim")
    our_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(our_level)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RobotsimSettings:
    """Default settings, isolated from any robotsim.toml or env override."""
    monkeypatch.delenv("ROBOTSIM_CONFIG", raising=False)
    return RobotsimSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray robotsim.toml is picked up.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("ROBOTSIM_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_request() -> Callable[..., dict[str, Any]]:
    """Build a raw request dict; defaults to the origin, facing north, in a 0..5 arena."""

    def _make(
        directions: list[str] | None = None,
        *,
        x: int = 0,
        y: int = 0,
        heading: str = "north",
        corner1: tuple[int, int] = (0, 0),
        corner2: tuple[int, int] = (5, 5),
    ) -> dict[str, Any]:
        return {
            "location": {"x": x, "y": y},
            "heading": heading,
            "arena": {
                "corner1": {"x": corner1[0], "y": corner1[1]},
                "corner2": {"x": corner2[0], "y": corner2[1]},
            },
            "directions": directions or [],
        }

    return _make
