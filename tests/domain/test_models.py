"""Tests for the request/result models and arena bounds."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from robotsim.domain.models import Arena, Coordinate, Pose, RobotInput, RobotOutput
from robotsim.domain.types import Heading, Status


def _arena(x1: int, y1: int, x2: int, y2: int) -> Arena:
    return Arena(corner1=Coordinate(x=x1, y=y1), corner2=Coordinate(x=x2, y=y2))


class TestArena:
    def test_ranges_normalise_corner_order(self) -> None:
        arena = _arena(5, -2, -3, 4)
        assert arena.x_range == (-3, 5)
        assert arena.y_range == (-2, 4)
        assert arena.width == 9
        assert arena.height == 7

    @pytest.mark.parametrize(
        "corners",
        [(0, 0, 5, 5), (5, 5, 0, 0), (0, 5, 5, 0), (5, 0, 0, 5)],
        ids=["ll-ur", "ur-ll", "ul-lr", "lr-ul"],
    )
    def test_contains_is_order_independent(self, corners: tuple[int, int, int, int]) -> None:
        arena = _arena(*corners)
        assert arena.contains(Coordinate(x=0, y=0))
        assert arena.contains(Coordinate(x=5, y=5))
        assert arena.contains(Coordinate(x=2, y=3))
        assert not arena.contains(Coordinate(x=6, y=0))
        assert not arena.contains(Coordinate(x=0, y=-1))

    def test_single_cell_arena(self) -> None:
        arena = _arena(2, 2, 2, 2)
        assert arena.contains(Coordinate(x=2, y=2))
        assert not arena.contains(Coordinate(x=2, y=3))


class TestCoordinate:
    def test_shifted_returns_new_value(self) -> None:
        origin = Coordinate(x=1, y=1)
        moved = origin.shifted(-1, 2)
        assert moved == Coordinate(x=0, y=3)
        assert origin == Coordinate(x=1, y=1)

    def test_frozen(self) -> None:
        c = Coordinate(x=0, y=0)
        with pytest.raises(ValidationError):
            c.x = 1  # type: ignore[misc]


class TestRobotInput:
    def test_parses_wire_shape(self, make_request) -> None:
        request = RobotInput.model_validate(make_request(["forward(2)", "jump"], x=1, y=2))
        assert request.start_pose == Pose(location=Coordinate(x=1, y=2), heading=Heading.NORTH)
        assert request.directions == ["forward(2)", "jump"]

    def test_directions_default_empty(self, make_request) -> None:
        payload = make_request()
        del payload["directions"]
        assert RobotInput.model_validate(payload).directions == []

    def test_unknown_heading_rejected(self, make_request) -> None:
        with pytest.raises(ValidationError):
            RobotInput.model_validate(make_request(heading="up"))

    def test_missing_arena_rejected(self, make_request) -> None:
        payload = make_request()
        del payload["arena"]
        with pytest.raises(ValidationError):
            RobotInput.model_validate(payload)

    def test_extra_fields_ignored(self, make_request) -> None:
        payload = make_request()
        payload["robot_name"] = "r2"
        assert RobotInput.model_validate(payload).heading == Heading.NORTH


class TestRobotOutput:
    def test_dump_uses_wire_strings(self) -> None:
        out = RobotOutput(
            location=Coordinate(x=1, y=1),
            heading=Heading.EAST,
            status=Status.OK,
            path=["forward"],
        )
        assert out.model_dump(mode="json") == {
            "location": {"x": 1, "y": 1},
            "heading": "east",
            "status": "ok",
            "path": ["forward"],
        }
