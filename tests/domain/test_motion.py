"""Tests for the state transition engine."""

from __future__ import annotations

import pytest

from robotsim.domain.models import Arena, Coordinate, Pose
from robotsim.domain.motion import MOVE_DELTAS, ROTATIONS, next_pose
from robotsim.domain.types import Command, Heading

ARENA = Arena(corner1=Coordinate(x=-5, y=-5), corner2=Coordinate(x=5, y=5))


def _pose(x: int, y: int, heading: Heading) -> Pose:
    return Pose(location=Coordinate(x=x, y=y), heading=heading)


class TestTables:
    def test_tables_are_exhaustive(self) -> None:
        moves = {Command.FORWARD, Command.BACKWARD}
        turns = {Command.LEFT, Command.RIGHT}
        assert set(MOVE_DELTAS) == {(c, h) for c in moves for h in Heading}
        assert set(ROTATIONS) == {(c, h) for c in turns for h in Heading}


class TestForwardBackward:
    @pytest.mark.parametrize(
        "heading,forward,backward",
        [
            (Heading.NORTH, (0, 1), (0, -1)),
            (Heading.SOUTH, (0, -1), (0, 1)),
            (Heading.EAST, (1, 0), (-1, 0)),
            (Heading.WEST, (-1, 0), (1, 0)),
        ],
    )
    def test_unit_steps(
        self,
        heading: Heading,
        forward: tuple[int, int],
        backward: tuple[int, int],
    ) -> None:
        start = _pose(0, 0, heading)
        assert next_pose(start, Command.FORWARD, ARENA) == _pose(*forward, heading)
        assert next_pose(start, Command.BACKWARD, ARENA) == _pose(*backward, heading)

    @pytest.mark.parametrize("heading", list(Heading))
    def test_forward_then_backward_round_trips(self, heading: Heading) -> None:
        start = _pose(1, -2, heading)
        moved = next_pose(start, Command.FORWARD, ARENA)
        assert moved is not None
        assert moved.heading == heading
        assert next_pose(moved, Command.BACKWARD, ARENA) == start


class TestRotation:
    @pytest.mark.parametrize(
        "heading,right,left",
        [
            (Heading.NORTH, Heading.EAST, Heading.WEST),
            (Heading.EAST, Heading.SOUTH, Heading.NORTH),
            (Heading.SOUTH, Heading.WEST, Heading.EAST),
            (Heading.WEST, Heading.NORTH, Heading.SOUTH),
        ],
    )
    def test_turns(self, heading: Heading, right: Heading, left: Heading) -> None:
        start = _pose(3, 3, heading)
        assert next_pose(start, Command.RIGHT, ARENA) == _pose(3, 3, right)
        assert next_pose(start, Command.LEFT, ARENA) == _pose(3, 3, left)

    @pytest.mark.parametrize("heading", list(Heading))
    def test_left_right_cancel(self, heading: Heading) -> None:
        start = _pose(0, 0, heading)
        for first, second in ((Command.LEFT, Command.RIGHT), (Command.RIGHT, Command.LEFT)):
            turned = next_pose(start, first, ARENA)
            assert turned is not None
            assert next_pose(turned, second, ARENA) == start

    def test_four_rights_is_identity(self) -> None:
        pose = _pose(0, 0, Heading.NORTH)
        for _ in range(4):
            pose = next_pose(pose, Command.RIGHT, ARENA)
            assert pose is not None
        assert pose == _pose(0, 0, Heading.NORTH)

    def test_rotation_on_edge_never_crashes(self) -> None:
        corner = _pose(5, 5, Heading.NORTH)
        assert next_pose(corner, Command.LEFT, ARENA) == _pose(5, 5, Heading.WEST)


class TestBounds:
    @pytest.mark.parametrize(
        "x,y,heading,command",
        [
            (5, 0, Heading.EAST, Command.FORWARD),
            (-5, 0, Heading.WEST, Command.FORWARD),
            (0, 5, Heading.NORTH, Command.FORWARD),
            (0, -5, Heading.SOUTH, Command.FORWARD),
            (0, -5, Heading.NORTH, Command.BACKWARD),
            (5, 0, Heading.WEST, Command.BACKWARD),
        ],
    )
    def test_leaving_arena_signals_crash(
        self, x: int, y: int, heading: Heading, command: Command
    ) -> None:
        assert next_pose(_pose(x, y, heading), command, ARENA) is None

    def test_moving_onto_edge_is_allowed(self) -> None:
        assert next_pose(_pose(4, 0, Heading.EAST), Command.FORWARD, ARENA) == _pose(
            5, 0, Heading.EAST
        )
