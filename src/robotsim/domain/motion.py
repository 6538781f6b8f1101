"""State transition engine: one pose plus one command gives the next pose.

Translation and rotation are two lookup tables keyed by
``(command, heading)``. ``forward``/``backward`` never change heading;
``left``/``right`` never change location.
"""

from __future__ import annotations

from robotsim.domain.models import Arena, Pose
from robotsim.domain.types import HEADING_CYCLE, Command, Heading

_UNIT: dict[Heading, tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}

MOVE_DELTAS: dict[tuple[Command, Heading], tuple[int, int]] = {
    **{(Command.FORWARD, h): (dx, dy) for h, (dx, dy) in _UNIT.items()},
    **{(Command.BACKWARD, h): (-dx, -dy) for h, (dx, dy) in _UNIT.items()},
}

ROTATIONS: dict[tuple[Command, Heading], Heading] = {
    **{
        (Command.RIGHT, h): HEADING_CYCLE[(i + 1) % len(HEADING_CYCLE)]
        for i, h in enumerate(HEADING_CYCLE)
    },
    **{
        (Command.LEFT, h): HEADING_CYCLE[(i - 1) % len(HEADING_CYCLE)]
        for i, h in enumerate(HEADING_CYCLE)
    },
}


def next_pose(pose: Pose, command: Command, arena: Arena) -> Pose | None:
    """Apply *command* to *pose*.

    Returns the new pose, or None when a translation would leave *arena*.
    The starting pose is assumed to be inside the arena already, so
    rotations are never bounds-checked.
    """
    key = (command, pose.heading)
    if key in ROTATIONS:
        return Pose(location=pose.location, heading=ROTATIONS[key])

    dx, dy = MOVE_DELTAS[key]
    candidate = pose.location.shifted(dx, dy)
    if not arena.contains(candidate):
        return None
    return Pose(location=candidate, heading=pose.heading)
