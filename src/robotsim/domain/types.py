"""Closed enumerations for headings, atomic commands and run status."""

from __future__ import annotations

from enum import StrEnum


class Heading(StrEnum):
    """Compass heading of the robot."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class Command(StrEnum):
    """Atomic movement commands."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


class Status(StrEnum):
    """Outcome of a simulation run."""

    OK = "ok"
    ERROR = "error"
    CRASH = "crash"


# Clockwise; a right turn advances one slot, a left turn goes back one.
HEADING_CYCLE: tuple[Heading, ...] = (
    Heading.NORTH,
    Heading.EAST,
    Heading.SOUTH,
    Heading.WEST,
)
