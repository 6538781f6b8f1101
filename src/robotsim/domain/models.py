"""Pydantic models for the request, the result and the values in between.

All models are frozen: a pose is replaced after each applied command,
never mutated in place.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from robotsim.domain.types import Heading, Status


class Coordinate(BaseModel):
    """Signed integer grid location."""

    model_config = {"frozen": True}

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(x=self.x + dx, y=self.y + dy)


class Pose(BaseModel):
    """Location plus heading at a point in time."""

    model_config = {"frozen": True}

    location: Coordinate
    heading: Heading


class Arena(BaseModel):
    """Axis-aligned inclusive rectangle spanned by two opposite corners.

    The corners may be given in any order; the valid region is always
    ``[min(x1, x2), max(x1, x2)] x [min(y1, y2), max(y1, y2)]``.
    """

    model_config = {"frozen": True}

    corner1: Coordinate
    corner2: Coordinate

    @property
    def x_range(self) -> tuple[int, int]:
        return min(self.corner1.x, self.corner2.x), max(self.corner1.x, self.corner2.x)

    @property
    def y_range(self) -> tuple[int, int]:
        return min(self.corner1.y, self.corner2.y), max(self.corner1.y, self.corner2.y)

    @property
    def width(self) -> int:
        lo, hi = self.x_range
        return hi - lo + 1

    @property
    def height(self) -> int:
        lo, hi = self.y_range
        return hi - lo + 1

    def contains(self, location: Coordinate) -> bool:
        """Return True if *location* lies inside the arena, edges included."""
        x_lo, x_hi = self.x_range
        y_lo, y_hi = self.y_range
        return x_lo <= location.x <= x_hi and y_lo <= location.y <= y_hi


class RobotInput(BaseModel):
    """A single simulation request.

    ``directions`` holds raw tokens: atomic names, repeat shorthand such
    as ``forward(3)``, or anything else the caller sent. Nothing is
    validated until the run reaches it.
    """

    model_config = {"frozen": True}

    location: Coordinate
    heading: Heading
    arena: Arena
    directions: list[str] = Field(default_factory=list)

    @property
    def start_pose(self) -> Pose:
        return Pose(location=self.location, heading=self.heading)


class RobotOutput(BaseModel):
    """Final pose, run status and the tokens actually consumed."""

    model_config = {"frozen": True}

    location: Coordinate
    heading: Heading
    status: Status
    path: list[str] = Field(default_factory=list)
