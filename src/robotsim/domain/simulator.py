"""Run orchestration: expand, then validate and move in lock-step.

Every consumed token is appended to the path before it is judged, so
the token that triggered ``error`` or ``crash`` is always the last one
in the path. On ``crash`` the reported pose is the one before the
rejected move.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pydantic import BaseModel

from robotsim.domain.commands import expand_directions, is_valid_command
from robotsim.domain.models import Pose, RobotInput, RobotOutput
from robotsim.domain.motion import next_pose
from robotsim.domain.types import Command, Status


class StepLimitExceeded(Exception):
    """Raised when a run would consume more than its allowed number of commands."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(f"Run exceeds the limit of {max_steps} commands")
        self.max_steps = max_steps


class Step(BaseModel):
    """One consumed token and the pose after it."""

    model_config = {"frozen": True}

    token: str
    pose: Pose
    status: Status


def walk(request: RobotInput, max_steps: int | None = None) -> Iterator[Step]:
    """Yield a :class:`Step` per consumed token.

    Stops after the first step whose status is not ``ok``. With
    *max_steps*, raises :class:`StepLimitExceeded` only when a further
    token would actually be consumed past the limit.
    """
    pose = request.start_pose
    for consumed, token in enumerate(expand_directions(request.directions), start=1):
        if max_steps is not None and consumed > max_steps:
            raise StepLimitExceeded(max_steps)
        if not is_valid_command(token):
            yield Step(token=token, pose=pose, status=Status.ERROR)
            return
        candidate = next_pose(pose, Command(token), request.arena)
        if candidate is None:
            yield Step(token=token, pose=pose, status=Status.CRASH)
            return
        pose = candidate
        yield Step(token=token, pose=pose, status=Status.OK)


def run_with(
    request: RobotInput,
    on_step: Callable[[Step], None] | None = None,
    max_steps: int | None = None,
) -> RobotOutput:
    """Simulate *request* and assemble the result.

    *on_step*, if given, sees every step as it happens. *max_steps* is
    passed through to :func:`walk`.
    """
    pose = request.start_pose
    status = Status.OK
    path: list[str] = []
    for step in walk(request, max_steps):
        if on_step is not None:
            on_step(step)
        path.append(step.token)
        pose = step.pose
        status = step.status
    return RobotOutput(
        location=pose.location,
        heading=pose.heading,
        status=status,
        path=path,
    )
