"""SimulationService — request parsing, limits, and the simulation run.

Pipeline: DECODE → VALIDATE → SIMULATE (bounded) → REPORT
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import ValidationError

from robotsim.domain.commands import count_expanded, expand_directions, is_valid_command
from robotsim.domain.models import RobotInput
from robotsim.domain.simulator import Step, StepLimitExceeded, run_with
from robotsim.services.base import BaseService
from robotsim.services.result import ServiceResult

log = structlog.get_logger(__name__)


class SimulationService(BaseService):
    """Runs one simulation request, or expands a direction list on its own."""

    def run(self, raw: str) -> ServiceResult:
        """Decode *raw* JSON into a request and simulate it.

        Run outcomes (``ok``/``error``/``crash``) all come back as a
        successful result. Only undecodable requests, and runs that would
        consume more than ``max_commands`` commands, fail.
        """
        op = "simulate"

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            log.debug("simulate.rejected", reason="invalid_json", error=str(exc))
            return self._failure(op, "INVALID_JSON", f"Request is not valid JSON: {exc}")

        try:
            request = RobotInput.model_validate(payload)
        except ValidationError as exc:
            log.debug("simulate.rejected", reason="invalid_request", errors=exc.error_count())
            return self._failure(
                op,
                "INVALID_REQUEST",
                f"Request failed validation with {exc.error_count()} error(s)",
                detail={"errors": exc.errors(include_url=False, include_context=False)},
            )

        limit = self._settings.simulator.max_commands
        trail: list[list[int]] = []

        def record(step: Step) -> None:
            trail.append([step.pose.location.x, step.pose.location.y])

        try:
            output = run_with(request, on_step=record, max_steps=limit)
        except StepLimitExceeded as exc:
            log.debug("simulate.rejected", reason="too_many_commands", limit=exc.max_steps)
            return self._failure(
                op,
                "TOO_MANY_COMMANDS",
                f"Run would consume more than {exc.max_steps} commands",
                detail={"max_commands": exc.max_steps},
            )

        log.debug(
            "simulate.complete",
            status=str(output.status),
            steps=len(output.path),
            x=output.location.x,
            y=output.location.y,
            heading=str(output.heading),
        )

        return ServiceResult(
            ok=True,
            op=op,
            data=output.model_dump(mode="json"),
            meta={
                "arena": request.arena.model_dump(mode="json"),
                "start": request.start_pose.model_dump(mode="json"),
                "trail": trail,
            },
        )

    def expand(self, tokens: Sequence[str]) -> ServiceResult:
        """Expand repeat shorthand in *tokens* and flag unknown names."""
        op = "expand"

        limit = self._settings.simulator.max_commands
        total = count_expanded(tokens)
        if total > limit:
            log.debug("expand.rejected", reason="too_many_commands", count=total, limit=limit)
            detail: dict[str, Any] = {"count": total, "max_commands": limit}
            return self._failure(
                op,
                "TOO_MANY_COMMANDS",
                f"Directions expand to {total} commands; the limit is {limit}",
                detail=detail,
            )

        commands = list(expand_directions(tokens))
        invalid = list(dict.fromkeys(t for t in commands if not is_valid_command(t)))
        warnings = [f"Unknown command: {t}" for t in invalid]
        return ServiceResult(
            ok=True,
            op=op,
            data={"commands": commands, "count": len(commands), "invalid": invalid},
            warnings=warnings,
        )
