"""BaseService — shared foundation for robotsim services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from robotsim.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from robotsim.config.settings import RobotsimSettings


class BaseService:
    """Base for service-layer classes.

    Every service receives the frozen :class:`RobotsimSettings` at
    construction time and reads its section limits from there.
    """

    def __init__(self, settings: RobotsimSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
