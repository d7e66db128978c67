"""Project-specific exception types."""

from __future__ import annotations

from typing import Any, Optional


class MapMetricsError(Exception):
    """Base class for every error raised by the metrics engine."""


class LevelLoadError(MapMetricsError):
    """Raised when the host cannot supply a world for a level."""


class InvariantViolationError(MapMetricsError):
    """Raised when scene data falls outside a closed enumeration.

    Aborts processing of the current level; no report is produced for it.
    """

    def __init__(
        self,
        message: str,
        *,
        actor_name: Optional[str] = None,
        component_name: Optional[str] = None,
        value: Any = None,
        level_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.actor_name = actor_name
        self.component_name = component_name
        self.value = value
        self.level_name = level_name

    def __str__(self) -> str:
        if self.level_name:
            return f"{self.message} (level '{self.level_name}')"
        return self.message


class ReportWriteError(MapMetricsError):
    """Raised when a report cannot be persisted."""
