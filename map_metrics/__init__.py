"""Aggregate content metrics over the actors of a loaded game level."""

from .core import (
    BatchResult,
    InMemoryLevelProvider,
    InvariantViolationError,
    LevelAnalyzer,
    LevelLoadError,
    LevelProvider,
    MapMetricsError,
    ReportWriteError,
    aggregate,
    default_collectors,
    run_batch,
)
from .config import MetricsConfig
from .report import MetricsReport, render_report, write_report

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "InMemoryLevelProvider",
    "InvariantViolationError",
    "LevelAnalyzer",
    "LevelLoadError",
    "LevelProvider",
    "MapMetricsError",
    "MetricsConfig",
    "MetricsReport",
    "ReportWriteError",
    "aggregate",
    "default_collectors",
    "render_report",
    "run_batch",
    "write_report",
]
