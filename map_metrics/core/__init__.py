"""Core infrastructure for level acquisition and aggregation."""

from .analyzer import LevelAnalyzer, LevelContext, aggregate, default_collectors
from .batch import BatchResult, process_level, run_batch
from ..exceptions import InvariantViolationError, LevelLoadError, MapMetricsError, ReportWriteError
from .host import InMemoryLevelProvider, LevelProvider

__all__ = [
    "LevelAnalyzer",
    "LevelContext",
    "aggregate",
    "default_collectors",
    "BatchResult",
    "process_level",
    "run_batch",
    "MapMetricsError",
    "LevelLoadError",
    "InvariantViolationError",
    "ReportWriteError",
    "LevelProvider",
    "InMemoryLevelProvider",
]
