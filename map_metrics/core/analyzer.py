"""High level aggregation orchestration."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..collectors import (
    ActorCollector,
    LightCollector,
    MetricCollector,
    NiagaraCollector,
    SkeletalMeshCollector,
    StaticMeshCollector,
)
from ..config import MetricsConfig
from ..exceptions import InvariantViolationError, LevelLoadError
from ..models import Actor, World
from ..report import MetricsReport
from ..traversal import iter_actors
from .host import LevelProvider


def default_collectors(config: Optional[MetricsConfig] = None) -> List[MetricCollector]:
    """Return a fresh collector set in report section order."""

    config = config or MetricsConfig()
    return [
        LightCollector(include_actor_breakdown=config.include_light_actor_breakdown),
        StaticMeshCollector(),
        SkeletalMeshCollector(),
        ActorCollector(),
        NiagaraCollector(),
    ]


def aggregate(
    actors: Iterable[Actor],
    collectors: Optional[Sequence[MetricCollector]] = None,
    *,
    level_name: Optional[str] = None,
) -> MetricsReport:
    """Observe every actor once with every collector and assemble the report.

    An ``InvariantViolationError`` raised by a collector aborts the pass and
    propagates; no report is built in that case.
    """

    if collectors is None:
        collectors = default_collectors()

    try:
        for actor in actors:
            for collector in collectors:
                collector.observe(actor)
    except InvariantViolationError as exc:
        if exc.level_name is None:
            exc.level_name = level_name
        raise

    report = MetricsReport()
    for collector in collectors:
        report.add_section(collector.section_name, collector.render())
    return report


@dataclass
class LevelContext:
    """Holds the level name and the world the host supplied for it."""

    level_name: str
    world: World

    @property
    def streaming_level_count(self) -> int:
        return len(self.world.streaming_levels)


class LevelAnalyzer(contextlib.AbstractContextManager["LevelAnalyzer"]):
    """Acquires a level from the host and coordinates metric collection."""

    def __init__(self, level_name: str, provider: LevelProvider) -> None:
        self._level_name = level_name
        self._provider = provider
        self._world: Optional[World] = None

    @property
    def level_name(self) -> str:
        return self._level_name

    @property
    def context(self) -> LevelContext:
        if self._world is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing context.")
        return LevelContext(level_name=self._level_name, world=self._world)

    def load(self) -> "LevelAnalyzer":
        if self._world is not None:
            return self

        try:
            world = self._provider.load_level(self._level_name)
        except LookupError as exc:
            raise LevelLoadError(f"Cannot load level '{self._level_name}': {exc}") from exc
        if world is None:
            raise LevelLoadError(f"Cannot get a world for level '{self._level_name}'")

        self._world = world
        return self

    def close(self) -> None:
        if self._world is not None:
            self._provider.release_level(self._world)
            self._world = None

    def __enter__(self) -> "LevelAnalyzer":
        return self.load()

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    def run(self, collectors: Optional[Sequence[MetricCollector]] = None) -> MetricsReport:
        """Run ``collectors`` over every actor of the loaded world."""

        ctx = self.context
        return aggregate(iter_actors(ctx.world), collectors, level_name=ctx.level_name)
