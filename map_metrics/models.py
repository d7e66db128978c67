"""Domain models used across the metrics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional


class Mobility(str, Enum):
    """How a light component is allowed to move at runtime."""

    STATIC = "Static"
    STATIONARY = "Stationary"
    MOVABLE = "Movable"


@dataclass(frozen=True)
class ActorClass:
    name: str
    path: Optional[str] = None


@dataclass
class Component:
    name: str


@dataclass
class LightComponent(Component):
    # Raw host values are accepted here; LightCollector validates them.
    mobility: Any = Mobility.STATIC
    light_type: str = "PointLight"


@dataclass
class MeshComponent(Component):
    lod_count: int = 1
    material_count: int = 0


@dataclass
class StaticMeshComponent(MeshComponent):
    pass


@dataclass
class SkeletalMeshComponent(MeshComponent):
    pass


@dataclass
class NiagaraSystem:
    name: str
    has_gpu_emitters: bool = False
    emitter_count: int = 0


@dataclass
class NiagaraComponent(Component):
    asset: Optional[NiagaraSystem] = None


@dataclass
class Actor:
    name: str
    actor_class: ActorClass
    components: List[Component] = field(default_factory=list)


@dataclass
class Level:
    name: str
    actors: List[Actor] = field(default_factory=list)


@dataclass
class World:
    name: str
    persistent_level: Level
    streaming_levels: List[Level] = field(default_factory=list)

    def walk_levels(self) -> Iterator[Level]:
        yield self.persistent_level
        yield from self.streaming_levels
