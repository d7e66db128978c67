"""Static and skeletal mesh LOD / material metrics."""

from __future__ import annotations

from functools import partial
from typing import Any, ClassVar, Dict, Type

from ..models import Actor, MeshComponent, SkeletalMeshComponent, StaticMeshComponent
from ..traversal import components_of
from ..utils import count_label
from .base import CountMap, MetricCollector


class MeshCollector(MetricCollector):
    """Shared logic for mesh collectors; subclasses pick the component kind."""

    section_name: ClassVar[str]
    component_type: ClassVar[Type[MeshComponent]]

    def __init__(self) -> None:
        self.with_lods = 0
        self.without_lods = 0
        self.material_counts: CountMap[int] = CountMap()

    def observe(self, actor: Actor) -> None:
        for component in components_of(actor, self.component_type):
            if component.lod_count == 1:
                self.without_lods += 1
            else:
                self.with_lods += 1
            self.material_counts.add(component.material_count)

    def render(self) -> Dict[str, Any]:
        return {
            "WithLODsCount": self.with_lods,
            "WithoutLODsCount": self.without_lods,
            "ByMaterialCount": self.material_counts.render(partial(count_label, suffix="Materials"), sort_key=int),
        }


class StaticMeshCollector(MeshCollector):
    section_name = "StaticMeshes"
    component_type = StaticMeshComponent


class SkeletalMeshCollector(MeshCollector):
    section_name = "SkeletalMeshes"
    component_type = SkeletalMeshComponent
