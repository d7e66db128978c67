"""Collector implementations, one per report section."""

from .actors import ActorCollector
from .base import CountMap, MetricCollector
from .lights import LightCollector
from .meshes import MeshCollector, SkeletalMeshCollector, StaticMeshCollector
from .niagara import NiagaraCollector

__all__ = [
    "MetricCollector",
    "CountMap",
    "LightCollector",
    "MeshCollector",
    "StaticMeshCollector",
    "SkeletalMeshCollector",
    "ActorCollector",
    "NiagaraCollector",
]
