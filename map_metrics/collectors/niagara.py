"""Particle emitter (Niagara) component metrics."""

from __future__ import annotations

from functools import partial
from typing import Any, Dict

from ..models import Actor, NiagaraComponent
from ..traversal import components_of
from ..utils import count_label
from .base import CountMap, MetricCollector


class NiagaraCollector(MetricCollector):
    """Classify Niagara components by asset presence and GPU emitter usage.

    Components without an asset only bump ``WithoutAssetCount``; the emitter
    count histogram covers components that reference an asset.

    The histogram is written as ``ByEmitterCount``; the legacy commandlet
    emitted the same data under ``ByMaterialCount``.
    """

    section_name = "Niagara"

    def __init__(self) -> None:
        self.without_asset = 0
        self.without_gpu_emitter = 0
        self.with_gpu_emitter = 0
        self.emitter_counts: CountMap[int] = CountMap()

    def observe(self, actor: Actor) -> None:
        for component in components_of(actor, NiagaraComponent):
            asset = component.asset
            if asset is None:
                self.without_asset += 1
                continue

            if asset.has_gpu_emitters:
                self.with_gpu_emitter += 1
            else:
                self.without_gpu_emitter += 1
            self.emitter_counts.add(asset.emitter_count)

    def render(self) -> Dict[str, Any]:
        return {
            "WithoutAssetCount": self.without_asset,
            "WithoutGPUEmitterCount": self.without_gpu_emitter,
            "WithGPUEmitterCount": self.with_gpu_emitter,
            "ByEmitterCount": self.emitter_counts.render(partial(count_label, suffix="Emitters"), sort_key=int),
        }
