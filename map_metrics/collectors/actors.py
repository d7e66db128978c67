"""Actor totals grouped by class."""

from __future__ import annotations

from typing import Any, Dict

from ..models import Actor, ActorClass
from .base import CountMap, MetricCollector


class ActorCollector(MetricCollector):
    section_name = "Actors"

    def __init__(self) -> None:
        self.actor_count = 0
        self.by_class: CountMap[ActorClass] = CountMap()

    def observe(self, actor: Actor) -> None:
        self.actor_count += 1
        self.by_class.add(actor.actor_class)

    def render(self) -> Dict[str, Any]:
        return {
            "ActorCount": self.actor_count,
            "ByClass": self.by_class.render(
                lambda actor_class: actor_class.name,
                sort_key=lambda actor_class: (actor_class.name.lower(), actor_class.path or ""),
            ),
        }
