"""Count light components by mobility."""

from __future__ import annotations

from typing import Any, Dict

from ..exceptions import InvariantViolationError
from ..models import Actor, LightComponent, Mobility
from ..traversal import components_of
from .base import CountMap, MetricCollector

_COUNT_FIELDS: Dict[Mobility, str] = {
    Mobility.STATIC: "StaticLightCount",
    Mobility.STATIONARY: "StationaryLightCount",
    Mobility.MOVABLE: "MoveableLightCount",
}


def _resolve_mobility(actor: Actor, component: LightComponent) -> Mobility:
    value = component.mobility
    if isinstance(value, Mobility):
        return value
    try:
        return Mobility(value)
    except ValueError:
        raise InvariantViolationError(
            f"Light component '{component.name}' on actor '{actor.name}' "
            f"has unknown mobility {value!r}",
            actor_name=actor.name,
            component_name=component.name,
            value=value,
        ) from None


class LightCollector(MetricCollector):
    """Totals light components per mobility, with a per-actor breakdown.

    The breakdown is only rendered when ``include_actor_breakdown`` is set;
    it is always available through :meth:`lights_by_actor`.
    """

    section_name = "Lights"

    def __init__(self, *, include_actor_breakdown: bool = False) -> None:
        self.include_actor_breakdown = include_actor_breakdown
        self._totals: Dict[Mobility, int] = {mobility: 0 for mobility in Mobility}
        self._by_actor: Dict[Mobility, CountMap[str]] = {mobility: CountMap() for mobility in Mobility}

    def observe(self, actor: Actor) -> None:
        for component in components_of(actor, LightComponent):
            mobility = _resolve_mobility(actor, component)
            self._totals[mobility] += 1
            self._by_actor[mobility].add(actor.name)

    def count(self, mobility: Mobility) -> int:
        return self._totals[mobility]

    def lights_by_actor(self, mobility: Mobility) -> Dict[str, int]:
        return self._by_actor[mobility].render(str, sort_key=str)

    def render(self) -> Dict[str, Any]:
        section: Dict[str, Any] = {field: self._totals[mobility] for mobility, field in _COUNT_FIELDS.items()}
        if self.include_actor_breakdown:
            section["ByActor"] = {mobility.value: self.lights_by_actor(mobility) for mobility in Mobility}
        return section
