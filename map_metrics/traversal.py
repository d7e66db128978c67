"""Utilities for traversing loaded worlds."""

from __future__ import annotations

from typing import Iterator, List, Type, TypeVar

from .models import Actor, Component, World

C = TypeVar("C", bound=Component)


def iter_actors(world: World) -> Iterator[Actor]:
    """Yield every actor of `world`, persistent level first, in placement order."""

    for level in world.walk_levels():
        yield from level.actors


def components_of(actor: Actor, component_type: Type[C]) -> List[C]:
    """Return the components of `actor` that are instances of `component_type`."""

    return [component for component in actor.components if isinstance(component, component_type)]
