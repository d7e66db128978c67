"""Host engine boundary: who hands out loaded worlds."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol

from ..models import World


class LevelProvider(Protocol):
    """Supplies fully loaded, streaming-resolved worlds by level name.

    Implementations wrap the host engine.  ``load_level`` returns ``None``
    (or raises ``LookupError``) when the level cannot be found; every world
    handed out is given back through ``release_level``.
    """

    def load_level(self, level_name: str) -> Optional[World]:
        ...

    def release_level(self, world: World) -> None:
        ...


class InMemoryLevelProvider(LevelProvider):
    """Serve worlds from a plain mapping; used by embedders and tests."""

    def __init__(self, worlds: Optional[Mapping[str, World]] = None) -> None:
        self._worlds: Dict[str, World] = dict(worlds or {})
        self.loaded = 0
        self.released = 0

    def add(self, level_name: str, world: World) -> None:
        self._worlds[level_name] = world

    def load_level(self, level_name: str) -> Optional[World]:
        world = self._worlds.get(level_name)
        if world is not None:
            self.loaded += 1
        return world

    def release_level(self, world: World) -> None:
        self.released += 1

    @property
    def outstanding(self) -> int:
        return self.loaded - self.released
