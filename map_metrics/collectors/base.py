"""Collector protocol and the shared grouping accumulator."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, Optional, Protocol, Tuple, TypeVar

from ..models import Actor

K = TypeVar("K", bound=Hashable)


class MetricCollector(Protocol):
    """Protocol defining how collectors gather metrics from a level's actors."""

    section_name: str

    def observe(self, actor: Actor) -> None:
        """Update internal counters from one actor."""

    def render(self) -> Dict[str, Any]:
        """Return the report section for the counters gathered so far."""


class CountMap(Generic[K]):
    """Occurrence counter keyed by strings, integers or type identities."""

    def __init__(self) -> None:
        self._counts: Dict[K, int] = defaultdict(int)

    def add(self, key: K, amount: int = 1) -> None:
        self._counts[key] += amount

    def __getitem__(self, key: K) -> int:
        return self._counts.get(key, 0)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[K]:
        return iter(self._counts)

    def items(self) -> Iterator[Tuple[K, int]]:
        return iter(self._counts.items())

    def total(self) -> int:
        return sum(self._counts.values())

    def render(
        self,
        label: Callable[[K], str],
        *,
        sort_key: Optional[Callable[[K], Any]] = None,
    ) -> Dict[str, int]:
        """Return a plain ``{label: count}`` mapping.

        Keys whose labels collide are summed so the rendered values always
        add up to ``total()``.
        """

        keys = sorted(self._counts, key=sort_key) if sort_key is not None else list(self._counts)
        rendered: Dict[str, int] = {}
        for key in keys:
            text = label(key)
            rendered[text] = rendered.get(text, 0) + self._counts[key]
        return rendered
