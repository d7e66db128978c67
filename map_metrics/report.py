"""Report container and its JSON / log serializers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional

from .config import MetricsConfig
from .exceptions import ReportWriteError
from .utils import level_base_name

logger = logging.getLogger(__name__)

_SEPARATOR = "-" * 30


class MetricsReport(Mapping[str, Dict[str, Any]]):
    """Ordered mapping of section name to section contents."""

    def __init__(self) -> None:
        self._sections: Dict[str, Dict[str, Any]] = {}

    def add_section(self, name: str, contents: Dict[str, Any]) -> None:
        if name in self._sections:
            raise ValueError(f"Duplicate report section '{name}'")
        self._sections[name] = contents

    def __getitem__(self, name: str) -> Dict[str, Any]:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return json.loads(json.dumps(self._sections))

    def __repr__(self) -> str:
        return f"MetricsReport(sections={list(self._sections)!r})"


def render_report(report: Mapping[str, Any], indent: int = 4) -> str:
    return json.dumps(dict(report), indent=indent)


def log_report(report: MetricsReport, log: Optional[logging.Logger] = None, *, indent: int = 4) -> None:
    """Write a human-readable rendering of ``report`` to ``log``."""

    log = log or logger
    for name, section in report.items():
        log.info(_SEPARATOR)
        log.info("%s report:", name)
        log.info("%s", json.dumps(section, indent=indent))
        log.info(_SEPARATOR)
        log.info("")
    log.info("%s", render_report(report, indent=indent))


def report_path(level_name: str, config: MetricsConfig) -> Path:
    return config.output_dir / f"{level_base_name(level_name)}.json"


def write_report(report: MetricsReport, path: Path, *, indent: int = 4) -> Path:
    """Persist ``report`` as JSON at ``path``, creating parent folders."""

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_report(report, indent=indent) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Failed to write metrics report to '{path}': {exc}") from exc
    return path
