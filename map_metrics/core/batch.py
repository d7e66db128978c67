"""Process several levels in one run, isolating per-level failures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..config import MetricsConfig
from ..exceptions import InvariantViolationError, LevelLoadError, ReportWriteError
from ..report import MetricsReport, log_report, report_path, write_report
from .analyzer import LevelAnalyzer, default_collectors
from .host import LevelProvider

logger = logging.getLogger(__name__)

_BANNER = "-" * 92


@dataclass
class BatchResult:
    reports: Dict[str, MetricsReport] = field(default_factory=dict)
    written: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, Exception] = field(default_factory=dict)
    unwritten: Dict[str, ReportWriteError] = field(default_factory=dict)
    checked: bool = True

    @property
    def exit_code(self) -> int:
        if not self.checked or self.failures:
            return 2
        return 0


def process_level(level_name: str, provider: LevelProvider, config: MetricsConfig) -> MetricsReport:
    """Load one level, aggregate its metrics and hand the report to the sinks.

    Raises ``LevelLoadError`` or ``InvariantViolationError``; in both cases
    nothing is logged as a report for the level.
    """

    logger.info("Will process %s", level_name)
    with LevelAnalyzer(level_name, provider) as analyzer:
        ctx = analyzer.context
        logger.info("Load %i streaming levels for world %s", ctx.streaming_level_count, ctx.world.name)
        report = analyzer.run(default_collectors(config))

    if config.log_reports:
        log_report(report, logger, indent=config.indent)
    return report


def run_batch(
    level_names: Iterable[str],
    provider: LevelProvider,
    config: Optional[MetricsConfig] = None,
) -> BatchResult:
    """Generate a metrics report for each of ``level_names``."""

    config = config or MetricsConfig()
    names: List[str] = list(level_names)
    result = BatchResult()

    logger.info(_BANNER)
    logger.info("Running map metrics generation")

    if not names:
        logger.error("No maps were checked")
        result.checked = False
        return result

    for level_name in names:
        try:
            destination = report_path(level_name, config)
        except ValueError as exc:
            logger.error("Skipping %s: %s", level_name, exc)
            result.failures[level_name] = LevelLoadError(str(exc))
            continue

        try:
            report = process_level(level_name, provider, config)
        except (LevelLoadError, InvariantViolationError) as exc:
            logger.error("Skipping %s: %s", level_name, exc)
            result.failures[level_name] = exc
            continue

        result.reports[level_name] = report
        if config.write_files:
            try:
                result.written[level_name] = write_report(report, destination, indent=config.indent)
            except ReportWriteError as exc:
                logger.error("%s", exc)
                result.unwritten[level_name] = exc

        logger.info("Finished processing of %s", level_name)

    if result.failures:
        logger.error("Map metrics generation failed for %i level(s)", len(result.failures))
    else:
        logger.info("Successfully finished running map metrics generation")
    logger.info(_BANNER)
    return result
