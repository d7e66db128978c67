"""Runtime settings for report generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class MetricsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    output_folder: str = Field("MapMetrics", min_length=1)
    saved_dir: Path = Path("Saved")
    write_files: bool = True
    log_reports: bool = True
    indent: int = Field(4, ge=0)
    include_light_actor_breakdown: bool = False

    @property
    def output_dir(self) -> Path:
        return self.saved_dir / self.output_folder

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MetricsConfig":
        """Build a validated config from a plain mapping, rejecting unknown keys."""

        return cls.model_validate(dict(mapping))
