"""Shared helper utilities for naming report keys and files."""

from __future__ import annotations

from pathlib import PurePosixPath


def count_label(count: int, suffix: str) -> str:
    """Return the report key for an integer bucket, e.g. ``3_Materials``."""

    return f"{int(count)}_{suffix}"


def level_base_name(level_name: str) -> str:
    """Return the file-safe base name of a level identifier.

    Level identifiers come either as package paths (``/Game/Maps/Arena``) or
    as file paths on disk (``C:\\Project\\Content\\Maps\\Arena.umap``).  Both
    separators are honoured and a trailing extension is dropped, so either
    form yields ``Arena``.
    """

    normalized = level_name.replace("\\", "/").rstrip("/")
    base = PurePosixPath(normalized).name
    if not base:
        raise ValueError(f"Cannot derive a base name from level '{level_name}'")
    stem, dot, _ = base.rpartition(".")
    return stem if dot and stem else base
