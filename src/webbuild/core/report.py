"""Pure formatting of a build result into report rows.

Nothing here can fail; rendering to the terminal is the CLI's job.
"""

from __future__ import annotations

import os
from pathlib import Path

from webbuild.core.models import ArtifactRow, BuildReport, BuildResult

_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB")


def format_file_size(size: int | float) -> str:
    """Render *size* bytes as ``"1.50 KB"``; GB is the largest unit."""
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {_SIZE_UNITS[unit_index]}"


def format_elapsed(elapsed_ms: float) -> str:
    """Render milliseconds with two decimals (``"12.34"``)."""
    return f"{elapsed_ms:.2f}"


def build_report(result: BuildResult, elapsed_ms: float, cwd: Path) -> BuildReport:
    """Produce one row per artifact, paths relative to *cwd*."""
    rows = tuple(
        ArtifactRow(
            file=os.path.relpath(artifact.path, cwd),
            kind=artifact.kind,
            size=format_file_size(artifact.size),
        )
        for artifact in result.artifacts
    )
    return BuildReport(
        rows=rows,
        elapsed_ms=elapsed_ms,
        elapsed=format_elapsed(elapsed_ms),
    )
