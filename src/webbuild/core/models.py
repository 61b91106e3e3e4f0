"""Domain models for webbuild.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Bundler output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Artifact:
    """A single file written by the bundler."""

    path: Path
    """Absolute path of the output file."""

    kind: str
    """Bun artifact kind (``entry-point``, ``chunk``, ``asset``, ``sourcemap``…)."""

    size: int
    """Size in bytes."""


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Ordered artifacts produced by one bundler run."""

    artifacts: tuple[Artifact, ...]

    def __len__(self) -> int:
        return len(self.artifacts)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArtifactRow:
    """One display row of the build report."""

    file: str
    kind: str
    size: str


@dataclass(frozen=True, slots=True)
class BuildReport:
    """Formatted summary of a successful build."""

    rows: tuple[ArtifactRow, ...]
    elapsed_ms: float
    elapsed: str
    """``elapsed_ms`` rendered with two decimals."""


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Everything a successful pipeline run produced."""

    outdir: Path
    entrypoints: tuple[Path, ...]
    result: BuildResult
    report: BuildReport
