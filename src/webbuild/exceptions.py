"""Custom exception hierarchy for webbuild.

All exceptions that cross layer boundaries must inherit from
:class:`WebBuildError`.  Raw third-party or OS exceptions must never
escape a pipeline stage; they are wrapped into one of the typed
pipeline errors below, which keep the original error in their context.

Hierarchy
---------
WebBuildError
├── CleanError            (pipeline: output directory removal failed)
├── BuildError            (pipeline: the bundler call failed)
└── BundlerError          (infra: bun reported a failure)
    └── BundlerNotFoundError

Only :class:`CleanError` and :class:`BuildError` ever reach the CLI error
boundary from the pipeline; see :data:`PipelineError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Union


class WebBuildError(Exception):
    """Base exception for all webbuild errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: ClassVar[str] = "WebBuildError"
    """Discriminant used by the top-level handler."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Failure context payloads ----------------------------------------------

@dataclass(frozen=True, slots=True)
class CleanFailure:
    """Context attached to a :class:`CleanError`."""

    directory: Path
    original_error: BaseException


@dataclass(frozen=True, slots=True)
class BuildFailure:
    """Context attached to a :class:`BuildError`."""

    original_error: BaseException
    entrypoints: tuple[Path, ...]
    outdir: Path
    config: Mapping[str, Any]
    """The full merged build request that was handed to the bundler."""


# --- Pipeline errors -------------------------------------------------------

class CleanError(WebBuildError):
    """Raised when the previous output directory cannot be removed."""

    kind: ClassVar[str] = "CleanError"

    def __init__(
        self,
        message: str,
        *,
        context: CleanFailure,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.context: CleanFailure = context


class BuildError(WebBuildError):
    """Raised when the delegated bundler call fails."""

    kind: ClassVar[str] = "BuildError"

    def __init__(
        self,
        message: str,
        *,
        context: BuildFailure,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.context: BuildFailure = context


PipelineError = Union[CleanError, BuildError]
"""Closed set of errors a pipeline run can end with."""


# --- Bundler (infrastructure) ----------------------------------------------

class BundlerError(WebBuildError):
    """Raised when the bundling engine reports a failure."""

    kind: ClassVar[str] = "BundlerError"


class BundlerNotFoundError(BundlerError):
    """Raised when the ``bun`` executable cannot be located."""

    kind: ClassVar[str] = "BundlerNotFoundError"
