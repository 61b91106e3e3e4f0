"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on concrete
implementations, so the pipeline can be driven by fakes in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from webbuild.core.models import BuildResult


class FileSystem(Protocol):
    """Filesystem capability used by the workspace cleaner."""

    def exists(self, path: Path) -> bool:
        """Return whether *path* exists."""
        ...  # pragma: no cover

    def remove_tree(self, path: Path) -> None:
        """Remove *path* and everything below it.

        Raises
        ------
        OSError
            When removal fails (permissions, I/O).
        """
        ...  # pragma: no cover


class Bundler(Protocol):
    """Contract for bundling engines.

    The request is the merged build configuration: at least
    ``entrypoints``, ``outdir``, ``plugins``, ``minify``, ``target``,
    ``sourcemap`` and ``define``, plus any pass-through CLI keys.
    """

    async def build(self, request: Mapping[str, Any]) -> BuildResult:
        """Bundle according to *request* and return the written artifacts.

        Any failure is raised; the caller wraps it.
        """
        ...  # pragma: no cover
