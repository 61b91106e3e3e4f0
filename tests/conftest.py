"""Shared pytest fixtures for the webbuild test suite.

Guidelines
----------
* No real bun process in any test; the bundler is faked or the
  subprocess call is mocked.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from webbuild.core.models import Artifact, BuildResult


class FakeFileSystem:
    """In-memory :class:`FileSystem` that records lookups and removals."""

    def __init__(
        self,
        existing: set[Path] | None = None,
        *,
        remove_error: Exception | None = None,
    ) -> None:
        self.existing: set[Path] = set(existing or ())
        self.removed: list[Path] = []
        self.checked: list[Path] = []
        self.remove_error = remove_error

    def exists(self, path: Path) -> bool:
        self.checked.append(path)
        return path in self.existing

    def remove_tree(self, path: Path) -> None:
        if self.remove_error is not None:
            raise self.remove_error
        self.existing.discard(path)
        self.removed.append(path)


class FakeBundler:
    """:class:`Bundler` returning a canned result or raising a canned error."""

    def __init__(
        self,
        result: BuildResult | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.result = result if result is not None else BuildResult(artifacts=())
        self.error = error
        self.requests: list[Mapping[str, Any]] = []

    async def build(self, request: Mapping[str, Any]) -> BuildResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def html_project(tmp_path: Path) -> Path:
    """A project with two HTML entrypoints and one inside node_modules."""
    src = tmp_path / "src"
    (src / "pages").mkdir(parents=True)
    (src / "node_modules" / "widget").mkdir(parents=True)
    (src / "index.html").write_text("<html></html>", encoding="utf-8")
    (src / "pages" / "about.html").write_text("<html></html>", encoding="utf-8")
    (src / "node_modules" / "widget" / "demo.html").write_text("<html></html>", encoding="utf-8")
    (src / "main.ts").write_text("export {};", encoding="utf-8")
    return tmp_path


def artifacts_under(root: Path) -> BuildResult:
    """A typical bun output set rooted at *root*."""
    return BuildResult(
        artifacts=(
            Artifact(path=root / "index.html", kind="entry-point", size=512),
            Artifact(path=root / "chunk-abc123.js", kind="chunk", size=48_640),
            Artifact(path=root / "chunk-abc123.js.map", kind="sourcemap", size=2_097_152),
        )
    )
