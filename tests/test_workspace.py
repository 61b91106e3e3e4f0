"""Tests for the workspace cleaner and the local filesystem adapter."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import FakeFileSystem

from webbuild.core.result import Err, Ok
from webbuild.core.workspace import clean_workspace, is_protected
from webbuild.exceptions import CleanError
from webbuild.infra.filesystem import LocalFileSystem


# ---------------------------------------------------------------------------
# clean_workspace
# ---------------------------------------------------------------------------

class TestCleanWorkspace:
    def test_missing_directory_is_noop(self) -> None:
        fs = FakeFileSystem()
        assert clean_workspace(Path("dist"), fs) == Ok(None)
        assert fs.removed == []

    def test_existing_directory_is_removed(self) -> None:
        fs = FakeFileSystem({Path("dist")})
        assert clean_workspace(Path("dist"), fs) == Ok(None)
        assert fs.removed == [Path("dist")]

    def test_removal_failure_returns_clean_error(self) -> None:
        original = PermissionError("denied")
        fs = FakeFileSystem({Path("dist")}, remove_error=original)

        result = clean_workspace(Path("dist"), fs)

        assert isinstance(result, Err)
        error = result.error
        assert isinstance(error, CleanError)
        assert error.kind == "CleanError"
        assert "dist" in error.message
        assert error.context.directory == Path("dist")
        assert error.context.original_error is original
        assert error.__cause__ is original

    def test_notify_runs_before_removal(self) -> None:
        fs = FakeFileSystem({Path("dist")})
        seen: list[tuple[str, list[Path]]] = []

        def record(message: str) -> None:
            seen.append((message, list(fs.removed)))

        clean_workspace(Path("dist"), fs, notify=record)

        assert seen == [("🗑️ Cleaning previous build at dist", [])]
        assert fs.removed == [Path("dist")]

    def test_notify_skipped_when_nothing_to_clean(self) -> None:
        seen: list[str] = []
        assert clean_workspace(Path("dist"), FakeFileSystem(), notify=seen.append) == Ok(None)
        assert seen == []

    def test_working_directory_is_refused(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        fs = FakeFileSystem({Path(".")})
        seen: list[str] = []

        result = clean_workspace(Path("."), fs, notify=seen.append)

        assert isinstance(result, Err)
        assert isinstance(result.error, CleanError)
        assert result.error.context.directory == Path(".")
        assert isinstance(result.error.context.original_error, ValueError)
        assert result.error.hint
        assert fs.removed == []
        assert seen == []

    def test_parent_of_working_directory_is_refused(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        project = tmp_path / "app"
        project.mkdir()
        monkeypatch.chdir(project)
        (tmp_path / "keep.txt").write_text("x", encoding="utf-8")

        result = clean_workspace(tmp_path, LocalFileSystem())

        assert isinstance(result, Err)
        assert (tmp_path / "keep.txt").exists()
        assert project.exists()


# ---------------------------------------------------------------------------
# is_protected
# ---------------------------------------------------------------------------

class TestIsProtected:
    def test_cwd_and_parents(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        project = tmp_path / "app"
        project.mkdir()
        monkeypatch.chdir(project)

        assert is_protected(Path("."))
        assert is_protected(project)
        assert is_protected(tmp_path)
        assert is_protected(Path(".."))

    def test_subdirectories_and_siblings(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        project = tmp_path / "app"
        project.mkdir()
        monkeypatch.chdir(project)

        assert not is_protected(Path("dist"))
        assert not is_protected(project / "build" / "out")
        assert not is_protected(tmp_path / "other")


# ---------------------------------------------------------------------------
# LocalFileSystem
# ---------------------------------------------------------------------------

class TestLocalFileSystem:
    def test_exists(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        assert fs.exists(tmp_path)
        assert not fs.exists(tmp_path / "missing")

    def test_remove_tree_is_recursive(self, tmp_path: Path) -> None:
        target = tmp_path / "dist"
        (target / "assets" / "img").mkdir(parents=True)
        (target / "assets" / "img" / "logo.png").write_bytes(b"\x89PNG")
        (target / "index.html").write_text("<html></html>", encoding="utf-8")

        LocalFileSystem().remove_tree(target)

        assert not target.exists()
        assert tmp_path.exists()

    def test_remove_tree_on_file(self, tmp_path: Path) -> None:
        target = tmp_path / "dist"
        target.write_text("stale", encoding="utf-8")

        LocalFileSystem().remove_tree(target)

        assert not target.exists()

    def test_clean_real_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "build"
        (target / "nested").mkdir(parents=True)

        assert clean_workspace(target, LocalFileSystem()) == Ok(None)
        assert not target.exists()
