"""Tests for bun detection (infra/bun_detector.py).

All tests mock :func:`shutil.which`, so no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from webbuild.exceptions import BundlerNotFoundError
from webbuild.infra.bun_detector import (
    BUN_ENV_VAR,
    BunStatus,
    _platform_install_commands,
    detect_bun,
    require_bun,
)


@pytest.fixture(autouse=True)
def _no_bun_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BUN_ENV_VAR, raising=False)


# ---------------------------------------------------------------------------
# detect_bun
# ---------------------------------------------------------------------------

class TestDetectBun:
    @patch("webbuild.infra.bun_detector.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/local/bin/bun"  # type: ignore[union-attr]
        status = detect_bun()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()
        mock_which.assert_called_once_with("bun")  # type: ignore[union-attr]

    @patch("webbuild.infra.bun_detector.shutil.which")
    def test_not_found(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        status = detect_bun()

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0

    @patch("webbuild.infra.bun_detector.shutil.which")
    def test_env_override_is_used(
        self, mock_which: object, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv(BUN_ENV_VAR, "/custom/bun")
        mock_which.return_value = "/custom/bun"  # type: ignore[union-attr]

        status = detect_bun()

        assert status.found is True
        mock_which.assert_called_once_with("/custom/bun")  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# require_bun
# ---------------------------------------------------------------------------

class TestRequireBun:
    @patch("webbuild.infra.bun_detector.shutil.which")
    def test_found_returns_path(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/bun"  # type: ignore[union-attr]
        assert isinstance(require_bun(), Path)

    @patch("webbuild.infra.bun_detector.shutil.which")
    def test_missing_raises_with_hint(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        with pytest.raises(BundlerNotFoundError, match="not installed") as exc_info:
            require_bun()

        assert exc_info.value.hint is not None
        assert "Install bun" in exc_info.value.hint
        assert BUN_ENV_VAR in exc_info.value.hint


# ---------------------------------------------------------------------------
# Platform guidance
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("webbuild.infra.bun_detector.platform.system", return_value="Windows")
    def test_windows(self, _mock: object) -> None:
        assert any("bun.sh/install.ps1" in cmd for cmd in _platform_install_commands())

    @patch("webbuild.infra.bun_detector.platform.system", return_value="Darwin")
    def test_macos(self, _mock: object) -> None:
        assert any("brew" in cmd for cmd in _platform_install_commands())

    @patch("webbuild.infra.bun_detector.platform.system", return_value="Linux")
    def test_linux(self, _mock: object) -> None:
        assert any("bun.sh/install" in cmd for cmd in _platform_install_commands())


class TestBunStatus:
    def test_frozen(self) -> None:
        status = BunStatus(found=False, path=None, install_commands=())
        with pytest.raises(AttributeError):
            status.found = True  # type: ignore[misc]
