"""Infrastructure: bun detection and platform guidance.

Locates the ``bun`` executable and provides platform-specific
installation guidance when it is missing.

Rules
-----
* Detection via the ``WEBBUILD_BUN`` environment variable or
  :func:`shutil.which` only, no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import os
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from webbuild.exceptions import BundlerNotFoundError

BUN_ENV_VAR: str = "WEBBUILD_BUN"
"""Environment variable holding an explicit path to the bun executable."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BunStatus:
    """Result of a bun detection attempt.

    Attributes
    ----------
    found : bool
        Whether bun was located.
    path : Path | None
        Absolute path to the bun binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing bun on the current
        platform.  Empty when bun is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_bun() -> BunStatus:
    """Probe for a bun binary, honouring ``WEBBUILD_BUN`` first."""
    override = os.environ.get(BUN_ENV_VAR)
    result = shutil.which(override) if override else shutil.which("bun")

    if result is not None:
        return BunStatus(found=True, path=Path(result).resolve(), install_commands=())

    return BunStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_bun() -> Path:
    """Locate bun or raise :class:`BundlerNotFoundError`."""
    status = detect_bun()
    if not status.found or status.path is None:
        hint_lines = ["Install bun using one of:"]
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        hint_lines.append(f"or point {BUN_ENV_VAR} at an existing bun binary.")
        raise BundlerNotFoundError(
            "bun is not installed or not on PATH.",
            hint="\n".join(hint_lines),
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            'powershell -c "irm bun.sh/install.ps1 | iex"',
            "scoop install bun",
        )
    if system == "darwin":
        return (
            "curl -fsSL https://bun.sh/install | bash",
            "brew install oven-sh/bun/bun",
        )
    return (
        "curl -fsSL https://bun.sh/install | bash",
        "npm install -g bun",
    )
