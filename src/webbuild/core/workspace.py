"""Workspace cleaner — removes the previous build output."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from webbuild.core.protocols import FileSystem
from webbuild.core.result import Err, Ok, Result
from webbuild.exceptions import CleanError, CleanFailure

logger = logging.getLogger(__name__)


def is_protected(directory: Path) -> bool:
    """Return whether *directory* is the working directory or one of its parents."""
    resolved = Path(directory).resolve()
    cwd = Path.cwd().resolve()
    return resolved == cwd or resolved in cwd.parents


def clean_workspace(
    directory: Path,
    filesystem: FileSystem,
    *,
    notify: Callable[[str], None] | None = None,
) -> Result[None]:
    """Remove *directory* recursively if it exists.

    A missing directory is a successful no-op.  The working directory
    and its parents are never removed.  Either failure is returned as
    ``Err(CleanError)`` carrying the directory and the original error.
    *notify* receives a message right before anything is removed.
    """
    if not filesystem.exists(directory):
        logger.debug("Nothing to clean at %s", directory)
        return Ok(None)

    if is_protected(directory):
        refusal = ValueError(f"{directory} contains the working directory")
        return Err(
            CleanError(
                f"Refusing to clean directory: {directory}",
                context=CleanFailure(directory=directory, original_error=refusal),
                hint="Pass --outdir pointing at a dedicated build directory.",
            )
        )

    if notify is not None:
        notify(f"🗑️ Cleaning previous build at {directory}")

    try:
        filesystem.remove_tree(directory)
    except Exception as exc:
        error = CleanError(
            f"Failed to clean directory: {directory}",
            context=CleanFailure(directory=directory, original_error=exc),
            hint="Check that the directory is writable and not in use.",
        )
        error.__cause__ = exc
        return Err(error)

    logger.debug("Removed %s", directory)
    return Ok(None)
