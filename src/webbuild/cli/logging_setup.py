"""Log configuration for the ``webbuild`` logger tree.

Core and infra modules log through ``logging.getLogger(__name__)``;
records are rendered on stderr by Rich.
"""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

from webbuild.cli.console import error_console

LOG_LEVEL_ENV_VAR: str = "WEBBUILD_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to its number.

    Unknown or empty names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """
    if not value:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single Rich handler to the ``webbuild`` logger.

    *level* wins over ``WEBBUILD_LOG_LEVEL``.  Safe to call repeatedly.
    """
    logger = logging.getLogger("webbuild")
    logger.setLevel(resolve_log_level(level or os.environ.get(LOG_LEVEL_ENV_VAR)))
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(
            console=error_console,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    )
    logger.propagate = False
    return logger
