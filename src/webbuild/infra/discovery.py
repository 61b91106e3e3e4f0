"""Infrastructure: entrypoint discovery.

Scans the source tree synchronously; entrypoint sets are small.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from webbuild.core.defaults import ENTRYPOINT_PATTERN, EXCLUDED_SEGMENT, SOURCE_ROOT

logger = logging.getLogger(__name__)


def discover_entrypoints(
    source_root: Path | str = SOURCE_ROOT,
    *,
    pattern: str = ENTRYPOINT_PATTERN,
    excluded: str = EXCLUDED_SEGMENT,
) -> tuple[Path, ...]:
    """Return absolute paths of files under *source_root* matching *pattern*.

    Paths containing *excluded* anywhere in their absolute form are
    dropped, as are hidden files and files inside hidden directories
    (any path part below *source_root* starting with ``.``).  Order is
    the scan order.  A missing root yields ``()``; an empty result is
    not an error.
    """
    root = Path(source_root)
    if not root.is_dir():
        logger.debug("Source root %s does not exist", root)
        return ()

    entrypoints: list[Path] = []
    for match in root.rglob(pattern):
        if not match.is_file():
            continue
        if any(part.startswith(".") for part in match.relative_to(root).parts):
            continue
        resolved = Path(os.path.abspath(match))
        if excluded in str(resolved):
            continue
        entrypoints.append(resolved)

    logger.debug("Discovered %d entrypoint(s) under %s", len(entrypoints), root)
    return tuple(entrypoints)
