"""Infrastructure layer — filesystem, source scanning and bun.

Every raw OS or subprocess failure of the bundler is re-raised here as
a :class:`~webbuild.exceptions.BundlerError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from webbuild.infra.bun_bundler import BunBundler, parse_build_output
from webbuild.infra.bun_detector import BunStatus, detect_bun, require_bun
from webbuild.infra.discovery import discover_entrypoints
from webbuild.infra.filesystem import LocalFileSystem

__all__: list[str] = [
    "BunBundler",
    "BunStatus",
    "LocalFileSystem",
    "detect_bun",
    "discover_entrypoints",
    "parse_build_output",
    "require_bun",
]
