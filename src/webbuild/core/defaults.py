"""Fixed build settings.

These are the values every build starts from; CLI flags are spread
over :data:`DEFAULT_BUILD_SETTINGS` by the build service.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# We need to update these if the web app's directory structure changes
SOURCE_ROOT: Path = Path("src")
ENTRYPOINT_PATTERN: str = "*.html"
EXCLUDED_SEGMENT: str = "node_modules"
DEFAULT_OUTDIR_NAME: str = "dist"

PLUGINS: tuple[str, ...] = ("bun-plugin-tailwind",)
"""Plugin module specifiers, resolved by the bundler from the project directory."""

DEFAULT_BUILD_SETTINGS: dict[str, Any] = {
    "minify": True,
    "target": "browser",
    "sourcemap": "linked",
    "define": {
        "process.env.NODE_ENV": json.dumps("production"),
    },
}
