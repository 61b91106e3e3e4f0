"""webbuild — production build orchestrator for HTML-entrypoint web projects.

Parses free-form CLI flags, cleans the output directory, discovers
entrypoints and delegates bundling to Bun.
"""

from webbuild.version import __version__

__all__: list[str] = ["__version__"]
