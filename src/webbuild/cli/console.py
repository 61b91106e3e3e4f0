"""Rich consoles shared by the CLI layer.

Progress and the build report go to stdout; errors and log records go
to stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
"""Standard output console."""

error_console = Console(stderr=True)
"""Standard error console."""
