"""Allow ``python -m webbuild`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m webbuild`` behaves identically to the ``webbuild`` console
script.
"""

from __future__ import annotations

from webbuild.cli.app import cli

if __name__ == "__main__":
    cli()
