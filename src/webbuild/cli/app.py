"""CLI application entry point for webbuild.

This module is the **sole error boundary** for the entire application.
Pipeline failures arrive as ``Err`` values and are rendered by category;
any :class:`~webbuild.exceptions.WebBuildError`, ``KeyboardInterrupt`` or
unexpected ``Exception`` that still escapes is caught in :func:`cli`.

Architecture notes
------------------
* No business logic lives here. Flags are parsed by the core layer and
  all work is delegated to the pipeline.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

from rich.markup import escape

from webbuild.cli import exit_codes
from webbuild.cli.console import console, error_console
from webbuild.cli.logging_setup import configure_logging
from webbuild.cli.output import print_progress, render_failure, render_report
from webbuild.exceptions import WebBuildError
from webbuild.version import __version__

USAGE = """\
🏗️  webbuild — production build for HTML entrypoints

Usage: webbuild [options]

Common Options:
  --outdir <path>          Output directory (default: "dist")
  --minify                 Enable minification (or --minify.whitespace, --minify.syntax, etc)
  --sourcemap <type>       Sourcemap type: none|linked|inline|external
  --target <target>        Build target: browser|bun|node
  --format <format>        Output format: esm|cjs|iife
  --splitting              Enable code splitting
  --packages <type>        Package handling: bundle|external
  --public-path <path>     Public path for assets
  --env <mode>             Environment handling: inline|disable|prefix*
  --conditions <list>      Package.json export conditions (comma separated)
  --external <list>        External packages (comma separated)
  --banner <text>          Add banner text to output
  --footer <text>          Add footer text to output
  --define <obj>           Define global constants (e.g. --define.VERSION=1.0.0)
  --help, -h               Show this help message
  --version, -V            Show the webbuild version

Any other --flag is passed through to Bun.build unchanged.

Example:
  webbuild --outdir=dist --minify --sourcemap=linked --external=react,react-dom
"""

_HELP_FLAGS = frozenset({"--help", "-h"})
_VERSION_FLAGS = frozenset({"--version", "-V"})


# ---------------------------------------------------------------------------
# Build dispatch
# ---------------------------------------------------------------------------

def _handle_build(argv: Sequence[str]) -> int:
    """Parse flags, run the pipeline and render its outcome."""
    from webbuild.core.args import parse_args
    from webbuild.core.pipeline import run_pipeline
    from webbuild.core.result import Err, Ok
    from webbuild.infra.bun_bundler import BunBundler
    from webbuild.infra.discovery import discover_entrypoints
    from webbuild.infra.filesystem import LocalFileSystem

    cli_config = parse_args(argv)

    result = asyncio.run(
        run_pipeline(
            cli_config,
            filesystem=LocalFileSystem(),
            bundler=BunBundler(),
            discover=discover_entrypoints,
            notify=print_progress,
        )
    )

    match result:
        case Ok(value=outcome):
            render_report(outcome.report)
            return exit_codes.SUCCESS
        case Err(error=error):
            render_failure(error)
            return exit_codes.GENERAL_ERROR
        case _:
            raise TypeError(f"Unexpected pipeline result: {result!r}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the webbuild CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if _HELP_FLAGS.intersection(args):
        console.print(USAGE, markup=False, highlight=False)
        return exit_codes.SUCCESS

    if _VERSION_FLAGS.intersection(args):
        console.print(f"webbuild {__version__}", markup=False, highlight=False)
        return exit_codes.SUCCESS

    configure_logging()
    return _handle_build(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except WebBuildError as exc:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            error_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
