"""Terminal rendering of pipeline progress, reports and failures.

Display only. Every value shown here was computed by the core layer.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from webbuild.cli.console import console, error_console
from webbuild.core.models import BuildReport
from webbuild.exceptions import BuildError, CleanError, PipelineError


def print_progress(message: str) -> None:
    """Print one pipeline progress message (used as the *notify* callback)."""
    console.print(f"\n{escape(message)}", soft_wrap=True)


def render_report(report: BuildReport) -> None:
    """Print the artifact table followed by the elapsed build time."""
    table = Table(
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("File", style="bold", overflow="fold")
    table.add_column("Type")
    table.add_column("Size", justify="right")

    for row in report.rows:
        table.add_row(escape(row.file), escape(row.kind), row.size)

    console.print("\n[bold]Build Output:[/bold]")
    console.print(table)
    console.print(f"\n[bold green]✅ Build completed in {report.elapsed}ms[/bold green]\n")


def render_failure(error: PipelineError) -> None:
    """Print the category-specific message for a failed run."""
    match error:
        case CleanError():
            headline = f"[bold red]❌ Clean failed:[/bold red] {escape(error.message)}"
        case BuildError():
            # The message already reads "Build failed: <detail>".
            headline = f"[bold red]❌ {escape(error.message)}[/bold red]"
        case _:
            raise TypeError(f"Unhandled pipeline error: {error!r}")

    error_console.print(f"\n{headline}\n", soft_wrap=True)
    if error.hint:
        error_console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}", soft_wrap=True)
