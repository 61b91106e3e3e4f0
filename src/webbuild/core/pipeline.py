"""Sequential build pipeline.

Stages run strictly in order::

    Cleaning → Discovering → Building → Reporting

``Cleaning`` and ``Building`` return a :class:`~webbuild.core.result.Result`;
the first ``Err`` ends the run and is returned unchanged.  ``Discovering``
and ``Reporting`` cannot fail.

Guarantees
----------
* No ``print()``; progress text goes through the *notify* callback.
* No retries; every failure is terminal for the run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from webbuild.core.build_service import BuildService
from webbuild.core.defaults import DEFAULT_OUTDIR_NAME
from webbuild.core.models import PipelineOutcome
from webbuild.core.protocols import Bundler, FileSystem
from webbuild.core.report import build_report
from webbuild.core.result import Err, Ok, Result
from webbuild.core.workspace import clean_workspace

logger = logging.getLogger(__name__)

Notify = Callable[[str], None]


def resolve_outdir(cli_config: Mapping[str, Any], cwd: Path) -> Path:
    """Return ``--outdir`` when given as a non-empty string, else ``<cwd>/dist``."""
    outdir = cli_config.get("outdir")
    if isinstance(outdir, str) and outdir.strip():
        return Path(outdir)
    return cwd / DEFAULT_OUTDIR_NAME


def _describe_count(count: int) -> str:
    return f"{count} HTML {'file' if count == 1 else 'files'}"


async def run_pipeline(
    cli_config: Mapping[str, Any],
    *,
    filesystem: FileSystem,
    bundler: Bundler,
    discover: Callable[[], tuple[Path, ...]],
    cwd: Path | None = None,
    notify: Notify | None = None,
) -> Result[PipelineOutcome]:
    """Run one complete build.

    Parameters
    ----------
    cli_config:
        Parsed CLI configuration; spread over the build defaults.
    filesystem:
        Capability used to clean the output directory.
    bundler:
        Engine the build request is delegated to.
    discover:
        Returns the entrypoint set.  Called once, after cleaning.
    cwd:
        Base for the default outdir and for relative report paths.
        Defaults to the process working directory.
    notify:
        Optional callable receiving human-readable progress messages.
    """
    base = cwd if cwd is not None else Path.cwd()

    def _notify(message: str) -> None:
        if notify is not None:
            notify(message)

    _notify("🚀 Starting build process...")
    outdir = resolve_outdir(cli_config, base)

    # Cleaning
    match clean_workspace(outdir, filesystem, notify=notify):
        case Err() as failure:
            return failure
        case Ok():
            pass

    start = time.perf_counter()

    # Discovering
    entrypoints = discover()
    _notify(f"📄 Found {_describe_count(len(entrypoints))} to process")

    # Building
    match await BuildService(bundler).build(entrypoints, outdir, cli_config):
        case Err() as failure:
            return failure
        case Ok(value=result):
            pass

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug("Bundler returned %d artifact(s) in %.2fms", len(result), elapsed_ms)

    # Reporting
    report = build_report(result, elapsed_ms, base)
    return Ok(
        PipelineOutcome(
            outdir=outdir,
            entrypoints=entrypoints,
            result=result,
            report=report,
        )
    )
