"""Bun backed implementation of :class:`~webbuild.core.protocols.Bundler`.

This module is the **only** place in the codebase that runs bun.  The
merged build request is handed to a small ES-module driver as JSON on
stdin; the driver calls ``Bun.build`` and prints the outputs as JSON.
Every failure is raised as :class:`~webbuild.exceptions.BundlerError`.
"""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from webbuild.core.models import Artifact, BuildResult
from webbuild.exceptions import BundlerError
from webbuild.infra.bun_detector import require_bun

logger = logging.getLogger(__name__)

RESULT_MARKER: str = "__WEBBUILD_RESULT__"
"""Prefix of the stdout line carrying the JSON artifact list."""

_DRIVER_FILENAME = "webbuild-driver.mjs"

# Plugins are module specifiers resolved from the project directory, so
# the temporary driver location does not matter for resolution.
_DRIVER_SOURCE = """\
const request = JSON.parse(await Bun.stdin.text());

const plugins = [];
for (const specifier of request.plugins ?? []) {
  const imported = await import(Bun.resolveSync(specifier, process.cwd()));
  plugins.push(imported.default ?? imported);
}

let result;
try {
  result = await Bun.build({ ...request, plugins });
} catch (error) {
  const errors = error instanceof AggregateError ? error.errors : [error];
  console.error(errors.map(String).join("\\n"));
  process.exit(1);
}

if (!result.success) {
  console.error(result.logs.map(String).join("\\n"));
  process.exit(1);
}

const outputs = result.outputs.map((output) => ({
  path: output.path,
  kind: output.kind,
  size: output.size,
}));
console.log("%s" + JSON.stringify(outputs));
""" % RESULT_MARKER


class BunBundler:
    """Concrete :class:`Bundler` that runs ``Bun.build`` through bun.

    Parameters
    ----------
    executable:
        Path to bun.  When ``None``, it is located on each build via
        :func:`~webbuild.infra.bun_detector.require_bun`.
    project_dir:
        Working directory for bun; plugins and relative paths resolve
        from here.  Defaults to the process working directory.

    This class satisfies the :class:`~webbuild.core.protocols.Bundler`
    protocol structurally, without explicit inheritance.
    """

    def __init__(
        self,
        executable: Path | None = None,
        *,
        project_dir: Path | None = None,
    ) -> None:
        self._executable: Path | None = executable
        self._project_dir: Path | None = project_dir

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    async def build(self, request: Mapping[str, Any]) -> BuildResult:
        """Run one bun build for *request*.

        Raises
        ------
        BundlerNotFoundError
            When bun cannot be located.
        BundlerError
            When bun exits non-zero or prints no usable result.
        """
        executable = self._executable or require_bun()
        payload = json.dumps(dict(request)).encode("utf-8")

        with tempfile.TemporaryDirectory(prefix="webbuild-") as tmp:
            driver = Path(tmp) / _DRIVER_FILENAME
            driver.write_text(_DRIVER_SOURCE, encoding="utf-8")

            logger.debug("Running %s %s", executable, driver)
            try:
                process = await asyncio.create_subprocess_exec(
                    str(executable),
                    str(driver),
                    stdin=asyncio.subprocess.PIPE,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    cwd=self._project_dir,
                )
            except OSError as exc:
                raise BundlerError(f"Could not start bun: {exc}") from exc

            stdout, stderr = await process.communicate(payload)

        errors = stderr.decode("utf-8", errors="replace").strip()
        if errors:
            logger.debug("bun stderr:\n%s", errors)

        if process.returncode != 0:
            message = f"bun exited with error status {process.returncode}"
            raise BundlerError(
                f"{message}:\n{errors}" if errors else message,
                hint="Fix the reported errors and run the build again.",
            )

        return parse_build_output(stdout.decode("utf-8", errors="replace"))


# ---------------------------------------------------------------------------
# Output parsing (pure)
# ---------------------------------------------------------------------------

def parse_build_output(stdout: str) -> BuildResult:
    """Extract the artifact list from the driver's stdout.

    Only the last line starting with :data:`RESULT_MARKER` is read;
    anything plugins print alongside it is ignored.

    Raises
    ------
    BundlerError
        When no result line is present or it is not a valid artifact list.
    """
    lines = [line for line in stdout.splitlines() if line.startswith(RESULT_MARKER)]
    if not lines:
        raise BundlerError("bun finished without reporting any build output.")

    try:
        raw: object = json.loads(lines[-1][len(RESULT_MARKER):])
    except json.JSONDecodeError as exc:
        raise BundlerError(f"Unreadable build output from bun: {exc}") from exc

    if not isinstance(raw, list):
        raise BundlerError("bun reported build output in an unexpected shape.")

    try:
        artifacts = tuple(
            Artifact(
                path=Path(entry["path"]),
                kind=str(entry["kind"]),
                size=int(entry["size"]),
            )
            for entry in raw
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise BundlerError(f"Malformed artifact in bun output: {exc}") from exc

    return BuildResult(artifacts=artifacts)
