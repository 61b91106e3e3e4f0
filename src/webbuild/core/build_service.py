"""Core build service — merges the build request and calls the bundler.

The bundler is injected at construction time as any object satisfying
:class:`~webbuild.core.protocols.Bundler`.  Whatever the bundler raises
is returned as ``Err(BuildError)``; nothing escapes this service.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from webbuild.core.defaults import DEFAULT_BUILD_SETTINGS, PLUGINS
from webbuild.core.models import BuildResult
from webbuild.core.protocols import Bundler
from webbuild.core.result import Err, Ok, Result
from webbuild.exceptions import BuildError, BuildFailure, WebBuildError

logger = logging.getLogger(__name__)


def merge_build_request(
    entrypoints: Sequence[Path],
    outdir: Path,
    cli_config: Mapping[str, Any],
    *,
    plugins: Sequence[str] = PLUGINS,
    defaults: Mapping[str, Any] = DEFAULT_BUILD_SETTINGS,
) -> dict[str, Any]:
    """Build the request handed to the bundler.

    CLI keys are spread over the defaults last, so they replace
    same-named top-level keys wholesale.  Nested maps are not merged:
    ``--define.X=1`` drops the default ``define`` map entirely.
    An ``outdir`` that is not a non-empty string falls back to *outdir*,
    the directory the pipeline cleaned.
    """
    request: dict[str, Any] = {
        "entrypoints": [str(path) for path in entrypoints],
        "outdir": str(outdir),
        "plugins": list(plugins),
    }
    request.update(copy.deepcopy(dict(defaults)))
    request.update(copy.deepcopy(dict(cli_config)))
    if not isinstance(request["outdir"], str) or not request["outdir"].strip():
        request["outdir"] = str(outdir)
    return request


def freeze_mapping(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of *mapping*, nested maps and lists included.

    Nested maps become :class:`~types.MappingProxyType` views and lists
    become tuples.
    """
    return MappingProxyType({key: _freeze(value) for key, value in mapping.items()})


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return freeze_mapping(value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class BuildService:
    """Stateless service that runs one bundler call.

    Parameters
    ----------
    bundler:
        Any object satisfying the :class:`Bundler` protocol.
    """

    def __init__(self, bundler: Bundler) -> None:
        self._bundler: Bundler = bundler

    async def build(
        self,
        entrypoints: Sequence[Path],
        outdir: Path,
        cli_config: Mapping[str, Any],
    ) -> Result[BuildResult]:
        """Merge the request and delegate it to the bundler.

        Returns
        -------
        Ok[BuildResult]
            The bundler's artifacts.
        Err
            A :class:`BuildError` wrapping whatever the bundler raised,
            with the entrypoints, outdir and merged request as context.
        """
        request = merge_build_request(entrypoints, outdir, cli_config)
        logger.debug("Build request: %r", request)

        try:
            result = await self._bundler.build(request)
        except Exception as exc:
            detail = exc.message if isinstance(exc, WebBuildError) else str(exc)
            error = BuildError(
                f"Build failed: {detail}" if detail else "Build failed",
                context=BuildFailure(
                    original_error=exc,
                    entrypoints=tuple(entrypoints),
                    outdir=outdir,
                    config=freeze_mapping(request),
                ),
                hint=exc.hint if isinstance(exc, WebBuildError) else None,
            )
            error.__cause__ = exc
            return Err(error)

        return Ok(result)
