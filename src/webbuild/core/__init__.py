"""Core / service layer — configuration parsing and build orchestration.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* Collaborators (filesystem, bundler, discovery) are injected.
"""

from webbuild.core.args import parse_args, to_camel_case
from webbuild.core.build_service import BuildService, merge_build_request
from webbuild.core.coercion import ConfigValue, coerce_value
from webbuild.core.models import Artifact, ArtifactRow, BuildReport, BuildResult, PipelineOutcome
from webbuild.core.pipeline import run_pipeline
from webbuild.core.protocols import Bundler, FileSystem
from webbuild.core.result import Err, Ok, Result
from webbuild.core.workspace import clean_workspace

__all__: list[str] = [
    "Artifact",
    "ArtifactRow",
    "BuildReport",
    "BuildResult",
    "BuildService",
    "Bundler",
    "ConfigValue",
    "Err",
    "FileSystem",
    "Ok",
    "PipelineOutcome",
    "Result",
    "clean_workspace",
    "coerce_value",
    "merge_build_request",
    "parse_args",
    "run_pipeline",
    "to_camel_case",
]
