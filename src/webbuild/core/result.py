"""Result values for fallible pipeline stages.

A stage returns either :class:`Ok` wrapping its value or :class:`Err`
wrapping the typed error it failed with.  Callers inspect the result
with ``match`` and forward an ``Err`` unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from webbuild.exceptions import PipelineError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    error: PipelineError


Result = Union[Ok[T], Err]
