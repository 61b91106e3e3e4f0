"""Raw CLI token → typed configuration value.

Pure and total: coercion never fails, the raw string is the fallback.
"""

from __future__ import annotations

import re
from typing import Union

ConfigValue = Union[bool, int, float, str, list[str], dict[str, "ConfigValue"]]
"""Any value that can appear in a parsed configuration map."""

_INTEGER_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[0-9]*\.[0-9]+")


def coerce_value(raw: str) -> ConfigValue:
    """Return the most specific value for *raw*.

    * ``"true"`` / ``"false"`` → ``bool``
    * ``"42"`` → ``int``
    * ``"1.5"`` or ``".5"`` → ``float``
    * ``"a, b"`` → ``["a", "b"]`` (elements stay strings)
    * anything else → *raw* unchanged
    """
    if raw == "true":
        return True
    if raw == "false":
        return False

    if _INTEGER_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)

    if "," in raw:
        return [part.strip() for part in raw.split(",")]

    return raw
