"""Free-form CLI flags → nested configuration map.

Supported forms::

    --flag                  → {"flag": True}
    --no-flag               → {"flag": False}
    --key=value             → {"key": <coerced value>}
    --key value             → {"key": <coerced value>}
    --parent.child=value    → {"parent": {"child": <coerced value>}}

Kebab-case keys become camelCase (``--public-path`` → ``publicPath``).
Tokens that do not start with ``--`` are ignored, and no flag is
validated: unknown keys are passed through to the bundler as-is.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from webbuild.core.coercion import ConfigValue, coerce_value

_KEBAB_RE = re.compile(r"-([a-z])")

_FLAG_PREFIX = "--"
_NEGATION_PREFIX = "--no-"


def to_camel_case(name: str) -> str:
    """Convert kebab-case *name* to camelCase (``source-map`` → ``sourceMap``)."""
    return _KEBAB_RE.sub(lambda match: match.group(1).upper(), name)


def parse_args(argv: Sequence[str]) -> dict[str, ConfigValue]:
    """Parse *argv* (program name excluded) into a configuration map.

    Flags are applied left to right, so a later flag for the same key
    wins (``--splitting --no-splitting`` yields ``splitting=False``).
    """
    config: dict[str, ConfigValue] = {}
    index = 0

    while index < len(argv):
        arg = argv[index]
        index += 1

        if not arg.startswith(_FLAG_PREFIX):
            continue

        if arg.startswith(_NEGATION_PREFIX):
            _assign(config, to_camel_case(arg[len(_NEGATION_PREFIX):]), False)
            continue

        if "=" not in arg and (
            index >= len(argv) or argv[index].startswith(_FLAG_PREFIX)
        ):
            _assign(config, to_camel_case(arg[len(_FLAG_PREFIX):]), True)
            continue

        if "=" in arg:
            key, _, raw = arg[len(_FLAG_PREFIX):].partition("=")
        else:
            key = arg[len(_FLAG_PREFIX):]
            raw = argv[index]
            index += 1

        _assign(config, to_camel_case(key), coerce_value(raw))

    return config


def _assign(config: dict[str, ConfigValue], key: str, value: ConfigValue) -> None:
    """Store *value* under *key*, nesting one level for dotted keys.

    A dotted key replaces a scalar already stored under its parent with
    a fresh map; an existing map is extended.
    """
    if not key:
        return

    if "." not in key:
        config[key] = value
        return

    parent, _, child = key.partition(".")
    if not parent or not child:
        return

    existing = config.get(parent)
    if not isinstance(existing, dict):
        existing = {}
        config[parent] = existing
    existing[child] = value
