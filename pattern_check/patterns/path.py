"""
Dotted path resolution over a JSON document.

Paths select nested fields with dot-separated components, e.g.
``alert.labels.severity`` or ``items.0.name``:

- a numeric component indexes into an array
- ``#`` as a component yields the length of an array
- a backslash escapes the next character, so ``a\\.b`` selects the key ``a.b``

A path that does not exist resolves to an absent value, whose string form
is the empty string.
"""

import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

ARRAY_LENGTH = "#"


@dataclass(frozen=True)
class ResolvedValue:
    """Value found at a path, or the absent marker when exists is False."""
    exists: bool
    value: Any = None

    @property
    def string(self) -> str:
        """String form used for comparisons."""
        if not self.exists:
            return ""
        return to_comparable_string(self.value)


ABSENT = ResolvedValue(exists=False)


def split_path(path: str) -> list[str]:
    """
    Split a path expression into its components.

    Args:
        path: Dotted path, backslash escapes the following character

    Returns:
        List of unescaped path components
    """
    components = []
    current = []
    escaped = False

    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            components.append("".join(current))
            current = []
        else:
            current.append(char)

    # A trailing backslash is kept literally
    if escaped:
        current.append("\\")

    components.append("".join(current))
    return components


def resolve_path(document: Any, path: Optional[str]) -> ResolvedValue:
    """
    Resolve a dotted path against a parsed JSON document.

    Args:
        document: Parsed JSON value (dict, list or scalar)
        path: Path expression; empty or None resolves to absent

    Returns:
        ResolvedValue for the selected field
    """
    if not path:
        return ABSENT

    current = document
    for component in split_path(path):
        if isinstance(current, dict):
            if component not in current:
                return ABSENT
            current = current[component]
        elif isinstance(current, list):
            if component == ARRAY_LENGTH:
                current = len(current)
            elif component.isdecimal() and int(component) < len(current):
                current = current[int(component)]
            else:
                return ABSENT
        else:
            return ABSENT

    return ResolvedValue(exists=True, value=current)


def to_comparable_string(value: Any) -> str:
    """
    String form of a JSON value for pattern comparison.

    null becomes the empty string, booleans are lowercase, numbers use plain
    positional notation without a trailing ``.0``, and objects or arrays are
    rendered as compact JSON with sorted keys.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # shortest round-trip digits in positional form, so 2.0 is "2" and 1e21 is all digits
        return format(Decimal(repr(value)).normalize(), "f")
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
