"""Dot-numeric version ordering.

.NET version strings are compared component by component. Components
that are not plain integers (e.g. the '1-preview' in '10.0.100-rc.1')
count as 0, so malformed input never raises.
"""

from collections.abc import Iterable
from enum import Enum


class Ordering(Enum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _to_int(part: str) -> int:
    # Signs, whitespace and underscores make a component non-numeric
    if part.isascii() and part.isdigit():
        return int(part)
    return 0


def _components(version: str) -> list[int]:
    """Split a version into integer components (non-numeric -> 0)."""
    return [_to_int(part) for part in version.split(".")]


def compare(a: str, b: str) -> Ordering:
    """Compare two dot-delimited version strings.

    The shorter sequence is padded with zeros, so '1.2' equals '1.2.0'.

    Args:
        a: First version string.
        b: Second version string.

    Returns:
        Ordering of a relative to b.
    """
    left = _components(a)
    right = _components(b)
    width = max(len(left), len(right))
    left += [0] * (width - len(left))
    right += [0] * (width - len(right))

    for x, y in zip(left, right, strict=True):
        if x < y:
            return Ordering.LESS
        if x > y:
            return Ordering.GREATER
    return Ordering.EQUAL


def version_key(version: str) -> tuple[int, ...]:
    """Sort key consistent with compare().

    Trailing zero components are dropped so that '1.2' and '1.2.0'
    produce the same key.
    """
    parts = _components(version)
    while parts and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


def major_version(version: str) -> int:
    """Return the leading numeric component of a version (0 if not numeric)."""
    return _to_int(version.split(".", 1)[0])


def find_highest(versions: Iterable[str]) -> str:
    """Return the highest version under compare().

    Versions that compare equal (e.g. '8.0' and '8.0.0') are ordered
    by their text, so the result does not depend on input order.

    Args:
        versions: Version strings to search.

    Returns:
        The highest version, or an empty string if there are none.
    """
    return max(versions, key=lambda v: (version_key(v), v), default="")
