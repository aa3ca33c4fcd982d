# tests/helpers.py
"""Assertions shared by the shrink-tree tests."""

from __future__ import annotations

import math
from typing import Any

from propcheck.shrinking import Shrinkable

# Guard against a shrink tree that never bottoms out
MAX_FIRST_CHILD_STEPS = 10_000


def first_child_path(node: Shrinkable[Any]) -> list[Any]:
    """Values visited by always taking the first child, root included."""
    values = [node.value]
    for _ in range(MAX_FIRST_CHILD_STEPS):
        child = node.shrink().first()
        if child is None:
            return values
        node = child
        values.append(node.value)
    raise AssertionError(f"first-child path did not terminate within {MAX_FIRST_CHILD_STEPS} steps")


def first_child_minimum(node: Shrinkable[Any]) -> Any:
    """Value reached by always taking the first child."""
    return first_child_path(node)[-1]


def minimum_for(value: Any) -> Any:
    """Canonical minimum of the domain a generated value belongs to."""
    if value is None:
        return None
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 0
    if isinstance(value, float):
        return 0.0
    if isinstance(value, str):
        return ""
    if isinstance(value, list):
        return []
    if isinstance(value, dict):
        return {}
    raise TypeError(f"No canonical minimum for {type(value).__name__}: {value!r}")


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality that tells bool from int, list from tuple, and NaN from NaN.

    Python treats False == 0 and 0.0 == -0.0, which hides the differences
    these tests care about.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, float):
        if math.isnan(left):
            return math.isnan(right)
        return left == right and math.copysign(1.0, left) == math.copysign(1.0, right)
    if isinstance(left, list | tuple):
        return len(left) == len(right) and all(strictly_equal(a, b) for a, b in zip(left, right, strict=True))
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(strictly_equal(left[k], right[k]) for k in left)
    return bool(left == right)


def depth(value: Any) -> int:
    """Container nesting of a structure: 0 for leaves, 1 for a flat list or dict."""
    if isinstance(value, list):
        return 1 + max((depth(item) for item in value), default=0)
    if isinstance(value, dict):
        return 1 + max((depth(item) for item in value.values()), default=0)
    return 0
