# src/propcheck/core/canonical.py
"""
Canonical JSON serialization for generated JSON text.

Two-phase approach:
1. Normalize: Convert tuples to lists and check every value is JSON-safe (our code)
2. Serialize: Produce deterministic JSON per RFC 8785/JCS (rfc8785 package)

IMPORTANT: NaN and Infinity are strictly REJECTED, not silently converted.
Standard JSON has no spelling for them, and a json arbitrary that emitted
them would produce text other parsers refuse.
"""

from __future__ import annotations

import math
from typing import Any

import rfc8785


def _normalize_value(obj: Any) -> Any:
    """Check a single leaf value is a JSON-safe primitive.

    Raises:
        ValueError: If value is NaN or Infinity
        TypeError: If value has no JSON representation
    """
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            raise ValueError(f"Cannot canonicalize non-finite float: {obj}")
        return obj

    if obj is None or isinstance(obj, str | int | bool):
        return obj

    raise TypeError(f"Cannot canonicalize value of type {type(obj).__name__}: {obj!r}")


def _normalize_for_canonical(data: Any) -> Any:
    """Recursively normalize a data structure for canonical JSON.

    Args:
        data: Any data structure (dict, list, tuple, primitive)

    Returns:
        Normalized data structure with only JSON-safe types

    Raises:
        ValueError: If data contains NaN or Infinity
        TypeError: If data contains a non-string key or a non-JSON value
    """
    if isinstance(data, dict):
        for key in data:
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}: {key!r}")
        return {k: _normalize_for_canonical(v) for k, v in data.items()}
    if isinstance(data, list | tuple):
        return [_normalize_for_canonical(v) for v in data]
    return _normalize_value(data)


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON text.

    Args:
        obj: Data structure to serialize

    Returns:
        Canonical JSON string (no whitespace, sorted keys, UTF-8 text
        rather than escape sequences for non-ASCII characters)

    Raises:
        ValueError: If data contains NaN, Infinity, or other non-finite values
        TypeError: If data contains types that cannot be serialized
    """
    normalized = _normalize_for_canonical(obj)
    result: bytes = rfc8785.dumps(normalized)
    return result.decode("utf-8")
