# src/propcheck/shrinking/__init__.py
"""Shrink trees: lazy streams, shrinkable values and primitive shrink rules."""

from propcheck.shrinking.rules import (
    float_shrinkable,
    integer_shrinkable,
    keyed_shrinkable,
    option_shrinkable,
    sequence_shrinkable,
    shrink_float,
    shrink_integer,
    shrink_items,
    shrink_option,
    shrink_tuple,
    tuple_shrinkable,
)
from propcheck.shrinking.shrinkable import Shrinkable
from propcheck.shrinking.stream import Stream

__all__ = [
    "Shrinkable",
    "Stream",
    "float_shrinkable",
    "integer_shrinkable",
    "keyed_shrinkable",
    "option_shrinkable",
    "sequence_shrinkable",
    "shrink_float",
    "shrink_integer",
    "shrink_items",
    "shrink_option",
    "shrink_tuple",
    "tuple_shrinkable",
]
