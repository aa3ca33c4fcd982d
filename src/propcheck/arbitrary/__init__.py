# src/propcheck/arbitrary/__init__.py
"""Arbitraries: value generators and the combinators that compose them.

Factories (lower-case functions) are the public surface. The variant
classes are exported for type annotations and for tests that inspect
configuration.
"""

from propcheck.arbitrary.array import DEFAULT_MAX_LENGTH, KeyedArbitrary, SequenceArbitrary, array, dictionary
from propcheck.arbitrary.base import Arbitrary, MappedArbitrary
from propcheck.arbitrary.constant import ConstantArbitrary, constant, constant_from
from propcheck.arbitrary.fixed_tuple import FixedTupleArbitrary, tuple_
from propcheck.arbitrary.numeric import (
    INT32_MAX,
    INT32_MIN,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    DoubleArbitrary,
    IntegerArbitrary,
    boolean,
    double,
    integer,
    nat,
)
from propcheck.arbitrary.oneof import (
    AlternationArbitrary,
    OptionArbitrary,
    WeightedAlternationArbitrary,
    frequency,
    oneof,
    option,
)
from propcheck.arbitrary.structure import (
    DEFAULT_MAX_DEPTH,
    ObjectConstraints,
    RecursiveStructureArbitrary,
    TextEncodedArbitrary,
    anything,
    default_values,
    json_,
    object_,
    unicode_json,
)
from propcheck.arbitrary.text import (
    ascii_char,
    ascii_string,
    char,
    string,
    string_of,
    unicode_char,
    unicode_string,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_LENGTH",
    "INT32_MAX",
    "INT32_MIN",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "AlternationArbitrary",
    "Arbitrary",
    "ConstantArbitrary",
    "DoubleArbitrary",
    "FixedTupleArbitrary",
    "IntegerArbitrary",
    "KeyedArbitrary",
    "MappedArbitrary",
    "ObjectConstraints",
    "OptionArbitrary",
    "RecursiveStructureArbitrary",
    "SequenceArbitrary",
    "TextEncodedArbitrary",
    "WeightedAlternationArbitrary",
    "anything",
    "array",
    "ascii_char",
    "ascii_string",
    "boolean",
    "char",
    "constant",
    "constant_from",
    "default_values",
    "dictionary",
    "double",
    "frequency",
    "integer",
    "json_",
    "nat",
    "object_",
    "oneof",
    "option",
    "string",
    "string_of",
    "tuple_",
    "unicode_char",
    "unicode_json",
    "unicode_string",
]
