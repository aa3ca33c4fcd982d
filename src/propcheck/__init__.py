"""
propcheck: Property-based value generation and counterexample shrinking.

Describe a value domain with arbitraries, state a property over it, and
let the runner search for a falsifying input. Every failure is reported
with the smallest counterexample found plus the seed and replay path
needed to reproduce it.
"""

__version__ = "0.1.0"

from propcheck.arbitrary import (
    Arbitrary,
    ObjectConstraints,
    anything,
    array,
    ascii_char,
    ascii_string,
    boolean,
    char,
    constant,
    constant_from,
    dictionary,
    double,
    frequency,
    integer,
    json_,
    nat,
    object_,
    oneof,
    option,
    string,
    tuple_,
    unicode_char,
    unicode_json,
    unicode_string,
)
from propcheck.core import ConfigurationError, PropertyFailedError, RunnerSettings, load_settings
from propcheck.property import Property, for_all
from propcheck.rng import MutableRandomGenerator, RandomGenerator
from propcheck.runner import RunDetails, assert_property, check, sample, statistics
from propcheck.shrinking import Shrinkable, Stream

__all__ = [
    "Arbitrary",
    "ConfigurationError",
    "MutableRandomGenerator",
    "ObjectConstraints",
    "Property",
    "PropertyFailedError",
    "RandomGenerator",
    "RunDetails",
    "RunnerSettings",
    "Shrinkable",
    "Stream",
    "__version__",
    "anything",
    "array",
    "ascii_char",
    "ascii_string",
    "assert_property",
    "boolean",
    "char",
    "check",
    "constant",
    "constant_from",
    "dictionary",
    "double",
    "for_all",
    "frequency",
    "integer",
    "json_",
    "load_settings",
    "nat",
    "object_",
    "oneof",
    "option",
    "sample",
    "statistics",
    "string",
    "tuple_",
    "unicode_char",
    "unicode_json",
    "unicode_string",
]
