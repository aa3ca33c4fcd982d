# src/propcheck/arbitrary/structure.py
"""Recursively nested structures and their JSON text encodings.

Generation algorithm (remaining depth ``d``):

- One uniform draw picks among the leaf arbitraries and, when ``d > 0``,
  a list container and a dict container.
- A list container holds values generated with depth ``d - 1``.
- A dict container draws its keys from the key arbitrary and its values
  with depth ``d - 1``.
- At ``d == 0`` only leaves can be produced.

``anything`` starts at ``d = max_depth`` so its nesting is at most
``max_depth``. ``object_`` always emits a dict at the top whose values
start at ``d = max_depth``, so its nesting is at most ``max_depth + 1``.

Closure: keys only ever come from the key arbitrary and leaves only from
the value arbitraries. Shrinking preserves this, since containers shrink by
removing entries or by walking the shrink trees of those same arbitraries.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from propcheck.arbitrary.array import DEFAULT_MAX_LENGTH, KeyedArbitrary, SequenceArbitrary
from propcheck.arbitrary.base import Arbitrary, MappedArbitrary
from propcheck.arbitrary.constant import constant, constant_from
from propcheck.arbitrary.numeric import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, boolean, double, integer
from propcheck.arbitrary.oneof import oneof
from propcheck.arbitrary.text import string, unicode_string
from propcheck.core.canonical import canonical_json
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator, uniform_int
from propcheck.shrinking.shrinkable import Shrinkable

DEFAULT_MAX_DEPTH = 2

# Smallest positive (subnormal) double
MIN_POSITIVE_DOUBLE = math.ulp(0.0)


def default_values() -> tuple[Arbitrary[Any], ...]:
    """Standard mixed-primitive leaf set.

    Booleans, integers, floats, text, text-or-None, and a handful of
    floating-point sentinels (NaN, the largest finite double, the smallest
    positive double, +/- the largest exactly-representable integer). The
    sentinels are constants, so they never shrink.
    """
    return (
        boolean(),
        integer(),
        double(),
        string(),
        oneof(string(), constant(None)),
        constant_from(math.nan, 1.7976931348623157e308, MIN_POSITIVE_DOUBLE, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER),
    )


@dataclass(frozen=True, slots=True)
class ObjectConstraints:
    """Configuration for structured generation.

    Attributes:
        key: Arbitrary producing dict keys
        values: Non-empty leaf arbitraries
        max_depth: Maximum container nesting below the starting level
        max_length: Maximum entries per list or dict container
    """

    key: Arbitrary[str]
    values: tuple[Arbitrary[Any], ...]
    max_depth: int = DEFAULT_MAX_DEPTH
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        if not self.values:
            raise ConfigurationError("structured generation requires at least one value arbitrary")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_length < 0:
            raise ConfigurationError(f"max_length must be >= 0, got {self.max_length}")

    @classmethod
    def build(
        cls,
        *,
        key: Arbitrary[str] | None = None,
        values: Sequence[Arbitrary[Any]] | None = None,
        max_depth: int | None = None,
        max_length: int | None = None,
    ) -> ObjectConstraints:
        """Fill omitted options with defaults.

        ``key`` defaults to ``string()``, ``values`` to ``default_values()``
        and ``max_depth`` to DEFAULT_MAX_DEPTH. An explicitly empty
        ``values`` is an error, not a request for the defaults.

        Raises:
            ConfigurationError: If values is empty or a bound is negative.
        """
        return cls(
            key=key if key is not None else string(),
            values=tuple(values) if values is not None else default_values(),
            max_depth=max_depth if max_depth is not None else DEFAULT_MAX_DEPTH,
            max_length=max_length if max_length is not None else DEFAULT_MAX_LENGTH,
        )


class _DepthView(Arbitrary[Any]):
    """A RecursiveStructureArbitrary seen from a fixed remaining depth."""

    def __init__(self, structure: RecursiveStructureArbitrary, depth: int) -> None:
        self._structure = structure
        self._depth = depth

    def generate(self, rng: RandomGenerator) -> Shrinkable[Any]:
        return self._structure.generate_at(rng, self._depth)


class RecursiveStructureArbitrary(Arbitrary[Any]):
    """Nested lists/dicts of leaf values, bounded by a maximum depth."""

    def __init__(
        self,
        constraints: ObjectConstraints,
        *,
        top_level: Literal["anything", "object"] = "anything",
    ) -> None:
        self._constraints = constraints
        self._top_level = top_level
        levels = [_DepthView(self, depth) for depth in range(constraints.max_depth + 1)]
        self._lists = [SequenceArbitrary(level, constraints.max_length) for level in levels]
        self._dicts = [KeyedArbitrary(constraints.key, level, constraints.max_length) for level in levels]

    @property
    def constraints(self) -> ObjectConstraints:
        return self._constraints

    def generate(self, rng: RandomGenerator) -> Shrinkable[Any]:
        if self._top_level == "object":
            return self._dicts[self._constraints.max_depth].generate(rng)
        return self.generate_at(rng, self._constraints.max_depth)

    def generate_at(self, rng: RandomGenerator, depth: int) -> Shrinkable[Any]:
        """Generate one value with ``depth`` levels of container nesting left."""
        leaves = self._constraints.values
        choices = len(leaves) + (2 if depth > 0 else 0)
        index = uniform_int(rng, 0, choices - 1)
        if index < len(leaves):
            return leaves[index].generate(rng)
        if index == len(leaves):
            return self._lists[depth - 1].generate(rng)
        return self._dicts[depth - 1].generate(rng)


class TextEncodedArbitrary(MappedArbitrary[Any, str]):
    """Serialises every value of a structure's shrink tree to text.

    Shrinking works on the underlying structure; each candidate is
    re-serialised, so every produced text decodes to a structure of the
    same shape family.
    """

    def __init__(self, source: Arbitrary[Any], encoder: Callable[[Any], str] = canonical_json) -> None:
        super().__init__(source, encoder)


def anything(
    *,
    key: Arbitrary[str] | None = None,
    values: Sequence[Arbitrary[Any]] | None = None,
    max_depth: int | None = None,
    max_length: int | None = None,
) -> Arbitrary[Any]:
    """Leaves, lists or dicts nested at most ``max_depth`` levels deep.

    Raises:
        ConfigurationError: If values is empty or a bound is negative.
    """
    constraints = ObjectConstraints.build(key=key, values=values, max_depth=max_depth, max_length=max_length)
    return RecursiveStructureArbitrary(constraints)


def object_(
    *,
    key: Arbitrary[str] | None = None,
    values: Sequence[Arbitrary[Any]] | None = None,
    max_depth: int | None = None,
    max_length: int | None = None,
) -> Arbitrary[dict[str, Any]]:
    """Dicts whose values nest at most ``max_depth`` further levels.

    Raises:
        ConfigurationError: If values is empty or a bound is negative.
    """
    constraints = ObjectConstraints.build(key=key, values=values, max_depth=max_depth, max_length=max_length)
    return RecursiveStructureArbitrary(constraints, top_level="object")


def _json_structure(text: Arbitrary[str], max_depth: int | None) -> Arbitrary[Any]:
    values = (boolean(), integer(), double(), text, constant(None))
    return anything(key=text, values=values, max_depth=max_depth)


def json_(max_depth: int | None = None) -> Arbitrary[str]:
    """Canonical JSON text of structures with printable-ASCII strings."""
    return TextEncodedArbitrary(_json_structure(string(), max_depth))


def unicode_json(max_depth: int | None = None) -> Arbitrary[str]:
    """Canonical JSON text whose strings and keys span the full Unicode range."""
    return TextEncodedArbitrary(_json_structure(unicode_string(), max_depth))
