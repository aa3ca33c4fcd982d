# src/propcheck/arbitrary/fixed_tuple.py
"""Fixed-arity heterogeneous tuples."""

from __future__ import annotations

from typing import Any

from propcheck.arbitrary.base import Arbitrary
from propcheck.rng.generator import RandomGenerator
from propcheck.shrinking.rules import tuple_shrinkable
from propcheck.shrinking.shrinkable import Shrinkable


class FixedTupleArbitrary(Arbitrary[tuple[Any, ...]]):
    """Draws each component in order from the same generator.

    The generated tuple is therefore a deterministic function of the
    generator's state on entry. Shrinking changes one component at a
    time, trying components left to right.
    """

    def __init__(self, *components: Arbitrary[Any]) -> None:
        self._components = components

    def generate(self, rng: RandomGenerator) -> Shrinkable[tuple[Any, ...]]:
        return tuple_shrinkable(tuple(component.generate(rng) for component in self._components))


def tuple_(*components: Arbitrary[Any]) -> Arbitrary[tuple[Any, ...]]:
    """Tuples whose i-th element comes from the i-th arbitrary."""
    return FixedTupleArbitrary(*components)
