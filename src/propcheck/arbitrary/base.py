# src/propcheck/arbitrary/base.py
"""Arbitrary: the generation capability every generator implements.

An Arbitrary is configuration, not state. ``generate`` is a pure function
of the RandomGenerator it receives: the same generator state always yields
the same Shrinkable. Combinators *own* their child arbitraries and delegate
to them; there is no deep inheritance between variants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from propcheck.rng.generator import RandomGenerator
from propcheck.shrinking.shrinkable import Shrinkable


class Arbitrary[T](ABC):
    """Describes how to draw a random, shrinkable value of type T."""

    @abstractmethod
    def generate(self, rng: RandomGenerator) -> Shrinkable[T]:
        """Draw one value (and its shrink tree) from ``rng``.

        Args:
            rng: Generator to draw from. It is advanced in place.

        Returns:
            Shrinkable holding the drawn value.
        """
        ...

    def map[U](self, mapper: Callable[[T], U]) -> Arbitrary[U]:
        """Transform generated values, keeping the shrink tree's shape."""
        return MappedArbitrary(self, mapper)


class MappedArbitrary[T, U](Arbitrary[U]):
    """Applies a function to every value of another arbitrary's tree."""

    def __init__(self, source: Arbitrary[T], mapper: Callable[[T], U]) -> None:
        self._source = source
        self._mapper = mapper

    def generate(self, rng: RandomGenerator) -> Shrinkable[U]:
        return self._source.generate(rng).map(self._mapper)
