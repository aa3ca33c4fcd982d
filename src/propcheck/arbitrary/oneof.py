# src/propcheck/arbitrary/oneof.py
"""Alternation combinators: uniform, weighted and optional selection.

Every combinator here makes exactly one selection draw, then delegates the
rest of the generation to the selected arbitrary. The selected value keeps
the shrink tree of the arbitrary that produced it; shrinking never jumps
to another alternative.
"""

from __future__ import annotations

from typing import Any

from propcheck.arbitrary.base import Arbitrary
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator, uniform_int
from propcheck.shrinking.rules import option_shrinkable
from propcheck.shrinking.shrinkable import Shrinkable


class AlternationArbitrary[T](Arbitrary[T]):
    """Uniform choice among a non-empty, ordered list of arbitraries."""

    def __init__(self, *arbitraries: Arbitrary[T]) -> None:
        if not arbitraries:
            raise ConfigurationError("oneof requires at least one arbitrary")
        self._arbitraries = arbitraries

    @property
    def alternatives(self) -> tuple[Arbitrary[T], ...]:
        """The arbitraries selected from, in order."""
        return self._arbitraries

    def generate(self, rng: RandomGenerator) -> Shrinkable[T]:
        index = uniform_int(rng, 0, len(self._arbitraries) - 1)
        return self._arbitraries[index].generate(rng)


class WeightedAlternationArbitrary[T](Arbitrary[T]):
    """Weighted choice: each arbitrary is picked proportionally to its weight."""

    def __init__(self, *weighted: tuple[int, Arbitrary[T]]) -> None:
        if not weighted:
            raise ConfigurationError("frequency requires at least one (weight, arbitrary) pair")
        for weight, _ in weighted:
            if not isinstance(weight, int) or isinstance(weight, bool) or weight <= 0:
                raise ConfigurationError(f"frequency weights must be positive integers, got {weight!r}")
        self._weighted = weighted
        self._total_weight = sum(weight for weight, _ in weighted)

    def generate(self, rng: RandomGenerator) -> Shrinkable[T]:
        roll = uniform_int(rng, 0, self._total_weight - 1)
        threshold = 0
        for weight, arbitrary in self._weighted:
            threshold += weight
            if roll < threshold:
                return arbitrary.generate(rng)
        raise AssertionError(f"roll {roll} exceeded total weight {self._total_weight}")


class OptionArbitrary[T](Arbitrary[T | None]):
    """A value of the wrapped arbitrary, or None one time in ``freq + 1``.

    A present value shrinks to None first, then through the wrapped
    arbitrary's own shrinks.
    """

    def __init__(self, arbitrary: Arbitrary[T], freq: int = 5) -> None:
        if freq < 1:
            raise ConfigurationError(f"option freq must be >= 1, got {freq}")
        self._arbitrary = arbitrary
        self._freq = freq

    def generate(self, rng: RandomGenerator) -> Shrinkable[T | None]:
        if uniform_int(rng, 0, self._freq) == 0:
            return Shrinkable(None)
        return option_shrinkable(self._arbitrary.generate(rng))


def oneof[T](*arbitraries: Arbitrary[T]) -> Arbitrary[T]:
    """Pick one of ``arbitraries`` uniformly, then generate from it.

    Raises:
        ConfigurationError: If no arbitrary is given.
    """
    return AlternationArbitrary(*arbitraries)


def frequency(*weighted: tuple[int, Arbitrary[Any]]) -> Arbitrary[Any]:
    """Pick one arbitrary with probability proportional to its weight.

    Example:
        frequency((3, integer()), (1, constant(None)))

    Raises:
        ConfigurationError: If no pair is given or a weight is not a positive integer.
    """
    return WeightedAlternationArbitrary(*weighted)


def option[T](arbitrary: Arbitrary[T], freq: int = 5) -> Arbitrary[T | None]:
    """Values of ``arbitrary`` mixed with None (probability 1 / (freq + 1))."""
    return OptionArbitrary(arbitrary, freq)
