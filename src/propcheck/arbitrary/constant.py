# src/propcheck/arbitrary/constant.py
"""Constant arbitraries: fixed values that never shrink."""

from __future__ import annotations

from propcheck.arbitrary.base import Arbitrary
from propcheck.arbitrary.oneof import AlternationArbitrary
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator
from propcheck.shrinking.shrinkable import Shrinkable


class ConstantArbitrary[T](Arbitrary[T]):
    """Always produces the same value. Draws nothing from the generator."""

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def generate(self, rng: RandomGenerator) -> Shrinkable[T]:
        return Shrinkable(self._value)


def constant[T](value: T) -> Arbitrary[T]:
    """Always ``value``, with no shrink children."""
    return ConstantArbitrary(value)


def constant_from[T](*values: T) -> Arbitrary[T]:
    """One of ``values``, chosen uniformly; the chosen value does not shrink.

    Raises:
        ConfigurationError: If no value is given.
    """
    if not values:
        raise ConfigurationError("constant_from requires at least one value")
    return AlternationArbitrary(*(ConstantArbitrary(value) for value in values))
