# src/propcheck/arbitrary/numeric.py
"""Numeric and boolean primitives.

Integers and floats shrink toward their *target*: zero when zero is in
range, otherwise the range bound closest to zero.
"""

from __future__ import annotations

import math

from propcheck.arbitrary.base import Arbitrary
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator, uniform_double, uniform_int
from propcheck.shrinking.rules import float_shrinkable, integer_shrinkable
from propcheck.shrinking.shrinkable import Shrinkable

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Largest integers a double represents exactly: +/- (2**53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


class IntegerArbitrary(Arbitrary[int]):
    """Integers drawn uniformly from a closed range."""

    def __init__(self, min_value: int, max_value: int) -> None:
        if min_value > max_value:
            raise ConfigurationError(f"integer min_value ({min_value}) must be <= max_value ({max_value})")
        self._min = min_value
        self._max = max_value
        self._target = min(max(0, min_value), max_value)

    @property
    def target(self) -> int:
        """Value shrinking converges on."""
        return self._target

    def generate(self, rng: RandomGenerator) -> Shrinkable[int]:
        return integer_shrinkable(uniform_int(rng, self._min, self._max), self._target)


class DoubleArbitrary(Arbitrary[float]):
    """Finite floats drawn uniformly from [min_value, max_value).

    Equal bounds produce that single value.
    """

    def __init__(self, min_value: float, max_value: float) -> None:
        if not (math.isfinite(min_value) and math.isfinite(max_value)):
            raise ConfigurationError(f"double bounds must be finite, got [{min_value}, {max_value}]")
        if min_value > max_value:
            raise ConfigurationError(f"double min_value ({min_value}) must be <= max_value ({max_value})")
        self._min = float(min_value)
        self._max = float(max_value)
        self._target = min(max(0.0, self._min), self._max)

    @property
    def target(self) -> float:
        return self._target

    def generate(self, rng: RandomGenerator) -> Shrinkable[float]:
        fraction = uniform_double(rng)
        # max - min can overflow for wide ranges
        value = self._min * (1.0 - fraction) + self._max * fraction
        value = min(max(value, self._min), self._max)
        if value == self._max and self._min < self._max:
            # Rounding can land on max; keep the range half-open
            value = math.nextafter(self._max, self._min)
        return float_shrinkable(value, self._target)


def integer(min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> Arbitrary[int]:
    """Integers in [min_value, max_value] (32-bit signed range by default).

    Raises:
        ConfigurationError: If min_value > max_value.
    """
    return IntegerArbitrary(min_value, max_value)


def nat(max_value: int = INT32_MAX) -> Arbitrary[int]:
    """Non-negative integers up to max_value."""
    return IntegerArbitrary(0, max_value)


def double(min_value: float = 0.0, max_value: float = 1.0) -> Arbitrary[float]:
    """Finite floats in [min_value, max_value) ([0, 1) by default)."""
    return DoubleArbitrary(min_value, max_value)


def boolean() -> Arbitrary[bool]:
    """True or False. True shrinks to False; False is minimal."""
    return IntegerArbitrary(0, 1).map(bool)
