# src/propcheck/arbitrary/array.py
"""Variable-length containers: sequences and keyed dictionaries."""

from __future__ import annotations

from typing import Any

from propcheck.arbitrary.base import Arbitrary
from propcheck.arbitrary.fixed_tuple import FixedTupleArbitrary
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator, uniform_int
from propcheck.shrinking.rules import keyed_shrinkable, sequence_shrinkable
from propcheck.shrinking.shrinkable import Shrinkable

DEFAULT_MAX_LENGTH = 10


def _check_max_length(name: str, max_length: int) -> None:
    if max_length < 0:
        raise ConfigurationError(f"{name} must be >= 0, got {max_length}")


class SequenceArbitrary[T](Arbitrary[list[T]]):
    """Lists of 0..max_length elements drawn from one element arbitrary.

    Draws the length first, then each element in order.
    """

    def __init__(self, element: Arbitrary[T], max_length: int = DEFAULT_MAX_LENGTH) -> None:
        _check_max_length("max_length", max_length)
        self._element = element
        self._max_length = max_length

    def generate(self, rng: RandomGenerator) -> Shrinkable[list[T]]:
        length = uniform_int(rng, 0, self._max_length)
        items = tuple(self._element.generate(rng) for _ in range(length))
        return sequence_shrinkable(items)


class KeyedArbitrary[K, V](Arbitrary[dict[K, V]]):
    """Dicts with up to max_keys entries.

    Each entry is drawn as a (key, value) pair. A pair whose key was
    already drawn is discarded, so the result can hold fewer than the
    drawn number of entries but never silently overwrites one.
    """

    def __init__(self, key: Arbitrary[K], value: Arbitrary[V], max_keys: int = DEFAULT_MAX_LENGTH) -> None:
        _check_max_length("max_keys", max_keys)
        self._pair = FixedTupleArbitrary(key, value)
        self._max_keys = max_keys

    def generate(self, rng: RandomGenerator) -> Shrinkable[dict[K, V]]:
        count = uniform_int(rng, 0, self._max_keys)
        pairs: list[Shrinkable[Any]] = []
        seen: set[Any] = set()
        for _ in range(count):
            pair = self._pair.generate(rng)
            key = pair.value[0]
            if key in seen:
                continue
            seen.add(key)
            pairs.append(pair)
        return keyed_shrinkable(tuple(pairs))


def array[T](element: Arbitrary[T], max_length: int = DEFAULT_MAX_LENGTH) -> Arbitrary[list[T]]:
    """Lists of elements from ``element``, at most ``max_length`` long.

    Shrinks toward the empty list by removing elements, then by shrinking
    the retained ones.
    """
    return SequenceArbitrary(element, max_length)


def dictionary[K, V](
    key: Arbitrary[K],
    value: Arbitrary[V],
    max_keys: int = DEFAULT_MAX_LENGTH,
) -> Arbitrary[dict[K, V]]:
    """Dicts with keys from ``key`` and values from ``value``.

    Shrinks toward the empty dict by removing entries, then by shrinking
    the retained keys and values.
    """
    return KeyedArbitrary(key, value, max_keys)
