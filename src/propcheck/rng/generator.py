# src/propcheck/rng/generator.py
"""Random generator abstraction for reproducible generation.

This module provides a RandomGenerator protocol that abstracts the source
of randomness, so every arbitrary is a pure function of the generator
state it is handed.

Production code uses MutableRandomGenerator.
Tests inject stub generators (counters, constants) to make draws
predictable. Those are ordinary implementations of the same protocol.

There is deliberately no module-level default instance: every draw site
receives its generator explicitly.
"""

from __future__ import annotations

from typing import Protocol

from propcheck.core.errors import ConfigurationError

MASK_32 = 0xFFFF_FFFF
MASK_64 = 0xFFFF_FFFF_FFFF_FFFF

# SplitMix64 increment (2**64 / golden ratio)
_GOLDEN_GAMMA = 0x9E37_79B9_7F4A_7C15

# 2**53: number of distinct doubles uniform_double can produce
_DOUBLE_DIVISOR = float(1 << 53)


class RandomGenerator(Protocol):
    """Seeded source of 32-bit integers with explicit, forkable state.

    Implementations:
    - MutableRandomGenerator: counter-based SplitMix64 (production)
    - Stub generators in the test suite (deterministic sequences)
    """

    def next(self) -> int:
        """Advance the cursor and return an integer in [0, 2**32).

        The result must be a deterministic function of the generator's
        seed and cursor: two generators built from the same seed and
        advanced the same number of times return the same values.
        """
        ...

    def clone(self) -> RandomGenerator:
        """Return an independent copy of the generator.

        Draws on the copy never change the original, and draws on the
        original never change the copy.
        """
        ...


def _mix64(z: int) -> int:
    """SplitMix64 finaliser: a bijective avalanche over 64-bit words."""
    z = ((z ^ (z >> 30)) * 0xBF58_476D_1CE4_E5B9) & MASK_64
    z = ((z ^ (z >> 27)) * 0x94D0_49BB_1331_11EB) & MASK_64
    return z ^ (z >> 31)


class MutableRandomGenerator:
    """Counter-based generator: draw N is mix(seed, N).

    The whole state is (seed, cursor). Cloning copies two integers, and
    a clone positioned at the same cursor replays exactly the same draws.

    Example:
        rng = MutableRandomGenerator(42)
        first = rng.next()
        fork = rng.clone()
        assert fork.next() == rng.next()
    """

    __slots__ = ("_cursor", "_seed", "_seed_mix")

    def __init__(self, seed: int, cursor: int = 0) -> None:
        """Initialize a generator.

        Args:
            seed: Any Python integer (negative and oversized seeds are
                folded into 64 bits).
            cursor: Number of draws already consumed (default 0).

        Raises:
            ValueError: If cursor is negative.
        """
        if cursor < 0:
            raise ValueError(f"cursor must be non-negative, got {cursor}")
        self._seed = seed
        self._seed_mix = _mix64(seed & MASK_64)
        self._cursor = cursor

    @property
    def seed(self) -> int:
        """Seed this generator was built from."""
        return self._seed

    @property
    def cursor(self) -> int:
        """Number of draws consumed so far."""
        return self._cursor

    def next(self) -> int:
        """Advance the cursor and return a 32-bit draw."""
        self._cursor += 1
        word = _mix64((self._seed_mix + self._cursor * _GOLDEN_GAMMA) & MASK_64)
        return word >> 32

    def clone(self) -> MutableRandomGenerator:
        """Return an isolated copy at the same position."""
        return MutableRandomGenerator(self._seed, self._cursor)

    def __repr__(self) -> str:
        return f"MutableRandomGenerator(seed={self._seed}, cursor={self._cursor})"


def uniform_int(rng: RandomGenerator, min_value: int, max_value: int) -> int:
    """Draw an integer uniformly from the closed range [min_value, max_value].

    Consumes ceil(bits / 32) draws where bits is the bit length of the
    range width, so the number of draws depends only on the range and
    never on the values drawn.

    Raises:
        ConfigurationError: If min_value > max_value.
    """
    if min_value > max_value:
        raise ConfigurationError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    span = max_value - min_value + 1
    words = max(1, -(-span.bit_length() // 32))
    acc = 0
    for _ in range(words):
        acc = (acc << 32) | (rng.next() & MASK_32)
    return min_value + acc % span


def uniform_double(rng: RandomGenerator) -> float:
    """Draw a float uniformly from [0, 1) using 53 random bits (two draws)."""
    high = (rng.next() & MASK_32) >> 5
    low = (rng.next() & MASK_32) >> 6
    return (high * 67108864 + low) / _DOUBLE_DIVISOR
