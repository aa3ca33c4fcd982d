# tests/unit/rng/test_generator.py
"""Unit tests for the random generator and derived draws."""

from __future__ import annotations

import pytest

from propcheck.core.errors import ConfigurationError
from propcheck.rng import MutableRandomGenerator, RandomGenerator, uniform_double, uniform_int
from propcheck.rng.generator import MASK_32
from tests.stubs.generators import ConstantGenerator, FastIncreaseGenerator, ScriptedGenerator

# =============================================================================
# MutableRandomGenerator
# =============================================================================


class TestMutableRandomGenerator:
    """Tests for the counter-based production generator."""

    def test_satisfies_protocol(self) -> None:
        """Production generator is a RandomGenerator."""
        generator: RandomGenerator = MutableRandomGenerator(1)
        assert isinstance(generator.next(), int)

    def test_draws_are_32_bit(self) -> None:
        """Every draw fits in [0, 2**32)."""
        generator = MutableRandomGenerator(123)
        for _ in range(1000):
            assert 0 <= generator.next() <= MASK_32

    def test_same_seed_same_sequence(self) -> None:
        """Two generators with the same seed agree draw for draw."""
        a = MutableRandomGenerator(42)
        b = MutableRandomGenerator(42)
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seeds_differ(self) -> None:
        """Different seeds produce different sequences."""
        a = MutableRandomGenerator(1)
        b = MutableRandomGenerator(2)
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_cursor_advances_per_draw(self) -> None:
        """The cursor counts draws."""
        generator = MutableRandomGenerator(7)
        assert generator.cursor == 0
        generator.next()
        generator.next()
        assert generator.cursor == 2

    def test_seed_is_exposed(self) -> None:
        """The seed is readable for reporting."""
        assert MutableRandomGenerator(99).seed == 99

    def test_starting_cursor_skips_draws(self) -> None:
        """A generator built at cursor N continues where another left off."""
        a = MutableRandomGenerator(5)
        for _ in range(3):
            a.next()
        b = MutableRandomGenerator(5, cursor=3)
        assert a.next() == b.next()

    def test_negative_cursor_rejected(self) -> None:
        """Negative cursors are invalid."""
        with pytest.raises(ValueError, match="cursor"):
            MutableRandomGenerator(1, cursor=-1)

    def test_negative_and_large_seeds_accepted(self) -> None:
        """Any Python int is a valid seed."""
        for seed in (-1, 0, 2**64 + 5, -(2**70)):
            generator = MutableRandomGenerator(seed)
            assert 0 <= generator.next() <= MASK_32

    def test_repr_shows_state(self) -> None:
        """repr includes seed and cursor."""
        generator = MutableRandomGenerator(3)
        generator.next()
        assert repr(generator) == "MutableRandomGenerator(seed=3, cursor=1)"


# =============================================================================
# clone
# =============================================================================


class TestClone:
    """Tests for generator forking."""

    def test_clone_replays_same_draws(self) -> None:
        """A clone produces the same draws as the original from that point."""
        original = MutableRandomGenerator(11)
        original.next()
        fork = original.clone()
        assert [fork.next() for _ in range(20)] == [original.next() for _ in range(20)]

    def test_clone_is_isolated(self) -> None:
        """Draws on the clone do not advance the original."""
        original = MutableRandomGenerator(11)
        fork = original.clone()
        for _ in range(5):
            fork.next()
        assert original.cursor == 0
        assert fork.cursor == 5

    def test_original_draws_do_not_affect_clone(self) -> None:
        """Draws on the original do not advance the clone."""
        original = MutableRandomGenerator(11)
        fork = original.clone()
        original.next()
        assert fork.cursor == 0


# =============================================================================
# uniform_int
# =============================================================================


class TestUniformInt:
    """Tests for integer draws over a closed range."""

    def test_single_value_range(self) -> None:
        """A one-value range always returns that value."""
        assert uniform_int(MutableRandomGenerator(1), 5, 5) == 5

    def test_values_stay_in_range(self) -> None:
        """All draws land inside the closed range."""
        generator = MutableRandomGenerator(3)
        values = {uniform_int(generator, -3, 3) for _ in range(500)}
        assert values <= set(range(-3, 4))

    def test_covers_small_range(self) -> None:
        """A small range is fully covered by enough draws."""
        generator = MutableRandomGenerator(3)
        values = {uniform_int(generator, 0, 4) for _ in range(500)}
        assert values == {0, 1, 2, 3, 4}

    def test_zero_draw_gives_minimum(self) -> None:
        """A zero draw maps onto the range minimum."""
        assert uniform_int(ConstantGenerator(0), 10, 20) == 10

    def test_counter_draws_walk_the_range(self) -> None:
        """Consecutive raw draws map onto consecutive values (mod width)."""
        generator = FastIncreaseGenerator()
        assert [uniform_int(generator, 0, 2) for _ in range(5)] == [0, 1, 2, 0, 1]

    def test_small_range_uses_one_draw(self) -> None:
        """Ranges narrower than 32 bits consume exactly one draw."""
        generator = ConstantGenerator(5)
        uniform_int(generator, 0, 1000)
        assert generator.draws == 1

    def test_wide_range_uses_more_draws(self) -> None:
        """A 64-bit range consumes three 32-bit draws (65-bit width)."""
        generator = ConstantGenerator(5)
        uniform_int(generator, 0, 2**64)
        assert generator.draws == 3

    def test_draw_count_independent_of_values(self) -> None:
        """Draw count depends on the range, never on the drawn values."""
        low = ConstantGenerator(0)
        high = ConstantGenerator(MASK_32)
        uniform_int(low, -(2**40), 2**40)
        uniform_int(high, -(2**40), 2**40)
        assert low.draws == high.draws

    def test_inverted_range_rejected(self) -> None:
        """min > max is a configuration error."""
        with pytest.raises(ConfigurationError):
            uniform_int(ConstantGenerator(0), 3, 2)

    def test_scripted_draws_are_combined_high_first(self) -> None:
        """Multi-word draws put the first word in the high bits."""
        generator = ScriptedGenerator([1, 2])
        assert uniform_int(generator, 0, 2**40) == (1 << 32) | 2
        assert generator.remaining == 0


# =============================================================================
# uniform_double
# =============================================================================


class TestUniformDouble:
    """Tests for unit-interval float draws."""

    def test_zero_draws_give_zero(self) -> None:
        """All-zero draws produce exactly 0.0."""
        assert uniform_double(ConstantGenerator(0)) == 0.0

    def test_max_draws_stay_below_one(self) -> None:
        """All-ones draws produce the largest double below 1.0."""
        value = uniform_double(ConstantGenerator(MASK_32))
        assert value < 1.0
        assert value == (2**53 - 1) / 2**53

    def test_uses_two_draws(self) -> None:
        """Each float consumes two 32-bit draws."""
        generator = ConstantGenerator(7)
        uniform_double(generator)
        assert generator.draws == 2

    def test_values_in_unit_interval(self) -> None:
        """Production draws stay in [0, 1)."""
        generator = MutableRandomGenerator(8)
        for _ in range(500):
            assert 0.0 <= uniform_double(generator) < 1.0
