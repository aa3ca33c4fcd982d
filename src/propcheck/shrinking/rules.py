# src/propcheck/shrinking/rules.py
"""Primitive shrink rules.

Each rule enumerates, lazily, the strictly smaller candidates of a value.
Candidates are ordered most-aggressive first: the first candidate of a
non-minimal value is always the canonical minimum of its domain (the
target integer, the empty sequence, None, ...). Following the first child
repeatedly therefore reaches the minimum in one step per level of
wrapping.

Numeric strategy: bisection toward the target. Candidates are the target,
then value - gap/2, value - gap/4, ... ending one unit (or one halving)
away from the value. Every candidate lies strictly between the value and
the target, or on the target.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from propcheck.shrinking.shrinkable import Shrinkable
from propcheck.shrinking.stream import Stream

# Halvings tried for a float before giving up on finer candidates
MAX_FLOAT_HALVINGS = 24


def _half_toward_zero(gap: int) -> int:
    return gap // 2 if gap >= 0 else -((-gap) // 2)


def _integer_candidates(value: int, target: int) -> Iterator[int]:
    gap = value - target
    while gap != 0:
        yield value - gap
        gap = _half_toward_zero(gap)


def shrink_integer(value: int, target: int) -> Stream[Shrinkable[int]]:
    """Candidates for ``value`` approaching ``target`` by bisection."""
    return Stream(lambda: _integer_candidates(value, target)).map(lambda v: integer_shrinkable(v, target))


def integer_shrinkable(value: int, target: int) -> Shrinkable[int]:
    """Shrinkable integer whose tree converges on ``target``."""
    return Shrinkable(value, lambda: shrink_integer(value, target))


def _float_candidates(value: float, target: float) -> Iterator[float]:
    yield target
    seen = {target}
    truncated = float(math.trunc(value))
    low, high = min(value, target), max(value, target)
    if low <= truncated <= high and truncated not in (target, value):
        seen.add(truncated)
        yield truncated
    gap = (value - target) / 2
    for _ in range(MAX_FLOAT_HALVINGS):
        candidate = value - gap
        if candidate == value:
            return
        if candidate not in seen and abs(candidate - target) < abs(value - target):
            seen.add(candidate)
            yield candidate
        gap /= 2


def shrink_float(value: float, target: float) -> Stream[Shrinkable[float]]:
    """Candidates for ``value`` approaching ``target``.

    NaN and infinities have no candidates: they are left unchanged rather
    than collapsed onto an unrelated magnitude.
    """
    if math.isnan(value) or math.isinf(value) or value == target:
        return Stream.nil()
    return Stream(lambda: _float_candidates(value, target)).map(lambda v: float_shrinkable(v, target))


def float_shrinkable(value: float, target: float) -> Shrinkable[float]:
    """Shrinkable float whose tree converges on ``target``."""
    return Shrinkable(value, lambda: shrink_float(value, target))


def shrink_option(inner: Shrinkable[Any]) -> Stream[Shrinkable[Any]]:
    """A present value shrinks to None first, then through its own shrinks."""
    return Stream.of(Shrinkable(None)).join(inner.shrink().map(option_shrinkable))


def option_shrinkable(inner: Shrinkable[Any]) -> Shrinkable[Any]:
    """Shrinkable for a present optional value."""
    if inner.value is None:
        return Shrinkable(None)
    return Shrinkable(inner.value, lambda: shrink_option(inner))


type Items = tuple[Shrinkable[Any], ...]


def shrink_items(items: Items) -> Stream[Items]:
    """Smaller item tuples for a variable-length sequence.

    Order: drop leading items (remaining lengths follow the integer rule
    toward 0, so the first candidate is the empty tuple), then shrink the
    head with the tail fixed, then shrink the tail with the head fixed.
    """
    if not items:
        return Stream.nil()
    size = len(items)
    head, tail = items[0], items[1:]
    removals: Stream[Items] = Stream(lambda: _integer_candidates(size, 0)).map(lambda n: items[size - n :])
    head_shrinks: Stream[Items] = head.shrink().map(lambda h: (h, *tail))
    # Built on first pull so constructing the stream does not recurse over the tail
    tail_shrinks: Stream[Items] = Stream(lambda: iter(shrink_items(tail).map(lambda t: (head, *t))))
    return removals.join(head_shrinks, tail_shrinks)


def sequence_shrinkable(items: Items) -> Shrinkable[list[Any]]:
    """Shrinkable list built from element shrinkables."""
    return Shrinkable(
        [item.value for item in items],
        lambda: shrink_items(items).map(sequence_shrinkable),
    )


def shrink_tuple(items: Items) -> Stream[Items]:
    """Shrink one component at a time, in component order, others fixed."""

    def candidates() -> Iterator[Items]:
        for index, item in enumerate(items):
            for child in item.shrink():
                yield (*items[:index], child, *items[index + 1 :])

    return Stream(candidates)


def tuple_shrinkable(items: Items) -> Shrinkable[tuple[Any, ...]]:
    """Shrinkable fixed-arity tuple built from component shrinkables."""
    return Shrinkable(
        tuple(item.value for item in items),
        lambda: shrink_tuple(items).map(tuple_shrinkable),
    )


def _distinct_keys(pairs: Items) -> bool:
    keys = [pair.value[0] for pair in pairs]
    return len(set(keys)) == len(keys)


def keyed_shrinkable(pairs: Items) -> Shrinkable[dict[Any, Any]]:
    """Shrinkable dict built from (key, value) pair shrinkables.

    Shrinks like a sequence of pairs: removing pairs, then shrinking
    retained keys and values. Candidates whose keys would collide are
    skipped so every child has exactly as many entries as pairs.
    """
    return Shrinkable(
        {pair.value[0]: pair.value[1] for pair in pairs},
        lambda: shrink_items(pairs).filter(_distinct_keys).map(keyed_shrinkable),
    )
