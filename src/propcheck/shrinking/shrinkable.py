# src/propcheck/shrinking/shrinkable.py
"""Shrinkable: a generated value paired with its lazy shrink tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from propcheck.shrinking.stream import Stream


def _no_shrink() -> Stream[Shrinkable[object]]:
    return Stream.nil()


@dataclass(frozen=True, slots=True, eq=False)
class Shrinkable[T]:
    """A value and the strictly smaller candidates it can shrink to.

    The (value, shrinker) pair never changes after construction. The
    children are computed on demand each time ``shrink()`` is called, so
    calling it twice is safe and yields the same candidates in the same
    order.

    Attributes:
        value: The generated value
        shrinker: Zero-argument callable producing the child stream.
            Defaults to no children (the value is already minimal).
    """

    value: T
    shrinker: Callable[[], Stream[Shrinkable[T]]] = _no_shrink  # type: ignore[assignment]

    def shrink(self) -> Stream[Shrinkable[T]]:
        """Children of this node, strictly smaller than ``value``."""
        return self.shrinker()

    def map[U](self, mapper: Callable[[T], U]) -> Shrinkable[U]:
        """Map the value and, lazily, every value of the shrink tree.

        The mapped tree has exactly the shape of the original one.
        """
        return Shrinkable(mapper(self.value), lambda: self.shrink().map(lambda child: child.map(mapper)))
