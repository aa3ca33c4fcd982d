# src/propcheck/shrinking/stream.py
"""Lazy, restartable sequences used to represent shrink candidates.

A Stream wraps a zero-argument factory that returns a fresh iterator.
Iterating a Stream calls the factory again, so two consumers of the same
Stream never share an iterator position, and a Stream can be walked as
many times as needed. Elements are produced only when a consumer pulls
them; infinite streams are fine as long as consumers stop pulling.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator


def _empty() -> Iterator[object]:
    return iter(())


class Stream[T]:
    """Pull-based sequence over a restartable iterator factory."""

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[T]]) -> None:
        self._factory = factory

    @classmethod
    def nil(cls) -> Stream[T]:
        """Empty stream."""
        return cls(_empty)  # type: ignore[arg-type]

    @classmethod
    def of(cls, *values: T) -> Stream[T]:
        """Stream over a fixed set of already-computed values."""
        return cls(lambda: iter(values))

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Stream[T]:
        """Stream over an iterable that can be iterated more than once.

        One-shot iterators (generators, file handles) would break
        restartability; wrap a generator *function* with the constructor
        instead.
        """
        if iter(values) is values:
            raise TypeError("Stream.from_iterable needs a re-iterable collection, not an iterator")
        return cls(lambda: iter(values))

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def map[U](self, mapper: Callable[[T], U]) -> Stream[U]:
        """Lazily apply mapper to each element."""
        return Stream(lambda: map(mapper, self._factory()))

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Lazily keep elements satisfying predicate."""
        return Stream(lambda: filter(predicate, self._factory()))

    def join(self, *others: Stream[T]) -> Stream[T]:
        """Lazy concatenation: this stream's elements, then each other's in order."""
        streams = (self, *others)
        return Stream(lambda: itertools.chain.from_iterable(streams))

    def take(self, count: int) -> Stream[T]:
        """First ``count`` elements (fewer if the stream is shorter)."""
        return Stream(lambda: itertools.islice(self._factory(), count))

    def first(self) -> T | None:
        """First element, or None for an empty stream."""
        return next(self._factory(), None)

    def has(self, predicate: Callable[[T], bool]) -> tuple[bool, T | None]:
        """Find the first element satisfying predicate.

        Returns:
            (True, element) when found, (False, None) otherwise. Walks the
            whole stream when nothing matches.
        """
        for element in self._factory():
            if predicate(element):
                return True, element
        return False, None

    def is_empty(self) -> bool:
        """True when the stream produces no elements."""
        sentinel = object()
        return next(self._factory(), sentinel) is sentinel

    def to_list(self) -> list[T]:
        """Materialise the stream. Only for finite streams."""
        return list(self._factory())
