# src/propcheck/property.py
"""Properties: an arbitrary paired with the predicate it must satisfy.

Outcome policy for predicates:

- returning None passes (assert-style predicates that return nothing)
- returning a truthy value passes
- returning any other falsy value (False, 0, "") fails
- raising an Exception fails, with the exception's repr as the message

BaseExceptions that are not Exceptions (KeyboardInterrupt, SystemExit)
propagate and abort the run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from propcheck.arbitrary.base import Arbitrary
from propcheck.arbitrary.fixed_tuple import tuple_
from propcheck.core.errors import ConfigurationError
from propcheck.rng.generator import RandomGenerator
from propcheck.shrinking.shrinkable import Shrinkable


class Property[T]:
    """A predicate over values drawn from one arbitrary.

    When built from several arbitraries by ``for_all``, the arbitrary is a
    tuple of them and the tuple is unpacked into the predicate's
    positional arguments.
    """

    def __init__(
        self,
        arbitrary: Arbitrary[T],
        predicate: Callable[..., object],
        *,
        unpack: bool = False,
    ) -> None:
        self._arbitrary = arbitrary
        self._predicate = predicate
        self._unpack = unpack

    @property
    def arbitrary(self) -> Arbitrary[T]:
        return self._arbitrary

    def generate(self, rng: RandomGenerator) -> Shrinkable[T]:
        """Draw one input (and its shrink tree)."""
        return self._arbitrary.generate(rng)

    def run(self, value: T) -> str | None:
        """Evaluate the predicate on ``value``.

        Returns:
            None when the property holds, otherwise a failure message.
        """
        try:
            outcome = self._predicate(*value) if self._unpack else self._predicate(value)  # type: ignore[misc]
        except Exception as exc:
            return repr(exc)
        if outcome is None or outcome:
            return None
        return f"Property returned {outcome!r}"


def for_all(*args: Any) -> Property[Any]:
    """Build a property from arbitraries followed by a predicate.

    Example:
        for_all(integer(), integer(), lambda a, b: a + b == b + a)

    Raises:
        ConfigurationError: If no arbitrary is given or the last argument is
            not a callable predicate.
    """
    if len(args) < 2:
        raise ConfigurationError("for_all requires at least one arbitrary and a predicate")
    *arbitraries, predicate = args
    if isinstance(predicate, Arbitrary) or not callable(predicate):
        raise ConfigurationError(f"for_all expects a predicate as its last argument, got {predicate!r}")
    for arbitrary in arbitraries:
        if not isinstance(arbitrary, Arbitrary):
            raise ConfigurationError(f"for_all expects arbitraries before the predicate, got {arbitrary!r}")
    if len(arbitraries) == 1:
        return Property(arbitraries[0], predicate)
    return Property(tuple_(*arbitraries), predicate, unpack=True)
