# src/propcheck/core/errors.py
"""Engine exceptions.

Only two conditions surface as exceptions:

- ConfigurationError: an arbitrary was built with invalid arguments. Raised
  synchronously when the arbitrary is constructed, never deferred.
- PropertyFailedError: a property run ended in FAILURE. Raised by
  ``assert_property`` after the shrink search has finished.

Predicate failures inside a run are NOT exceptions from the engine's point
of view. The runner captures them and turns them into a failure report.
"""

from typing import Any


class ConfigurationError(ValueError):
    """Raised when a combinator receives arguments it cannot work with.

    Examples: an alternation over zero arbitraries, an empty leaf-value set
    for structured generation, or an integer range whose minimum exceeds its
    maximum.
    """


class PropertyFailedError(AssertionError):
    """Raised when a property is falsified.

    Attributes:
        counterexample: Smallest failing value found by the shrink search
        seed: Seed of the run, needed to replay it
        path: Replay path ("trial:shrink:shrink...") leading to the counterexample
        num_runs: Number of trials executed, including the failing one
        num_shrinks: Number of successful shrink steps
        error: Failure message produced by the predicate
    """

    def __init__(
        self,
        *,
        counterexample: Any,
        seed: int,
        path: str,
        num_runs: int,
        num_shrinks: int,
        error: str,
    ) -> None:
        self.counterexample = counterexample
        self.seed = seed
        self.path = path
        self.num_runs = num_runs
        self.num_shrinks = num_shrinks
        self.error = error
        super().__init__(
            f"Property failed after {num_runs} test(s) "
            f"(seed={seed}, path={path!r}, shrunk {num_shrinks} time(s))\n"
            f"Counterexample: {counterexample!r}\n"
            f"Failure: {error}"
        )
