# src/propcheck/runner.py
"""Property runner: trials, shrink search, replay and sampling helpers.

A run is a small state machine:

    Init -> Trial -> (pass, trials left) Trial
                  -> (pass, no trials left) SUCCESS
                  -> (fail) Shrink -> FAILURE

The shrink search is greedy along a single path: from the current failing
node it takes the first child that still fails, records that child's index,
and repeats until no child fails, ``max_shrinks`` steps have been taken, or
``max_shrink_candidates`` candidates have been evaluated. Shrink streams
may be infinite, so the candidate budget is what bounds a single step.
The recorded indices, prefixed with the failing trial's number, form the
replay path.
"""

from __future__ import annotations

import itertools
import time
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from propcheck.arbitrary.base import Arbitrary
from propcheck.core.config import RunnerSettings
from propcheck.core.errors import ConfigurationError, PropertyFailedError
from propcheck.core.logging import get_logger
from propcheck.property import Property
from propcheck.rng.generator import MASK_32, MutableRandomGenerator
from propcheck.shrinking.shrinkable import Shrinkable

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RunDetails:
    """Outcome of a property run.

    Attributes:
        failed: True when a counterexample was found
        num_runs: Trials executed (including the failing one)
        num_shrinks: Successful shrink steps taken
        seed: Seed the run used; pass it back to reproduce the run
        counterexample: Smallest failing value found, None on success
        counterexample_path: Replay path "trial:i1:i2...", None on success
        error: Failure message of the counterexample, None on success
    """

    failed: bool
    num_runs: int
    num_shrinks: int
    seed: int
    counterexample: Any = None
    counterexample_path: str | None = None
    error: str | None = None


def _fresh_seed() -> int:
    return time.time_ns() & MASK_32


def _resolve_settings(settings: RunnerSettings | None, overrides: dict[str, Any]) -> RunnerSettings:
    base = settings if settings is not None else RunnerSettings()
    if not overrides:
        return base
    # Re-validate instead of model_copy(update=...), which skips validation
    return RunnerSettings(**{**base.model_dump(), **overrides})


def _shrink[T](
    prop: Property[T],
    start: Shrinkable[T],
    error: str,
    max_shrinks: int,
    max_candidates: int,
) -> tuple[Shrinkable[T], str, list[int]]:
    current = start
    path: list[int] = []
    evaluated = 0
    while len(path) < max_shrinks and evaluated < max_candidates:
        for index, candidate in enumerate(current.shrink().take(max_candidates - evaluated)):
            evaluated += 1
            candidate_error = prop.run(candidate.value)
            if candidate_error is not None:
                current, error = candidate, candidate_error
                path.append(index)
                logger.debug("shrink_step", step=len(path), index=index, value=repr(current.value))
                break
        else:
            break
    return current, error, path


def _follow_path[T](start: Shrinkable[T], indices: list[int], path: str) -> Shrinkable[T]:
    current = start
    for index in indices:
        child = next(itertools.islice(current.shrink(), index, None), None)
        if child is None:
            raise ConfigurationError(f"replay path {path!r} does not match the generated shrink tree")
        current = child
    return current


def _replay[T](prop: Property[T], settings: RunnerSettings, seed: int) -> RunDetails:
    assert settings.path is not None
    trial, *indices = (int(segment) for segment in settings.path.split(":"))
    rng = MutableRandomGenerator(seed)
    # Earlier trials are regenerated only to advance the generator
    for _ in range(trial):
        prop.generate(rng)
    node = _follow_path(prop.generate(rng), indices, settings.path)
    error = prop.run(node.value)
    if error is None:
        logger.debug("replay_passed", seed=seed, path=settings.path)
        return RunDetails(failed=False, num_runs=1, num_shrinks=0, seed=seed)
    logger.info("property_failed", seed=seed, path=settings.path, replay=True, error=error)
    return RunDetails(
        failed=True,
        num_runs=1,
        num_shrinks=len(indices),
        seed=seed,
        counterexample=node.value,
        counterexample_path=settings.path,
        error=error,
    )


def check(prop: Property[Any], settings: RunnerSettings | None = None, **overrides: Any) -> RunDetails:
    """Run a property and report the outcome without raising.

    Args:
        prop: Property to check
        settings: Base settings (defaults when omitted)
        **overrides: Individual RunnerSettings fields, e.g. ``num_runs=500``

    Returns:
        RunDetails describing success or the minimal counterexample found.

    Raises:
        ConfigurationError: If a replay path is given without a seed or
            does not match the shrink tree.
        pydantic.ValidationError: If an override is invalid or unknown.
    """
    resolved = _resolve_settings(settings, overrides)
    if resolved.path is not None:
        if resolved.seed is None:
            raise ConfigurationError("replaying a path requires the seed of the original run")
        return _replay(prop, resolved, resolved.seed)

    seed = resolved.seed if resolved.seed is not None else _fresh_seed()
    rng = MutableRandomGenerator(seed)
    for trial in range(resolved.num_runs):
        shrinkable = prop.generate(rng)
        error = prop.run(shrinkable.value)
        if error is None:
            continue
        logger.debug("trial_failed", trial=trial, seed=seed, value=repr(shrinkable.value), error=error)
        best, best_error, indices = _shrink(
            prop, shrinkable, error, resolved.max_shrinks, resolved.max_shrink_candidates
        )
        path = ":".join(str(segment) for segment in (trial, *indices))
        logger.info(
            "property_failed",
            seed=seed,
            path=path,
            num_runs=trial + 1,
            num_shrinks=len(indices),
            counterexample=repr(best.value),
        )
        return RunDetails(
            failed=True,
            num_runs=trial + 1,
            num_shrinks=len(indices),
            seed=seed,
            counterexample=best.value,
            counterexample_path=path,
            error=best_error,
        )
    return RunDetails(failed=False, num_runs=resolved.num_runs, num_shrinks=0, seed=seed)


def assert_property(prop: Property[Any], settings: RunnerSettings | None = None, **overrides: Any) -> None:
    """Run a property; raise on failure, return silently on success.

    Raises:
        PropertyFailedError: With the counterexample, seed and replay path.
    """
    details = check(prop, settings, **overrides)
    if not details.failed:
        return
    assert details.counterexample_path is not None
    assert details.error is not None
    raise PropertyFailedError(
        counterexample=details.counterexample,
        seed=details.seed,
        path=details.counterexample_path,
        num_runs=details.num_runs,
        num_shrinks=details.num_shrinks,
        error=details.error,
    )


def sample[T](
    source: Arbitrary[T] | Property[T],
    num_samples: int = 10,
    seed: int | None = None,
) -> list[T]:
    """Generate values without evaluating anything.

    Accepts an arbitrary or a property (whose inputs are sampled).

    Raises:
        ConfigurationError: If num_samples is negative.
    """
    if num_samples < 0:
        raise ConfigurationError(f"num_samples must be >= 0, got {num_samples}")
    rng = MutableRandomGenerator(seed if seed is not None else _fresh_seed())
    return [source.generate(rng).value for _ in range(num_samples)]


def statistics[T](
    source: Arbitrary[T] | Property[T],
    classify: Callable[[T], str],
    num_samples: int = 100,
    seed: int | None = None,
) -> dict[str, float]:
    """Percentage of generated values falling under each label.

    Labels come from ``classify``; the result is ordered from most to least
    frequent label.

    Raises:
        ConfigurationError: If num_samples is not positive.
    """
    if num_samples <= 0:
        raise ConfigurationError(f"num_samples must be > 0, got {num_samples}")
    counts = Counter(classify(value) for value in sample(source, num_samples, seed))
    return {label: 100.0 * count / num_samples for label, count in counts.most_common()}
