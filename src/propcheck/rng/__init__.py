# src/propcheck/rng/__init__.py
"""Random generators: the single source of non-determinism."""

from propcheck.rng.generator import (
    MutableRandomGenerator,
    RandomGenerator,
    uniform_double,
    uniform_int,
)

__all__ = [
    "MutableRandomGenerator",
    "RandomGenerator",
    "uniform_double",
    "uniform_int",
]
