"""Property-based tests for propcheck.

Hypothesis drives the seeds and bounds; propcheck's own generators produce
the values under test. Invariants checked here must hold for every seed,
not just the handful the unit tests pin down.

Test categories:
- arbitrary/: Closure, depth bounds, JSON validity of generated structures
- shrinking/: First-child paths reach canonical minima; candidates shrink
- runner/: Determinism, shrink results and replay for arbitrary seeds
"""
