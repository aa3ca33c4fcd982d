# tests/property/conftest.py
"""Shared Hypothesis strategies and tree walkers for property tests.

Usage:
    from tests.property.conftest import seeds, walk_tree

    @given(seed=seeds)
    def test_closure(seed: int) -> None:
        ...
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from hypothesis import strategies as st

from propcheck.shrinking import Shrinkable

# =============================================================================
# Strategies
# =============================================================================

# Any seed a user could pass; negative and oversized seeds are folded
seeds = st.integers(min_value=-(2**63), max_value=2**64)

depth_bounds = st.integers(min_value=0, max_value=3)

# =============================================================================
# Tree walking
# =============================================================================

# Nodes visited per shrink tree; trees are lazy and can be very large
MAX_NODES = 200


def walk_tree(root: Shrinkable[Any], max_nodes: int = MAX_NODES) -> Iterator[Any]:
    """Breadth-first values of a shrink tree, root first, at most max_nodes."""
    queue: deque[Shrinkable[Any]] = deque([root])
    visited = 0
    while queue and visited < max_nodes:
        node = queue.popleft()
        visited += 1
        yield node.value
        queue.extend(node.shrink().take(max_nodes - visited))
