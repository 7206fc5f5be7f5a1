"""Global pytest configuration and shared sample graphs.

Graphs are plain adjacency mappings ``vertex -> neighbors``; tests wrap them
in ``FunctionGraph`` or pass ``adjacency.get``-style providers directly.
Weighted graphs come with a ``weights`` mapping ``(u, v) -> weight``.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Tuple

import pytest

from gsearch.logging import reset_logging

Adjacency = Dict[Hashable, Iterable[Hashable]]
Weights = Dict[Tuple[Hashable, Hashable], float]


@pytest.fixture
def as_provider() -> Callable[[Adjacency], Callable[[Hashable], Iterable[Hashable]]]:
    """Turn an adjacency mapping into a neighbor provider; unknown vertices have no edges."""

    def make(adjacency: Adjacency) -> Callable[[Hashable], Iterable[Hashable]]:
        return lambda vertex: adjacency.get(vertex, ())

    return make


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Keep logging configuration from leaking between tests."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def diamond() -> Adjacency:
    #      ┌──────►2──────┐
    #      │       │      ▼
    #      1       ▼      4
    #      │       3──────▲
    #      └──────►┘
    return {1: {2, 3}, 2: {3, 4}, 3: {4}}


@pytest.fixture
def diamond_ordered() -> Adjacency:
    # Same edges as ``diamond`` with a fixed neighbor order.
    return {1: [2, 3], 2: [3, 4], 3: [4]}


@pytest.fixture
def weighted_diamond() -> Tuple[Adjacency, Weights]:
    #      [1]        [1]
    #   ┌──────►2──────────┐
    #   │                  ▼
    #   1                  4
    #   │   [5]       [1]  ▲
    #   └──────►3──────────┘
    adjacency = {1: {2, 3}, 2: {4}, 3: {4}}
    weights = {(1, 2): 1.0, (1, 3): 5.0, (2, 4): 1.0, (3, 4): 1.0}
    return adjacency, weights


@pytest.fixture
def late_shortcut() -> Tuple[Adjacency, Weights]:
    # A cheaper route to C only appears after C was discovered from A.
    #
    #      [1]      [1]
    #   A──────►B──────►C──────►D
    #   │               ▲  [1]
    #   └───────────────┘
    #         [10]
    adjacency = {"A": ["B", "C"], "B": ["C"], "C": ["D"]}
    weights = {("A", "B"): 1.0, ("A", "C"): 10.0, ("B", "C"): 1.0, ("C", "D"): 1.0}
    return adjacency, weights


@pytest.fixture
def cyclic() -> Adjacency:
    # Cycle 1 -> 2 -> 3 -> 1, self-loops on 1 and 3, branch 3 -> 4 -> 5,
    # unreachable 6 -> 1.
    return {1: [1, 2], 2: [3], 3: [3, 1, 4], 4: [5], 5: [], 6: [1]}


@pytest.fixture
def grid() -> Adjacency:
    # Undirected 4x4 grid with symmetric neighbor sets.
    adjacency: Dict[Hashable, set] = {}
    for r in range(4):
        for c in range(4):
            adjacency[(r, c)] = {
                (r + dr, c + dc)
                for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
                if 0 <= r + dr < 4 and 0 <= c + dc < 4
            }
    return adjacency
