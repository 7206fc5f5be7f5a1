"""Shared typing constructs for gsearch.

This package defines the type aliases and the weighted-search mode enum used
across the engine to describe vertices, neighbor providers and weight
functions. It contains no search logic.
"""

from gsearch.types.base import Cost, DijkstraMode, NeighborProvider, Vertex, WeightFunc

__all__ = [
    # Enums
    "DijkstraMode",
    # Type aliases
    "Cost",
    "Vertex",
    "NeighborProvider",
    "WeightFunc",
]
