"""gsearch: generic graph-traversal engine.

gsearch runs reachability, adjacency listing, depth-first, breadth-first and
weighted shortest-path searches over any graph described only by a neighbor
lookup. Vertices are arbitrary hashable values.

Primary API:
    AbstractGraph - Subclass and implement get_neighbours() to search a graph
    FunctionGraph - Search a graph given as a callable or a mapping
    NxGraph - Search an existing NetworkX graph
    Path - Immutable search result (vertices, total_weight, visited)
    depth_first_search(), breadth_first_search(), dijkstra_shortest_path()
        - Function forms taking the neighbor provider as first argument

Example:
    from gsearch import FunctionGraph

    graph = FunctionGraph({1: {2, 3}, 2: {4}, 3: {4}})
    weights = {(1, 2): 1, (1, 3): 5, (2, 4): 1, (3, 4): 1}

    graph.breadth_first_search(1, 4)
    path = graph.dijkstra_shortest_path(1, 4, lambda u, v: weights[(u, v)])
    print(path)  # Weight=2.00 Length=3 visited=4 (1, 2, 4)
"""

from __future__ import annotations

from gsearch import logging
from gsearch._version import __version__
from gsearch.algorithms import (
    breadth_first_search,
    depth_first_search,
    dijkstra_shortest_path,
    format_adjacency_list,
    get_all_vertices,
)
from gsearch.config import SEARCH_CONFIG, SearchConfig
from gsearch.graph import AbstractGraph, FunctionGraph, NxGraph
from gsearch.paths import Path
from gsearch.types.base import DijkstraMode

__all__ = [
    # Version
    "__version__",
    # Graphs
    "AbstractGraph",
    "FunctionGraph",
    "NxGraph",
    # Results
    "Path",
    # Algorithms
    "get_all_vertices",
    "format_adjacency_list",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
    # Types
    "DijkstraMode",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
