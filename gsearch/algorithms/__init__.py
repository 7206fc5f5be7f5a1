"""Search algorithms over an abstract neighbor provider.

Each function takes the provider as its first argument and owns all of its
working state for the duration of one call.
"""

from gsearch.algorithms.bfs import breadth_first_search
from gsearch.algorithms.dfs import depth_first_search
from gsearch.algorithms.dijkstra import dijkstra_shortest_path
from gsearch.algorithms.reachability import format_adjacency_list, get_all_vertices

__all__ = [
    "get_all_vertices",
    "format_adjacency_list",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra_shortest_path",
]
