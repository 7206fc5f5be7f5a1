"""Object-oriented front-end to the search algorithms.

`AbstractGraph` leaves a single method abstract, `get_neighbours`, and offers
every search as a method bound to it. Directed graphs return outgoing
neighbors only; undirected graphs return symmetric neighbor sets.
`FunctionGraph` fills in `get_neighbours` from a callable or a mapping, for
callers that would rather inject a capability than subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Callable, Iterable, Optional, Set, Union

from gsearch.algorithms.bfs import breadth_first_search
from gsearch.algorithms.dfs import depth_first_search
from gsearch.algorithms.dijkstra import dijkstra_shortest_path
from gsearch.algorithms.reachability import format_adjacency_list, get_all_vertices
from gsearch.paths.path import Path
from gsearch.types.base import DijkstraMode, Vertex, WeightFunc


class AbstractGraph(ABC):
    """Graph with an abstract vertex type, defined by its neighbor lookup."""

    @abstractmethod
    def get_neighbours(self, vertex: Vertex) -> Iterable[Vertex]:
        """Return the neighbors of ``vertex`` (outgoing edges if directed).

        Must return the same set of vertices each time it is called for the
        same vertex and must not have side effects.
        """
        raise NotImplementedError

    def get_all_vertices(self, start: Optional[Vertex]) -> Set[Vertex]:
        """Return every vertex reachable from ``start``, ``start`` included."""
        return get_all_vertices(self.get_neighbours, start)

    def format_adjacency_list(self, start: Optional[Vertex]) -> str:
        """Return the adjacency listing of the sub-graph reachable from ``start``."""
        return format_adjacency_list(self.get_neighbours, start)

    def depth_first_search(
        self, start: Optional[Vertex], target: Optional[Vertex]
    ) -> Optional[Path]:
        """Return some path from ``start`` to ``target``, or None."""
        return depth_first_search(self.get_neighbours, start, target)

    def breadth_first_search(
        self, start: Optional[Vertex], target: Optional[Vertex]
    ) -> Optional[Path]:
        """Return a minimum edge-count path from ``start`` to ``target``, or None."""
        return breadth_first_search(self.get_neighbours, start, target)

    def dijkstra_shortest_path(
        self,
        start: Optional[Vertex],
        target: Optional[Vertex],
        weight: WeightFunc,
        mode: Optional[Union[DijkstraMode, str]] = None,
    ) -> Optional[Path]:
        """Return a least-weight path from ``start`` to ``target``, or None.

        See ``gsearch.algorithms.dijkstra`` for the meaning of ``mode``.
        """
        return dijkstra_shortest_path(self.get_neighbours, start, target, weight, mode)


class FunctionGraph(AbstractGraph):
    """Graph whose neighbors come from an injected callable or mapping.

    Example:
        >>> graph = FunctionGraph({1: {2, 3}, 2: {3, 4}, 3: {4}})
        >>> graph.breadth_first_search(1, 4).vertices
        (1, 2, 4)

    Args:
        neighbors: Either a callable ``vertex -> iterable`` or a mapping from
            vertex to its neighbors. Vertices missing from a mapping have no
            outgoing edges.

    Raises:
        TypeError: If ``neighbors`` is neither callable nor a mapping.
    """

    def __init__(
        self,
        neighbors: Union[
            Callable[[Vertex], Iterable[Vertex]], Mapping[Vertex, Iterable[Vertex]]
        ],
    ) -> None:
        if isinstance(neighbors, Mapping):
            adjacency = neighbors
            self._neighbors: Callable[[Vertex], Iterable[Vertex]] = (
                lambda vertex: adjacency.get(vertex, ())
            )
        elif callable(neighbors):
            self._neighbors = neighbors
        else:
            raise TypeError(
                f"neighbors must be callable or a mapping, got {type(neighbors).__name__}"
            )

    def get_neighbours(self, vertex: Vertex) -> Iterable[Vertex]:
        return self._neighbors(vertex)
