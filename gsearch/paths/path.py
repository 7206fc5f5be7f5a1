"""Search result paths.

The ``Path`` dataclass stores the ordered vertex sequence from start to target,
the accumulated weight along it, and the diagnostic set of all vertices the
producing search touched. ``PathBuilder`` is the accumulator a search call owns
while it runs; it hands out a frozen ``Path`` once the search completes.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any, Deque, FrozenSet, Iterator, Optional, Set, Tuple

from gsearch.config import SEARCH_CONFIG
from gsearch.types.base import Cost, Vertex, WeightFunc


@dataclass(frozen=True)
class Path:
    """Directed path of neighboring vertices found by a search.

    Representation invariants:
      - For every consecutive pair ``(vertices[i-1], vertices[i])``, the second
        vertex is a neighbor of the first.
      - A path with one vertex has the same start and target.
      - A path without vertices is empty and has neither start nor target.
      - ``visited`` is a superset of ``vertices``.

    Attributes:
        vertices: Vertex sequence from start to target, inclusive.
        total_weight: Sum of edge weights along ``vertices`` (0.0 if unweighted).
        visited: All vertices the search touched, for search-effort analysis.
    """

    vertices: Tuple[Vertex, ...] = ()
    total_weight: Cost = 0.0
    visited: FrozenSet[Vertex] = field(default_factory=frozenset, compare=False)

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        """Iterate over the vertices from start to target."""
        return iter(self.vertices)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self.vertices

    @property
    def start(self) -> Vertex:
        """Return the first vertex of the path.

        Raises:
            ValueError: If the path is empty.
        """
        if not self.vertices:
            raise ValueError("Empty path has no start vertex.")
        return self.vertices[0]

    @property
    def target(self) -> Vertex:
        """Return the last vertex of the path.

        Raises:
            ValueError: If the path is empty.
        """
        if not self.vertices:
            raise ValueError("Empty path has no target vertex.")
        return self.vertices[-1]

    @property
    def edge_count(self) -> int:
        """Return the number of edges, i.e. one less than the vertex count."""
        return max(len(self.vertices) - 1, 0)

    def recalculate_total_weight(self, weight: WeightFunc) -> Path:
        """Return a copy whose total weight is recomputed from ``weight``.

        The first vertex has no predecessor and hence no weight contribution;
        every following vertex contributes ``weight(previous, vertex)``.

        Args:
            weight: Weight of the segment between two neighboring vertices.

        Returns:
            A new Path with the same vertices and visited set.
        """
        total: Cost = 0.0
        previous: Optional[Vertex] = None
        for index, vertex in enumerate(self.vertices):
            if index > 0:
                total += weight(previous, vertex)
            previous = vertex
        return replace(self, total_weight=total)

    def __str__(self) -> str:
        """Return a summary with the vertex list elided in the middle for long paths.

        Example:
            ``Weight=2.00 Length=3 visited=4 (1, 2, 4)``
        """
        cut = SEARCH_CONFIG.display_cut
        tail_cut = len(self.vertices) - 1 - cut
        shown = []
        for count, vertex in enumerate(self.vertices):
            if count < cut or count > tail_cut:
                shown.append(str(vertex))
            elif count == cut:
                shown.append("...")
        return (
            f"Weight={self.total_weight:.2f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({', '.join(shown)})"
        )


class PathBuilder:
    """Mutable accumulator owned by exactly one search call.

    Vertices may be appended (DFS), popped on backtracking, or prepended while
    walking predecessor links back from the target (BFS, weighted search).
    """

    def __init__(self) -> None:
        self.vertices: Deque[Vertex] = deque()
        self.visited: Set[Vertex] = set()
        self.total_weight: Cost = 0.0

    def visit(self, vertex: Vertex) -> None:
        self.visited.add(vertex)

    def is_visited(self, vertex: Vertex) -> bool:
        return vertex in self.visited

    def append(self, vertex: Vertex) -> None:
        self.vertices.append(vertex)

    def pop(self) -> Vertex:
        return self.vertices.pop()

    def prepend(self, vertex: Vertex) -> None:
        self.vertices.appendleft(vertex)

    def build(self) -> Path:
        """Freeze the accumulated state into a ``Path``."""
        return Path(
            vertices=tuple(self.vertices),
            total_weight=self.total_weight,
            visited=frozenset(self.visited),
        )
