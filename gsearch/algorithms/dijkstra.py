"""Weighted shortest-path search (Dijkstra-style spanning tree).

Notes:
    The search grows a spanning tree from the start vertex. Every discovered
    vertex gets a ``SpanningTreeNode`` recording its parent and the weight sum of
    the best route known so far. The unfinalized node with the least weight sum
    is selected next; selecting the target ends the search.

    Two rediscovery policies exist (see ``DijkstraMode``):

    - ``DISCOVERY``: a vertex keeps the weight sum of the route it was first
      discovered through. If a cheaper route through a later-selected vertex
      exists, it is not taken, and the result can be heavier than the true
      shortest path.
    - ``RELAX``: textbook Dijkstra; a strictly cheaper route to an unfinalized
      vertex replaces its weight sum and parent.

    Selection uses a binary heap keyed by ``(weight_sum_to, insertion_order)``.
    Entries made stale by relaxation or finalization are skipped on pop. Edge
    weights must be non-negative; this is not checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple, Union

from gsearch.config import SEARCH_CONFIG
from gsearch.logging import get_logger
from gsearch.paths.path import Path, PathBuilder
from gsearch.types.base import Cost, DijkstraMode, NeighborProvider, Vertex, WeightFunc

logger = get_logger(__name__)


@dataclass
class SpanningTreeNode:
    """Per-vertex record of the spanning tree.

    Attributes:
        vertex: The graph vertex this node describes.
        parent: Predecessor on the best known route, None for the start vertex.
        weight_sum_to: Weight sum of the best known route from the start.
        finalized: True once the weight sum can no longer change.
    """

    vertex: Vertex
    parent: Optional[Vertex] = None
    weight_sum_to: Cost = float("inf")
    finalized: bool = False


class SpanningTree:
    """Table of spanning-tree nodes keyed by vertex, with min-weight selection."""

    def __init__(self, root: Vertex) -> None:
        self._nodes: Dict[Vertex, SpanningTreeNode] = {}
        self._heap: List[Tuple[Cost, int, Vertex]] = []
        self._order = count()
        self.set(root, None, 0.0)

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self._nodes

    def __getitem__(self, vertex: Vertex) -> SpanningTreeNode:
        return self._nodes[vertex]

    def __len__(self) -> int:
        return len(self._nodes)

    def set(self, vertex: Vertex, parent: Optional[Vertex], weight_sum_to: Cost) -> None:
        """Record (or improve) the route to ``vertex`` and queue it for selection."""
        node = self._nodes.get(vertex)
        if node is None:
            node = self._nodes[vertex] = SpanningTreeNode(vertex)
        node.parent = parent
        node.weight_sum_to = weight_sum_to
        heappush(self._heap, (weight_sum_to, next(self._order), vertex))

    def pop_nearest(self) -> Optional[SpanningTreeNode]:
        """Return the unfinalized node with the least weight sum, or None."""
        while self._heap:
            weight_sum_to, _, vertex = heappop(self._heap)
            node = self._nodes[vertex]
            if node.finalized or weight_sum_to != node.weight_sum_to:
                continue
            return node
        return None

    def route_to(self, vertex: Vertex) -> List[Vertex]:
        """Return the vertices from the root to ``vertex`` via parent links."""
        route: List[Vertex] = []
        node: Optional[SpanningTreeNode] = self._nodes[vertex]
        while node is not None:
            route.append(node.vertex)
            node = self._nodes[node.parent] if node.parent is not None else None
        route.reverse()
        return route


def dijkstra_shortest_path(
    neighbors: NeighborProvider,
    start: Optional[Vertex],
    target: Optional[Vertex],
    weight: WeightFunc,
    mode: Optional[Union[DijkstraMode, str]] = None,
) -> Optional[Path]:
    """Find a least-weight path from ``start`` to ``target``.

    Args:
        neighbors: Outgoing-neighbor provider.
        start: Start vertex.
        target: Target vertex.
        weight: Non-negative weight of the edge between two neighbors. Called
            once for every neighbor of every selected vertex.
        mode: Rediscovery policy. None uses ``SEARCH_CONFIG.dijkstra_mode``;
            strings are parsed case-insensitively.

    Returns:
        The path found, with ``total_weight`` equal to the target's weight sum,
        or None if either vertex is None or the target is not reachable.

    Raises:
        ValueError: If ``mode`` is a string that names no DijkstraMode.
    """
    if start is None or target is None:
        return None

    relax = SEARCH_CONFIG.resolve_mode(mode) is DijkstraMode.RELAX

    builder = PathBuilder()
    builder.visit(start)
    if start == target:
        builder.append(start)
        return builder.build()

    tree = SpanningTree(start)
    nearest = tree.pop_nearest()
    while nearest is not None:
        if nearest.vertex == target:
            for vertex in tree.route_to(target):
                builder.append(vertex)
            builder.total_weight = nearest.weight_sum_to
            path = builder.build()
            logger.debug(
                "Dijkstra %r -> %r: weight %s over %d edges (visited %d, tree %d)",
                start,
                target,
                path.total_weight,
                path.edge_count,
                len(path.visited),
                len(tree),
            )
            return path

        for neighbor in neighbors(nearest.vertex):
            builder.visit(neighbor)
            candidate = nearest.weight_sum_to + weight(nearest.vertex, neighbor)
            if neighbor not in tree:
                tree.set(neighbor, nearest.vertex, candidate)
            elif relax:
                known = tree[neighbor]
                if not known.finalized and candidate < known.weight_sum_to:
                    tree.set(neighbor, nearest.vertex, candidate)

        nearest.finalized = True
        nearest = tree.pop_nearest()

    logger.debug(
        "Dijkstra %r -> %r: no path (visited %d)", start, target, len(builder.visited)
    )
    return None
