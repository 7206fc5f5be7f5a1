"""Reachability and adjacency listing over a neighbor provider.

Both operations walk a spanning tree rooted at the start vertex in depth-first
pre-order. The walk keeps an explicit stack of neighbor iterators instead of
recursing, so very deep graphs do not exhaust the interpreter stack; the visit
order is the same as a recursive walk would produce.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Set, Tuple

from gsearch.config import SEARCH_CONFIG
from gsearch.logging import get_logger
from gsearch.types.base import NeighborProvider, Vertex

logger = get_logger(__name__)


def _preorder(
    neighbors: NeighborProvider,
    start: Vertex,
    on_enter: Optional[Callable[[Vertex, Tuple[Vertex, ...]], None]] = None,
) -> Set[Vertex]:
    """Walk every vertex reachable from ``start`` once, in pre-order.

    Args:
        neighbors: Outgoing-neighbor provider.
        start: Root of the spanning tree.
        on_enter: Called with ``(vertex, its_neighbors)`` when a vertex is first
            entered, before any of its children.

    Returns:
        The set of visited vertices.
    """
    visited: Set[Vertex] = set()
    stack: List[Iterator[Vertex]] = []

    def enter(vertex: Vertex) -> None:
        visited.add(vertex)
        adjacent = tuple(neighbors(vertex))
        if on_enter is not None:
            on_enter(vertex, adjacent)
        stack.append(iter(adjacent))

    enter(start)
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                enter(neighbor)
                break
        else:
            stack.pop()
    return visited


def get_all_vertices(neighbors: NeighborProvider, start: Optional[Vertex]) -> Set[Vertex]:
    """Return all vertices reachable from ``start``, including ``start``.

    Only outgoing edges are followed. Cycles and self-loops are handled by
    marking vertices as visited.

    Args:
        neighbors: Outgoing-neighbor provider.
        start: The start vertex; ``None`` yields an empty set.

    Returns:
        Set of reachable vertices.
    """
    if start is None:
        return set()
    reachable = _preorder(neighbors, start)
    logger.debug("Found %d vertices reachable from %r", len(reachable), start)
    return reachable


def format_adjacency_list(neighbors: NeighborProvider, start: Optional[Vertex]) -> str:
    """Format the adjacency list of the sub-graph reachable from ``start``.

    Output format::

        Graph adjacency list:
        vertex1: [neighbour11,neighbour12,...]
        vertex2: [neighbour21,neighbour22,...]

    Vertices appear once each, in pre-order of a depth-first spanning tree
    rooted at ``start``. Neighbors are rendered in the provider's iteration
    order, separated by commas. All whitespace inside the brackets is removed,
    including whitespace within a neighbor's own text, so ``(0, 1)`` renders
    as ``(0,1)``.

    Args:
        neighbors: Outgoing-neighbor provider.
        start: Root vertex; ``None`` yields the header line alone.

    Returns:
        The formatted listing, each line terminated by a newline.
    """
    lines = [SEARCH_CONFIG.adjacency_header]

    def render(vertex: Vertex, adjacent: Tuple[Vertex, ...]) -> None:
        # no whitespace anywhere inside the brackets
        rendered = "".join(f"[{','.join(str(n) for n in adjacent)}]".split())
        lines.append(f"{vertex}: {rendered}")

    if start is not None:
        _preorder(neighbors, start, on_enter=render)
    return "\n".join(lines) + "\n"
