"""Breadth-first path search."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

from gsearch.logging import get_logger
from gsearch.paths.path import Path, PathBuilder
from gsearch.types.base import NeighborProvider, Vertex

logger = get_logger(__name__)


def breadth_first_search(
    neighbors: NeighborProvider,
    start: Optional[Vertex],
    target: Optional[Vertex],
) -> Optional[Path]:
    """Find a minimum edge-count path from ``start`` to ``target``.

    Vertices are expanded in FIFO order. ``visited_from`` maps every enqueued
    vertex to its predecessor (the start maps to None), so no vertex is ever
    enqueued twice. Each neighbor of an expanded vertex is recorded in
    ``Path.visited``; the search stops as soon as the target shows up as a
    neighbor and rebuilds the path from the predecessor links.

    Args:
        neighbors: Outgoing-neighbor provider.
        start: Start vertex.
        target: Target vertex.

    Returns:
        The path found, or None if either vertex is None or the target is not
        reachable from the start.
    """
    if start is None or target is None:
        return None

    builder = PathBuilder()
    builder.visit(start)
    builder.append(target)
    if start == target:
        return builder.build()

    queue: Deque[Vertex] = deque([start])
    visited_from: Dict[Vertex, Optional[Vertex]] = {start: None}

    while queue:
        current = queue.popleft()
        for neighbor in neighbors(current):
            builder.visit(neighbor)
            if neighbor == target:
                node: Optional[Vertex] = current
                while node is not None:
                    builder.prepend(node)
                    node = visited_from[node]
                path = builder.build()
                logger.debug(
                    "BFS %r -> %r: %d edges (visited %d)",
                    start,
                    target,
                    path.edge_count,
                    len(path.visited),
                )
                return path
            if neighbor not in visited_from:
                visited_from[neighbor] = current
                queue.append(neighbor)

    logger.debug(
        "BFS %r -> %r: no path (visited %d)", start, target, len(builder.visited)
    )
    return None
