"""Depth-first path search with backtracking.

The search keeps an explicit stack of frames, one per vertex on the path under
construction. Each frame holds the iterator over that vertex's neighbors, so
resuming a frame continues with the next untried neighbor exactly as a
recursive implementation would. Backtracking pops the frame and removes its
vertex from the path.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from gsearch.logging import get_logger
from gsearch.paths.path import Path, PathBuilder
from gsearch.types.base import NeighborProvider, Vertex

logger = get_logger(__name__)


def depth_first_search(
    neighbors: NeighborProvider,
    start: Optional[Vertex],
    target: Optional[Vertex],
) -> Optional[Path]:
    """Find a path from ``start`` to ``target`` by depth-first search.

    The path found is some path, not necessarily the shortest; which one
    depends on the provider's neighbor iteration order. Every vertex the search
    marks is recorded in ``Path.visited``, including those on abandoned
    dead-end branches.

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
    frames: List[Iterator[Vertex]] = []

    def enter(vertex: Vertex) -> bool:
        builder.visit(vertex)
        builder.append(vertex)
        if vertex == target:
            return True
        frames.append(iter(neighbors(vertex)))
        return False

    found = enter(start)
    while frames and not found:
        for neighbor in frames[-1]:
            if not builder.is_visited(neighbor):
                found = enter(neighbor)
                break
        else:
            # all neighbors tried: backtrack
            frames.pop()
            builder.pop()

    if not found:
        logger.debug(
            "DFS %r -> %r: no path (visited %d)", start, target, len(builder.visited)
        )
        return None

    path = builder.build()
    logger.debug(
        "DFS %r -> %r: %d vertices (visited %d)",
        start,
        target,
        len(path),
        len(path.visited),
    )
    return path
