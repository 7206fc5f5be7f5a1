"""Configuration classes for gsearch components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from gsearch.types.base import DijkstraMode


@dataclass
class SearchConfig:
    """Defaults shared by the search algorithms and the path model."""

    # Number of leading and trailing vertices shown by Path.__str__
    display_cut: int = 10

    # First line of the adjacency listing
    adjacency_header: str = "Graph adjacency list:"

    # Rediscovery policy of the weighted search when none is given per call
    dijkstra_mode: DijkstraMode = DijkstraMode.DISCOVERY

    def resolve_mode(
        self, mode: Optional[Union[DijkstraMode, str]] = None
    ) -> DijkstraMode:
        """Return the explicit mode, or the configured default when ``mode`` is None."""
        if mode is None:
            return self.dijkstra_mode
        if isinstance(mode, str):
            return DijkstraMode.from_string(mode)
        return DijkstraMode(mode)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
