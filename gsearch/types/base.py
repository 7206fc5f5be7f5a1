"""Base type aliases and enums for the search algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Hashable, Iterable, Union

#: Represents a numeric edge weight or accumulated path weight.
Cost = Union[int, float]

#: Opaque caller-defined vertex identity. Must support equality and hashing.
Vertex = Hashable

#: Capability returning the outgoing neighbors of a vertex.
NeighborProvider = Callable[[Vertex], Iterable[Vertex]]

#: Weight of the edge between two neighboring vertices. Must be non-negative.
WeightFunc = Callable[[Vertex, Vertex], Cost]


class DijkstraMode(IntEnum):
    """Rediscovery policy of the weighted shortest-path search.

    Determines what happens when an already discovered but not yet finalized
    vertex is reached again through a cheaper route.
    """

    #: Keep the weight recorded when the vertex was first discovered.
    #: A later, cheaper route is ignored, so results may exceed the true
    #: shortest weight.
    DISCOVERY = 1
    #: Standard Dijkstra relaxation: update weight and parent whenever a
    #: strictly cheaper route to an unfinalized vertex is found.
    RELAX = 2

    @classmethod
    def from_string(cls, value: str) -> "DijkstraMode":
        """Parse a string into a DijkstraMode enum value.

        Args:
            value: Case-insensitive string name (e.g., "relax", "DISCOVERY").

        Returns:
            The corresponding DijkstraMode enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid dijkstra mode '{value}'. Valid values are: {valid}"
            ) from None
