"""NetworkX graph adapter.

`NxGraph` exposes an existing NetworkX graph to the search algorithms: its
neighbor lookup follows ``graph.adj`` (successors for directed graphs) and
its ``weight`` method reads an edge attribute. Building and storing the graph
remains NetworkX's job.

Example:
    >>> import networkx as nx
    >>> from gsearch.graph.nx import NxGraph
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=1.0)
    >>> G.add_edge("B", "C", weight=2.0)
    >>> G.add_edge("A", "C", weight=5.0)
    >>>
    >>> graph = NxGraph(G)
    >>> path = graph.dijkstra_shortest_path("A", "C", graph.weight, mode="relax")
    >>> path.vertices, path.total_weight
    (('A', 'B', 'C'), 3.0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Set, Union

from gsearch.graph.abstract_graph import AbstractGraph
from gsearch.types.base import Cost, Vertex

if TYPE_CHECKING:
    import networkx as nx

    NxGraphType = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraphType = Any


class NxGraph(AbstractGraph):
    """Search front-end over a NetworkX graph.

    Attributes:
        graph: The wrapped NetworkX graph (not copied).
        weight_attr: Edge attribute read by :meth:`weight`.
        default_weight: Weight of edges that lack ``weight_attr``.
    """

    def __init__(
        self,
        graph: NxGraphType,
        weight_attr: str = "weight",
        default_weight: Cost = 1.0,
    ) -> None:
        self.graph = graph
        self.weight_attr = weight_attr
        self.default_weight = default_weight

    def get_neighbours(self, vertex: Vertex) -> Set[Vertex]:
        """Return successors of ``vertex``; an unknown vertex has none."""
        if vertex not in self.graph:
            return set()
        return set(self.graph.adj[vertex])

    def weight(self, u: Vertex, v: Vertex) -> Cost:
        """Return the weight of edge ``u -> v``.

        For multigraphs the lightest parallel edge counts.

        Raises:
            KeyError: If there is no edge from ``u`` to ``v``.
        """
        try:
            data = self.graph.adj[u][v]
        except KeyError:
            raise KeyError(f"No edge from {u!r} to {v!r}.") from None
        if self.graph.is_multigraph():
            return min(
                attrs.get(self.weight_attr, self.default_weight)
                for attrs in data.values()
            )
        return data.get(self.weight_attr, self.default_weight)
