import networkx as nx
import pytest

from gsearch.algorithms.dijkstra import (
    SpanningTree,
    SpanningTreeNode,
    dijkstra_shortest_path,
)
from gsearch.config import SEARCH_CONFIG
from gsearch.types.base import DijkstraMode


def to_weighted_digraph(adjacency, weights):
    g = nx.DiGraph()
    for u, vs in adjacency.items():
        for v in vs:
            g.add_edge(u, v, weight=weights[(u, v)])
    return g


def test_dijkstra_weighted_diamond(weighted_diamond, as_provider):
    adjacency, weights = weighted_diamond
    path = dijkstra_shortest_path(
        as_provider(adjacency), 1, 4, lambda u, v: weights[(u, v)]
    )

    assert path.vertices == (1, 2, 4)
    assert path.total_weight == 2.0
    assert path.visited == {1, 2, 3, 4}


def test_dijkstra_start_equals_target(weighted_diamond, as_provider):
    adjacency, weights = weighted_diamond
    path = dijkstra_shortest_path(
        as_provider(adjacency), 3, 3, lambda u, v: weights[(u, v)]
    )
    assert path.vertices == (3,)
    assert path.total_weight == 0.0
    assert path.visited == {3}


def test_dijkstra_no_path(weighted_diamond, as_provider):
    adjacency, weights = weighted_diamond

    def weight(u, v):
        return weights[(u, v)]

    neighbors = as_provider(adjacency)
    assert dijkstra_shortest_path(neighbors, 4, 1, weight) is None
    assert dijkstra_shortest_path(neighbors, 1, 7, weight) is None
    assert dijkstra_shortest_path(neighbors, None, 1, weight) is None
    assert dijkstra_shortest_path(neighbors, 1, None, weight) is None


def test_dijkstra_discovery_mode_keeps_first_route(late_shortcut, as_provider):
    adjacency, weights = late_shortcut
    path = dijkstra_shortest_path(
        as_provider(adjacency),
        "A",
        "D",
        lambda u, v: weights[(u, v)],
        mode=DijkstraMode.DISCOVERY,
    )

    # C keeps weight 10 from its discovery via A; the route via B is ignored.
    assert path.vertices == ("A", "C", "D")
    assert path.total_weight == 11.0


def test_dijkstra_relax_mode_finds_true_shortest(late_shortcut, as_provider):
    adjacency, weights = late_shortcut
    path = dijkstra_shortest_path(
        as_provider(adjacency), "A", "D", lambda u, v: weights[(u, v)], mode="relax"
    )

    assert path.vertices == ("A", "B", "C", "D")
    assert path.total_weight == 3.0
    expected = nx.dijkstra_path_length(
        to_weighted_digraph(adjacency, weights), "A", "D"
    )
    assert path.total_weight == expected


def test_dijkstra_default_mode_comes_from_config(late_shortcut, as_provider, monkeypatch):
    adjacency, weights = late_shortcut
    neighbors = as_provider(adjacency)

    def weight(u, v):
        return weights[(u, v)]

    assert dijkstra_shortest_path(neighbors, "A", "D", weight).total_weight == 11.0

    monkeypatch.setattr(SEARCH_CONFIG, "dijkstra_mode", DijkstraMode.RELAX)
    assert dijkstra_shortest_path(neighbors, "A", "D", weight).total_weight == 3.0


def test_dijkstra_invalid_mode_string(weighted_diamond, as_provider):
    adjacency, weights = weighted_diamond
    with pytest.raises(ValueError, match="Invalid dijkstra mode"):
        dijkstra_shortest_path(
            as_provider(adjacency), 1, 4, lambda u, v: weights[(u, v)], mode="fast"
        )


@pytest.mark.parametrize("mode", list(DijkstraMode))
def test_dijkstra_modes_agree_when_discovery_order_is_optimal(mode, as_provider):
    # Tree-shaped graph: every vertex has a single route, so both modes are exact.
    adjacency = {"s": ["a", "b"], "a": ["c", "d"], "b": ["e"], "d": ["t"], "e": ["t2"]}
    weights = {
        ("s", "a"): 2.0,
        ("s", "b"): 1.0,
        ("a", "c"): 1.0,
        ("a", "d"): 4.0,
        ("b", "e"): 3.0,
        ("d", "t"): 0.5,
        ("e", "t2"): 2.0,
    }
    g = to_weighted_digraph(adjacency, weights)
    neighbors = as_provider(adjacency)
    for target in ("c", "t", "t2"):
        path = dijkstra_shortest_path(
            neighbors, "s", target, lambda u, v: weights[(u, v)], mode=mode
        )
        assert path.total_weight == nx.dijkstra_path_length(g, "s", target)
        assert list(path.vertices) == nx.dijkstra_path(g, "s", target)


def test_dijkstra_relax_matches_networkx_on_grid(grid, as_provider):
    def weight(u, v):
        # heavier edges in the middle rows
        return 1.0 + 3.0 * (u[0] in (1, 2) and v[0] in (1, 2))

    g = nx.DiGraph()
    for u, vs in grid.items():
        for v in vs:
            g.add_edge(u, v, weight=weight(u, v))

    path = dijkstra_shortest_path(as_provider(grid), (1, 0), (2, 3), weight, mode="relax")
    assert path.total_weight == nx.dijkstra_path_length(g, (1, 0), (2, 3))


def test_dijkstra_total_weight_round_trip(late_shortcut, as_provider):
    adjacency, weights = late_shortcut

    def weight(u, v):
        return weights[(u, v)]

    for mode in DijkstraMode:
        path = dijkstra_shortest_path(as_provider(adjacency), "A", "D", weight, mode)
        assert path.recalculate_total_weight(weight).total_weight == path.total_weight


def test_dijkstra_calls_weight_for_every_neighbor(weighted_diamond, as_provider):
    adjacency, weights = weighted_diamond
    calls = []

    def weight(u, v):
        calls.append((u, v))
        return weights[(u, v)]

    dijkstra_shortest_path(as_provider(adjacency), 1, 4, weight)
    # 1 and 2 are expanded before 4 is selected; 3 (weight 5) never is.
    assert sorted(calls) == [(1, 2), (1, 3), (2, 4)]


def test_dijkstra_weight_error_propagates(weighted_diamond, as_provider):
    adjacency, _ = weighted_diamond

    def weight(u, v):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        dijkstra_shortest_path(as_provider(adjacency), 1, 4, weight)


def test_spanning_tree_selection_and_route():
    tree = SpanningTree("s")
    root = tree.pop_nearest()
    assert root == SpanningTreeNode("s", None, 0.0, False)
    root.finalized = True

    tree.set("a", "s", 5.0)
    tree.set("b", "s", 2.0)
    tree.set("a", "b", 3.0)  # improved route supersedes the queued 5.0 entry

    first = tree.pop_nearest()
    assert first.vertex == "b"
    first.finalized = True
    second = tree.pop_nearest()
    assert (second.vertex, second.weight_sum_to, second.parent) == ("a", 3.0, "b")
    second.finalized = True
    assert tree.pop_nearest() is None

    assert tree.route_to("a") == ["s", "b", "a"]
    assert len(tree) == 3 and "a" in tree and "z" not in tree
