import networkx as nx
import pytest

from lazy_sssp import (
    NodeNotFoundError,
    NoPathError,
    neighbors_from_graph,
    shortest_path,
    shortest_paths_from,
)

CITIES = """\
City1,City2,7
City1,City3,9
City1,City6,14
City2,City3,10
City2,City4,15
City3,City4,11
City3,City6,2
City4,City5,6
City5,City6,9
"""


@pytest.fixture(scope="session")
def cities():
    return nx.parse_edgelist(
        CITIES.splitlines(), delimiter=",",
        nodetype=str,
        data=(("weight", int),)
    )


@pytest.mark.parametrize(
        "src,dest,expected", [
            ("City1", "City5", (20, ["City1", "City3", "City6", "City5"])),
            ("City1", "City4", (20, ["City1", "City3", "City4"])),
            ("City2", "City6", (12, ["City2", "City3", "City6"])),
            ("City4", "City4", (0, ["City4"])),
        ]
)
def test_shortest_path(cities, src, dest, expected):
    assert shortest_path(cities, src, dest) == expected


@pytest.mark.parametrize("seed", range(5))
def test_matches_networkx(seed):
    graph = nx.connected_watts_strogatz_graph(40, 4, 0.3, seed=seed)
    for i, (u, v) in enumerate(graph.edges):
        graph.edges[u, v]["cost"] = (i * 7 + seed) % 11

    expected = nx.single_source_dijkstra_path_length(graph, 0, weight="cost")
    actual = {
        p.to: p.distance
        for p in shortest_paths_from(0, neighbors_from_graph(graph, weight_key="cost"))
    }

    assert actual == pytest.approx(expected)


def test_directed_edges_followed_forwards():
    graph = nx.DiGraph()
    graph.add_weighted_edges_from([("A", "B", 1), ("C", "A", 1)])

    assert [p.to for p in shortest_paths_from("A", neighbors_from_graph(graph))] == ["A", "B"]


def test_parallel_edges_use_lightest():
    graph = nx.MultiDiGraph()
    graph.add_weighted_edges_from([("A", "B", 5), ("A", "B", 2), ("A", "B", 9)])

    assert neighbors_from_graph(graph)("A") == {"B": 2}
    assert shortest_path(graph, "A", "B") == (2, ["A", "B"])


def test_default_weight():
    graph = nx.path_graph(4)

    assert shortest_path(graph, 0, 3) == (3.0, [0, 1, 2, 3])
    assert shortest_path(graph, 0, 3, weight_key="missing") == (3.0, [0, 1, 2, 3])
    assert neighbors_from_graph(graph, default_weight=2.5)(0) == {1: 2.5}


def test_missing_node(cities):
    with pytest.raises(NodeNotFoundError) as exc_info:
        shortest_path(cities, "City1", "Atlantis")

    assert isinstance(exc_info.value, KeyError)
    assert "Atlantis" in str(exc_info.value)


def test_unreachable(cities):
    cities = cities.copy()
    cities.add_node("Island")

    with pytest.raises(NoPathError):
        shortest_path(cities, "City1", "Island")
