import itertools
import random

import networkx as nx
import pytest

from lazy_sssp import neighbors_from_graph, shortest_paths_from


@pytest.fixture(scope="session")
def road_network():
    rng = random.Random(7)
    graph = nx.grid_2d_graph(60, 60)
    for u, v in graph.edges:
        graph.edges[u, v]["weight"] = rng.uniform(1, 10)
    return graph


def drain(graph, src):
    for _ in shortest_paths_from(src, neighbors_from_graph(graph)):
        pass


def first(graph, src, k):
    return list(itertools.islice(shortest_paths_from(src, neighbors_from_graph(graph)), k))


@pytest.mark.benchmark
def test_full_traversal(benchmark, road_network):
    benchmark(drain, road_network, (0, 0))


@pytest.mark.benchmark
def test_first_hundred(benchmark, road_network):
    benchmark(first, road_network, (30, 30), 100)


@pytest.mark.benchmark
def test_networkx_dijkstra(benchmark, road_network):
    benchmark(nx.single_source_dijkstra_path_length, road_network, (0, 0))
