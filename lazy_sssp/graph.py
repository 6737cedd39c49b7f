"""Adapters for searching networkx graphs lazily."""
from typing import Any, Callable, Dict, List, Optional, Tuple

import networkx as nx

from .config import GRAPH_CONFIG
from .exceptions import NodeNotFoundError, NoPathError
from .queries import path_to


def neighbors_from_graph(
    graph: nx.Graph,
    weight_key: Optional[str] = None,
    default_weight: Optional[float] = None,
) -> Callable[[Any], Dict[Any, float]]:
    """Builds a neighbor function over the edges of a networkx graph

    Out-edges are followed for directed graphs. Parallel edges of a multigraph
    collapse to the lightest one.

    Args:
        graph (nx.Graph): any networkx graph
        weight_key (str): edge attribute holding the weight
        default_weight (float): weight of edges missing `weight_key`

    Returns:
        callable: node -> {neighbor: weight}
    """
    if weight_key is None:
        weight_key = GRAPH_CONFIG.weight_key
    if default_weight is None:
        default_weight = GRAPH_CONFIG.default_weight

    def find_neighbors(node) -> Dict[Any, float]:
        neighbors: Dict[Any, float] = {}
        for (_, v, w) in graph.edges(node, data=weight_key, default=default_weight):
            if v not in neighbors or w < neighbors[v]:
                neighbors[v] = w
        return neighbors

    return find_neighbors


def shortest_path(
    graph: nx.Graph, src, dest, weight_key: Optional[str] = None
) -> Tuple[float, List[Any]]:
    """Returns the distance and node list of the shortest path from src to dest

    The search stops as soon as `dest` is finalized.
    """
    for node in (src, dest):
        if node not in graph:
            raise NodeNotFoundError(f"Node {node!r} is not in the graph")

    path = path_to(src, neighbors_from_graph(graph, weight_key), dest)
    if path is None:
        raise NoPathError(f"Node {dest!r} is not reachable from {src!r}")
    return path.distance, [node for node, _ in path.nodes()]
