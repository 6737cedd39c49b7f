from .dijkstra import IncrementalShortestPathSearch, SearchState, shortest_paths_from
from .exceptions import (
    InvalidArgumentError,
    NegativeDistanceError,
    NodeNotFoundError,
    NoPathError,
    ShortestPathError,
)
from .graph import neighbors_from_graph, shortest_path
from .pathstore import Path, PathStore
from .queries import nearest, path_to, within

__all__ = [
    "IncrementalShortestPathSearch",
    "InvalidArgumentError",
    "NegativeDistanceError",
    "NoPathError",
    "NodeNotFoundError",
    "Path",
    "PathStore",
    "SearchState",
    "ShortestPathError",
    "nearest",
    "neighbors_from_graph",
    "path_to",
    "shortest_path",
    "shortest_paths_from",
    "within",
]
