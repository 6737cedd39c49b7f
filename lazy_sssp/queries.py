"""Bounded queries built on top of the lazy search.

Each helper pulls only as many paths as it needs to answer.
"""
import itertools
from typing import Any, Callable, List, Optional

from .dijkstra import NeighborProvider, shortest_paths_from
from .exceptions import InvalidArgumentError
from .pathstore import Path

NodePredicate = Callable[[Any], bool]


def nearest(
    start,
    find_neighbors: NeighborProvider,
    k: int,
    predicate: Optional[NodePredicate] = None,
) -> List[Path]:
    """Returns the shortest paths to the `k` nodes closest to `start` whose
    destination satisfies `predicate` (every node when no predicate is given).

    Fewer than `k` paths are returned when the reachable graph runs out.
    """
    if k < 0:
        raise InvalidArgumentError(f"k cannot be negative: {k}")
    paths = shortest_paths_from(start, find_neighbors)
    if predicate is not None:
        paths = (path for path in paths if predicate(path.to))
    return list(itertools.islice(paths, k))


def within(
    start,
    find_neighbors: NeighborProvider,
    max_distance: float,
    predicate: Optional[NodePredicate] = None,
) -> List[Path]:
    """Returns the shortest paths to every node at most `max_distance` away.

    The search stops at the first path beyond `max_distance`, so nodes
    further out are never expanded.
    """
    if not max_distance >= 0:
        raise InvalidArgumentError(f"max_distance cannot be negative: {max_distance}")
    paths = itertools.takewhile(
        lambda path: path.distance <= max_distance,
        shortest_paths_from(start, find_neighbors),
    )
    if predicate is None:
        return list(paths)
    return [path for path in paths if predicate(path.to)]


def path_to(start, find_neighbors: NeighborProvider, target) -> Optional[Path]:
    """Returns the shortest path from `start` to `target`, or None if `target`
    can't be reached.

    Only an unreachable target forces the whole reachable graph to be explored.
    """
    if target is None:
        raise InvalidArgumentError("target node must not be None")
    for path in shortest_paths_from(start, find_neighbors):
        if path.to == target:
            return path
    return None
