"""Dijkstra's shortest path algorithm as a lazy, incrementally-computed iterator.

Rather than traversing the whole graph up front, the search finalizes one node
each time the caller asks for the next result. That supports queries that would
otherwise need a full traversal (or a copy of the algorithm tweaked per use
case), e.g. the three nearest sushi restaurants::

    sushi = itertools.islice(
        (p.to for p in shortest_paths_from(here, locations_around) if is_sushi(p.to)),
        3,
    )

or every gas station within 5 miles::

    stations = [
        p.to
        for p in itertools.takewhile(
            lambda p: p.distance <= 5, shortest_paths_from(here, locations_around)
        )
        if is_gas_station(p.to)
    ]
"""
import enum
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Set, Tuple, Union

from .exceptions import InvalidArgumentError, NegativeDistanceError
from .frontier import Frontier
from .logging import get_logger
from .pathstore import Path, PathStore

logger = get_logger(__name__)

NeighborProvider = Callable[[Any], Union[Iterable[Tuple[Any, float]], Mapping]]


class SearchState(enum.Enum):
    READY = "ready"
    FINALIZING = "finalizing"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class IncrementalShortestPathSearch:
    """Single-pass iterator over the shortest paths from a starting node.

    Paths come out in non-decreasing order of distance. The first one is the
    zero-distance path to the starting node. Each call to `next` finalizes
    exactly one node and calls `find_neighbors` exactly once for it, so taking
    the first k paths never costs more than k neighbor lookups.

    The iterator can't be restarted: its frontier, visited set and best-known
    distances are consumed as it runs. Start a new search instead.
    """

    def __init__(self, start, find_neighbors: NeighborProvider):
        if start is None:
            raise InvalidArgumentError("start node must not be None")
        if find_neighbors is None or not callable(find_neighbors):
            raise InvalidArgumentError(
                f"find_neighbors must be callable, got {find_neighbors!r}"
            )

        self._find_neighbors = find_neighbors
        self._store = PathStore()
        self._frontier = Frontier()
        # finalized nodes
        self._done: Set[Any] = set()
        # lowest distance discovered so far for nodes not yet finalized
        self._seen: Dict[Any, float] = {}

        root = self._store.root(start)
        self._seen[start] = 0.0
        self._frontier.push(0.0, root)

        self._state = SearchState.READY
        self._expansions = 0
        logger.debug("Starting shortest path search from %r", start)

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def expansions(self) -> int:
        """Number of times the neighbor function has been called."""
        return self._expansions

    @property
    def finalized(self) -> int:
        """Number of paths produced so far."""
        return len(self._done)

    def __iter__(self):
        return self

    def __next__(self) -> Path:
        if self._state in (SearchState.EXHAUSTED, SearchState.FAILED):
            raise StopIteration

        while self._frontier:
            distance, handle = self._frontier.pop()
            node = self._store.node(handle)
            if node in self._done:
                # superseded by a shorter path that was finalized earlier
                logger.debug("Skipping stale entry for %r at %s", node, distance)
                continue

            self._done.add(node)
            self._seen.pop(node, None)
            self._state = SearchState.FINALIZING
            try:
                self._expand(node, handle, distance)
            except BaseException:
                self._state = SearchState.FAILED
                raise
            self._state = SearchState.READY

            logger.debug("Finalized %r at distance %s", node, distance)
            return Path(self._store, handle)

        self._state = SearchState.EXHAUSTED
        logger.debug(
            "Search exhausted after finalizing %d nodes", len(self._done)
        )
        raise StopIteration

    def _expand(self, node, handle: int, distance: float):
        self._expansions += 1
        neighbors = self._find_neighbors(node)
        if isinstance(neighbors, Mapping):
            neighbors = neighbors.items()

        # drain every neighbor before the node's path is handed out
        for neighbor, weight in neighbors:
            if neighbor is None:
                raise InvalidArgumentError(
                    f"find_neighbors({node!r}) returned a None neighbor"
                )
            # `not >=` rejects NaN along with negative weights
            if not weight >= 0:
                logger.warning(
                    "Rejecting edge %r -> %r with distance %s", node, neighbor, weight
                )
                raise NegativeDistanceError(node, neighbor, weight)
            if neighbor in self._done:
                continue

            # relax, replacing the best-known path only on a strictly
            # shorter distance
            candidate = distance + weight
            known = self._seen.get(neighbor)
            if known is None or candidate < known:
                self._seen[neighbor] = candidate
                shorter = self._store.extend(handle, neighbor, weight)
                self._frontier.push(candidate, shorter)


def shortest_paths_from(start, find_neighbors: NeighborProvider) -> IncrementalShortestPathSearch:
    """Returns a lazy iterator of shortest paths starting from `start`.

    `find_neighbors` is called on the fly with a finalized node and returns
    that node's direct neighbors paired with their (non-negative) distances
    from it, either as an iterable of ``(neighbor, distance)`` pairs or as a
    mapping of neighbor to distance.

    `start` corresponds to the first path produced, with a distance of 0,
    followed by the next closest node, and so on.

    Args:
        start: the starting node. Must be hashable and not None.
        find_neighbors: callable returning the weighted neighbors of a node.

    Raises:
        InvalidArgumentError: if `start` is None or `find_neighbors` is not
            callable.
    """
    return IncrementalShortestPathSearch(start, find_neighbors)
