from typing import Any, Iterator, List, Optional, Tuple


class PathStore:
    """Append-only arena of path records.

    Each record is a (node, predecessor, distance) triple addressed by an
    integer handle, its index in the arena. The predecessor is the handle of
    the shorter path this one extends, or None for the start of a search.
    Records are never modified once appended, so any number of paths can
    share a prefix without copying it.
    """

    def __init__(self):
        self._nodes: List[Any] = []
        self._predecessors: List[Optional[int]] = []
        self._distances: List[float] = []

    def __len__(self):
        return len(self._nodes)

    def root(self, node) -> int:
        return self._append(node, None, 0.0)

    def extend(self, handle: int, node, weight: float) -> int:
        """Appends a record for `node` one edge of `weight` past `handle`

        Args:
            handle (int): handle of the path being extended
            node: the node reached by the new edge
            weight (float): weight of the new edge

        Returns:
            int: handle of the new record
        """
        return self._append(node, handle, self._distances[handle] + weight)

    def node(self, handle: int):
        return self._nodes[handle]

    def distance(self, handle: int) -> float:
        return self._distances[handle]

    def predecessor(self, handle: int) -> Optional[int]:
        return self._predecessors[handle]

    def walk(self, handle: int) -> Iterator[int]:
        """Yields handles from `handle` back to the start of its path"""
        current: Optional[int] = handle
        while current is not None:
            yield current
            current = self._predecessors[current]

    def _append(self, node, predecessor: Optional[int], distance: float) -> int:
        self._nodes.append(node)
        self._predecessors.append(predecessor)
        self._distances.append(distance)
        return len(self._nodes) - 1


class Path:
    """The path from the starting node of a search to a destination node.

    A Path is an immutable view over one record of a PathStore. Extending a
    path appends a new record to the same store and returns a new Path; the
    original is left untouched.
    """

    __slots__ = ("_store", "_handle")

    def __init__(self, store: PathStore, handle: int):
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_handle", handle)

    @classmethod
    def start(cls, node, store: Optional[PathStore] = None) -> "Path":
        """Returns the zero-distance path consisting of `node` alone"""
        if store is None:
            store = PathStore()
        return cls(store, store.root(node))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def to(self):
        """The last node of this path."""
        return self._store.node(self._handle)

    @property
    def distance(self) -> float:
        """Distance from the starting node to `to`.

        Zero for the first path produced by a search, in which case `to` is
        the starting node.
        """
        return self._store.distance(self._handle)

    @property
    def handle(self) -> int:
        return self._handle

    @property
    def store(self) -> PathStore:
        return self._store

    def nodes(self) -> List[Tuple[Any, float]]:
        """Returns every node from the starting node along this path, paired
        with the cumulative distance from the starting node up to that node.

        The list is rebuilt by walking predecessors on every call.
        """
        store = self._store
        pairs = [(store.node(h), store.distance(h)) for h in store.walk(self._handle)]
        pairs.reverse()
        return pairs

    def extend_to(self, node, weight: float) -> "Path":
        return Path(self._store, self._store.extend(self._handle, node, weight))

    def __len__(self):
        return sum(1 for _ in self._store.walk(self._handle))

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        if self._store is other._store and self._handle == other._handle:
            return True
        return self.nodes() == other.nodes()

    def __hash__(self):
        return hash((self.to, self.distance))

    def __str__(self):
        return "->".join(str(node) for node, _ in self.nodes())

    def __repr__(self):
        return f"Path({self}, distance={self.distance})"
