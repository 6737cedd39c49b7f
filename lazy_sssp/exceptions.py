"""Exceptions raised by the lazy shortest path search."""


class ShortestPathError(Exception):
    """Base class for all errors raised by lazy_sssp."""


class InvalidArgumentError(ShortestPathError, ValueError):
    """Raised when the search is handed an argument it cannot work with.

    Examples:
        * a ``None`` start node or neighbor function
        * a ``None`` neighbor returned by the neighbor function
        * a negative bound passed to a query helper
    """


class NegativeDistanceError(InvalidArgumentError):
    """Raised when an explored edge has a negative (or NaN) weight."""

    def __init__(self, node, neighbor, distance):
        super().__init__(
            f"Distance cannot be negative: {distance} (edge {node!r} -> {neighbor!r})"
        )
        self.node = node
        self.neighbor = neighbor
        self.distance = distance


class NodeNotFoundError(ShortestPathError, KeyError):
    """Raised when a node is missing from a graph handed to the networkx adapter."""

    def __str__(self) -> str:
        # KeyError repr()s its message, undo that
        return str(self.args[0]) if self.args else ""


class NoPathError(ShortestPathError):
    """Raised when the destination is not reachable from the source."""
