import heapq
import itertools
from typing import List, Tuple


class Frontier:
    """Min-priority queue of path handles keyed by distance.

    There is no decrease-key and no removal. When a shorter path to a node is
    found the search simply pushes another entry, and the older one becomes
    stale. Stale entries are discarded by the caller at pop time by checking
    whether their node has already been finalized.
    https://docs.python.org/3/library/heapq.html#priority-queue-implementation-notes
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, int]] = []
        # a counter keeps entries with equal distances comparable without
        # ever comparing handles (or the nodes behind them)
        self._counter = itertools.count()

    def push(self, distance: float, handle: int):
        heapq.heappush(self._heap, (distance, next(self._counter), handle))

    def pop(self) -> Tuple[float, int]:
        distance, _, handle = heapq.heappop(self._heap)
        return distance, handle

    def peek(self) -> float:
        """Returns the smallest distance in the queue without removing it"""
        return self._heap[0][0]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
