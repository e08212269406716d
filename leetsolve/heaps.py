"""Questions answered with binary heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until at most one is left.

    Returns the weight of the last stone, or 0 if none remains.
    """
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) >= 2:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, -(heaviest - second))
    return -heap[0] if heap else 0


class KthLargest:
    """Track the k-th largest value of a growing stream of integers."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self.k = k
        self._heap = list(nums)
        heapq.heapify(self._heap)
        while len(self._heap) > k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current k-th largest value (0 if none)."""
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)
        return self._heap[0] if self._heap else 0


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, nearest first.

    Ties are broken by position in ``points``. Raises ValueError if ``k``
    exceeds the number of points.
    """
    if k > len(points):
        raise ValueError("k exceeds the number of points")
    ranked = ((x * x + y * y, index) for index, (x, y, *_) in enumerate(points))
    return [
        [points[index][0], points[index][1]]
        for _, index in heapq.nsmallest(max(k, 0), ranked)
    ]