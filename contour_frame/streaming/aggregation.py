"""
Running aggregate statistics over an insert/remove multiset.

Count, sum and sum of squares update in O(1) in both directions. Max and
min cannot: removing the current extreme leaves the new one unknown. The
cached extreme is cleared instead and rebuilt by a scan of the live values
on the next read. The live set is bounded by the context frame, so the
scan stays cheap.
"""

import math
from collections import Counter
from typing import Optional

from ..core.errors import EmptyWindowError


class RunningAggregate:
    """
    Max, min, mean, stdev and count of a multiset of reals.

    Example:
        agg = RunningAggregate()
        for v in [3.0, 7.0, 5.0]:
            agg.insert(v)
        agg.remove(7.0)
        agg.get_max()   # 5.0, rescanned
    """

    def __init__(self):
        self._clear()

    def _clear(self) -> None:
        self._count: int = 0
        self._sum: float = 0.0
        self._sum_sq: float = 0.0
        self._live: Counter = Counter()

        # None means unknown; a fresh aggregate knows its (empty) extremes
        self._max: Optional[float] = float('-inf')
        self._min: Optional[float] = float('inf')

    def reset(self) -> None:
        """Return to the empty state."""
        self._clear()

    def insert(self, value: float) -> None:
        """Add a value."""
        self._count += 1
        self._sum += value
        self._sum_sq += value * value
        self._live[value] += 1

        if self._max is not None and value > self._max:
            self._max = value
        if self._min is not None and value < self._min:
            self._min = value

    def remove(self, value: float) -> None:
        """
        Remove one instance of a previously inserted value.

        Removing the cached max or min invalidates it.
        """
        self._count -= 1
        self._sum -= value
        self._sum_sq -= value * value

        self._live[value] -= 1
        if self._live[value] <= 0:
            del self._live[value]

        # Below two live values the sums are rebuilt exactly
        if self._count <= 1:
            self._sum = math.fsum(self._live.elements())
            self._sum_sq = math.fsum(v * v for v in self._live.elements())

        if self._max is not None and value == self._max:
            self._max = None
        if self._min is not None and value == self._min:
            self._min = None

    def get_max(self) -> float:
        """Maximum live value; -inf for an empty aggregate."""
        if self._max is None:
            max_value = float('-inf')
            for v in self._live:
                max_value = max(v, max_value)
            self.set_max(max_value)
        return self._max

    def get_min(self) -> float:
        """Minimum live value; +inf for an empty aggregate."""
        if self._min is None:
            min_value = float('inf')
            for v in self._live:
                min_value = min(v, min_value)
            self.set_min(min_value)
        return self._min

    def set_max(self, value: float) -> None:
        self._max = value

    def set_min(self, value: float) -> None:
        self._min = value

    def get_mean(self) -> float:
        """Mean of live values. Raises EmptyWindowError when empty."""
        if self._count <= 0:
            raise EmptyWindowError(context={'statistic': 'mean'})
        return self._sum / self._count

    def get_stdev(self) -> float:
        """
        Population standard deviation of live values.

        Raises EmptyWindowError when empty.
        """
        if self._count <= 0:
            raise EmptyWindowError(context={'statistic': 'stdev'})
        mean = self._sum / self._count
        variance = self._sum_sq / self._count - mean * mean
        # Rounding can leave a tiny negative variance
        return math.sqrt(max(0.0, variance))

    def get_size(self) -> int:
        return self._count

    @property
    def max_cached(self) -> bool:
        return self._max is not None

    @property
    def min_cached(self) -> bool:
        return self._min is not None

    def __len__(self) -> int:
        return self._count
