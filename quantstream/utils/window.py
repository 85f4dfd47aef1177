"""Fixed-capacity observation window and the statistics computed over it."""

import math
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Self

_LOWEST = -sys.float_info.max
_HIGHEST = sys.float_info.max


class BoundedWindow:
    """FIFO buffer holding at most ``period`` observations.

    Appending to a full window evicts the oldest observation, so
    ``len(window) <= period`` holds after every push.
    """

    __slots__ = ("period", "_values")

    def __init__(self, period: int, values: Iterable[float] = ()) -> None:
        """Create a window.

        Args:
            period: Maximum number of observations retained
            values: Optional initial contents, oldest first
        """
        self.period = period
        self._values: deque[float] = deque(values, maxlen=period)

    def push(self, value: float) -> None:
        """Append ``value``, evicting the oldest observation when over capacity."""
        self._values.append(value)

    def copy(self) -> Self:
        """Return an independent window with the same contents."""
        return type(self)(self.period, self._values)

    @property
    def is_full(self) -> bool:
        return len(self._values) == self.period

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"BoundedWindow(period={self.period}, values={list(self._values)})"

    def mean(self) -> float:
        """Arithmetic mean of the contents, ``0.0`` when empty."""
        if not self._values:
            return 0.0
        return self._sum() / len(self._values)

    def variance(self) -> float:
        """Population variance of the contents, ``NaN`` when empty."""
        count = len(self._values)
        if count == 0:
            return math.nan
        mean = self._sum() / count
        squares = 0.0
        for x in self._values:
            squares += (x - mean) ** 2
        return squares / count

    def standard_deviation(self) -> float:
        """Square root of the population variance."""
        return math.sqrt(self.variance())

    def max(self) -> float:
        """Largest observation, or the lowest finite float when empty."""
        return max(self._values, default=_LOWEST)

    def min(self) -> float:
        """Smallest observation, or the highest finite float when empty."""
        return min(self._values, default=_HIGHEST)

    def max_after_eviction(self, value: float) -> float:
        """Maximum of every observation but the oldest, combined with ``value``."""
        return max(value, max(self._tail(), default=_LOWEST))

    def min_after_eviction(self, value: float) -> float:
        """Minimum of every observation but the oldest, combined with ``value``."""
        return min(value, min(self._tail(), default=_HIGHEST))

    def _sum(self) -> float:
        # left-to-right accumulation; builtin sum() compensates on 3.12+
        total = 0.0
        for x in self._values:
            total += x
        return total

    def _tail(self) -> Iterator[float]:
        values = iter(self._values)
        next(values, None)
        return values
