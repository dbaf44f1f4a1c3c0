"""Running integer average over a fixed window."""

from __future__ import annotations


class MovingAverage:
    """Average of the last ``size`` integer values, truncated to an integer."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("window size must be positive")
        self._buffer = [0] * size
        self._size = size
        self._offset = 0
        self._sum = 0
        self._count = 0

    def add_value(self, x: int) -> None:
        """Push ``x`` into the window, dropping the oldest value when full."""
        self._sum += x - self._buffer[self._offset]
        if self._count < self._size:
            self._count += 1
        self._buffer[self._offset] = x
        self._offset = (self._offset + 1) % self._size

    def average(self) -> int:
        """Return the window average truncated toward zero; 0 when empty."""
        if not self._count:
            return 0
        quotient = abs(self._sum) // self._count
        return quotient if self._sum >= 0 else -quotient