"""Mapping of filter responses to two-bit values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Quantizer:
    """Three ascending thresholds splitting the real line into four bins."""

    t0: float = 0.0
    t1: float = 0.0
    t2: float = 0.0

    def __post_init__(self) -> None:
        if not (self.t0 <= self.t1 <= self.t2):
            raise ValueError("quantizer thresholds must be in ascending order")

    def quantize(self, value: float) -> int:
        """Return the bin, 0 to 3, that ``value`` falls into."""
        if value < self.t1:
            return 0 if value < self.t0 else 1
        return 2 if value < self.t2 else 3

    def __str__(self) -> str:
        return f"Quantizer({self.t0:g}, {self.t1:g}, {self.t2:g})"