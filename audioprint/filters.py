"""Rectangular Haar-like filters over an integral image."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import numpy as np

Comparator = Callable[[float, float], float]


class _AreaSource(Protocol):
    def area(self, x1: int, y1: int, x2: int, y2: int) -> float: ...


def subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def subtract_log(a: float, b: float) -> float:
    """Return ``log((1 + a) / (1 + b))``; raise ValueError when undefined."""
    with np.errstate(all="ignore"):
        r = float(np.log(np.float64(1.0 + a) / np.float64(1.0 + b)))
    if r != r:
        raise ValueError(f"log ratio undefined for {a} and {b}")
    return r


def _check(x: int, y: int, w: int, h: int) -> None:
    if x < 0 or y < 0:
        raise ValueError("filter position must not be negative")
    if w < 1 or h < 1:
        raise ValueError("filter width and height must be at least 1")


def filter0(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Whole rectangle against zero."""
    _check(x, y, w, h)
    return cmp(image.area(x, y, x + w, y + h), 0.0)


def filter1(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Upper half of the band against the lower half."""
    _check(x, y, w, h)
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w, y + h)
    b = image.area(x, y, x + w, y + h_2)
    return cmp(a, b)


def filter2(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Later half in time against the earlier half."""
    _check(x, y, w, h)
    w_2 = w // 2
    a = image.area(x + w_2, y, x + w, y + h)
    b = image.area(x, y, x + w_2, y + h)
    return cmp(a, b)


def filter3(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Checkerboard of four quadrants."""
    _check(x, y, w, h)
    w_2 = w // 2
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w_2, y + h) + image.area(x + w_2, y, x + w, y + h_2)
    b = image.area(x, y, x + w_2, y + h_2) + image.area(x + w_2, y + h_2, x + w, y + h)
    return cmp(a, b)


def filter4(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third of the band against the outer thirds."""
    _check(x, y, w, h)
    h_3 = h // 3
    a = image.area(x, y + h_3, x + w, y + 2 * h_3)
    b = image.area(x, y, x + w, y + h_3) + image.area(x, y + 2 * h_3, x + w, y + h)
    return cmp(a, b)


def filter5(image: _AreaSource, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third in time against the outer thirds."""
    _check(x, y, w, h)
    w_3 = w // 3
    a = image.area(x + w_3, y, x + 2 * w_3, y + h)
    b = image.area(x, y, x + w_3, y + h) + image.area(x + 2 * w_3, y, x + w, y + h)
    return cmp(a, b)


_KERNELS = (filter0, filter1, filter2, filter3, filter4, filter5)


@dataclass
class Filter:
    """A filter kind placed at band ``y`` with the given height and width."""

    type: int = 0
    y: int = 0
    height: int = 0
    width: int = 0

    def apply(self, image: _AreaSource, x: int) -> float:
        """Evaluate the filter at time offset ``x``; 0.0 for an unknown kind."""
        if 0 <= self.type < len(_KERNELS):
            kernel = _KERNELS[self.type]
            return kernel(image, x, self.y, self.width, self.height, subtract_log)
        return 0.0

    def __str__(self) -> str:
        return f"Filter({self.type}, {self.y}, {self.height}, {self.width})"