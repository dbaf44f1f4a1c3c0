"""Numeric helpers shared by the fingerprinting pipeline."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

import numpy as np

_GRAY_CODES = (0, 1, 3, 2)


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves going away from zero."""
    if x >= 0.0:
        return math.floor(x + 0.5)
    return math.ceil(x - 0.5)


def prepare_hamming_window(size: int, scale: float = 1.0) -> np.ndarray:
    """Return a Hamming window of ``size`` points multiplied by ``scale``."""
    if size < 2:
        raise ValueError("a Hamming window needs at least two points")
    positions = np.arange(size, dtype=np.float64)
    return scale * (0.54 - 0.46 * np.cos(positions * 2.0 * math.pi / (size - 1)))


def apply_window(samples: Sequence[float], window: Sequence[float]) -> np.ndarray:
    """Multiply ``samples`` element-wise by the leading part of ``window``."""
    values = np.asarray(samples, dtype=np.float64)
    weights = np.asarray(window, dtype=np.float64)
    if values.size > weights.size:
        raise ValueError("more samples than window points")
    return values * weights[: values.size]


def euclidean_norm(values: Iterable[float]) -> float:
    """Return the Euclidean length of ``values``."""
    squares = sum(v * v for v in values)
    return math.sqrt(squares) if squares > 0 else 0.0


def normalize_vector(
    values: Iterable[float],
    norm_func: Callable[[Sequence[float]], float] = euclidean_norm,
    threshold: float = 0.01,
) -> list[float]:
    """Scale ``values`` by their norm; all zeros if the norm is below ``threshold``."""
    items = [float(v) for v in values]
    norm = norm_func(items)
    if norm < threshold:
        return [0.0] * len(items)
    return [v / norm for v in items]


def gray_code(i: int) -> int:
    """Return the two-bit Gray code of a value in the range 0..3."""
    if not 0 <= i < len(_GRAY_CODES):
        raise ValueError(f"gray code input out of range: {i}")
    return _GRAY_CODES[i]


def index_to_freq(i: int, frame_size: int, sample_rate: int) -> float:
    """Return the frequency in Hz of spectrum bin ``i``."""
    return float(i) * sample_rate / frame_size


def freq_to_index(freq: float, frame_size: int, sample_rate: int) -> int:
    """Return the spectrum bin nearest to ``freq`` Hz."""
    return int(round_half_away(frame_size * freq / sample_rate))


def freq_to_bark(f: float) -> float:
    """Convert a frequency in Hz to the Bark scale."""
    z = (26.81 * f) / (1960.0 + f) - 0.53
    if z < 2.0:
        z = z + 0.15 * (2.0 - z)
    elif z > 20.1:
        z = z + 0.22 * (z - 20.1)
    return z


def count_set_bits(v: int) -> int:
    """Return the number of one bits in a non-negative integer."""
    if v < 0:
        raise ValueError("bit counting needs a non-negative integer")
    return bin(v).count("1")


def hamming_distance(a: int, b: int) -> int:
    """Return the number of bit positions in which ``a`` and ``b`` differ."""
    return count_set_bits(a ^ b)