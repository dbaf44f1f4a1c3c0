"""Windowed real FFT producing power spectra."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import numpy as np

from audioprint.utils import apply_window, prepare_hamming_window

INT16_MAX = 32767

FFTFrame = np.ndarray


class FFTFrameConsumer(Protocol):
    """Anything that accepts one power spectrum at a time."""

    def consume(self, frame: FFTFrame) -> None: ...


class FFTLib:
    """Applies a Hamming window to a frame of samples and computes its power spectrum."""

    def __init__(self, frame_size: int) -> None:
        self.frame_size = frame_size
        self._window = prepare_hamming_window(frame_size, 1.0 / INT16_MAX)
        self._input = np.zeros(frame_size, dtype=np.float64)

    def load(self, first: Sequence[int], second: Sequence[int]) -> None:
        """Window two consecutive sample blocks into the input buffer."""
        n1 = len(first)
        n2 = len(second)
        if n1 + n2 > self.frame_size:
            raise ValueError("more samples than the frame size")
        self._input[:n1] = apply_window(first, self._window)
        self._input[n1:n1 + n2] = apply_window(second, self._window[n1:])

    def compute(self) -> FFTFrame:
        """Return the power of bins 0 to frame_size / 2 of the loaded frame."""
        spectrum = np.fft.rfft(self._input)
        return (spectrum.real ** 2 + spectrum.imag ** 2)[: self.frame_size // 2 + 1]