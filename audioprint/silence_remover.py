"""Audio stage that drops leading silence before passing samples on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from audioprint.moving_average import MovingAverage

SILENCE_WINDOW = 55  # 5 ms at 11025 Hz


class AudioConsumer(Protocol):
    """Anything that accepts blocks of 16-bit audio samples."""

    def consume(self, samples: Sequence[int]) -> None: ...


def _as_int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class SilenceRemover:
    """Skips samples until the short-term loudness exceeds a threshold."""

    def __init__(self, consumer: AudioConsumer, threshold: int = 0) -> None:
        self.consumer = consumer
        self.threshold = threshold
        self._start = True
        self._average = MovingAverage(SILENCE_WINDOW)

    def reset(self, sample_rate: int, num_channels: int) -> None:
        """Prepare for a new stream; only mono audio is accepted."""
        if num_channels != 1:
            raise ValueError("expecting a mono audio signal")
        self._start = True

    def consume(self, samples: Sequence[int]) -> None:
        """Pass ``samples`` on, minus any silence at the start of the stream."""
        start_index = 0
        if self._start:
            start_index = len(samples)
            for index, sample in enumerate(samples):
                self._average.add_value(_as_int16(abs(int(sample))))
                if self._average.average() > self.threshold:
                    self._start = False
                    start_index = index
                    break
        remaining = samples[start_index:]
        if len(remaining):
            self.consumer.consume(remaining)

    def flush(self) -> None:
        """Nothing is buffered here; flush the downstream consumer if it can be."""
        downstream_flush = getattr(self.consumer, "flush", None)
        if callable(downstream_flush):
            downstream_flush()