"""Matched stretches of two fingerprints and their timing."""

from __future__ import annotations

from dataclasses import dataclass

from audioprint.configuration import FingerprinterConfiguration

DEFAULT_MATCH_THRESHOLD = 10.0


@dataclass
class Segment:
    """An aligned run of items at ``pos1`` and ``pos2`` with an error score."""

    pos1: int
    pos2: int
    duration: int
    score: float
    left_score: float | None = None
    right_score: float | None = None

    def __post_init__(self) -> None:
        if self.left_score is None:
            self.left_score = self.score
        if self.right_score is None:
            self.right_score = self.score

    def public_score(self) -> int:
        """Return the score scaled by 100 and rounded."""
        return int(self.score * 100 + 0.5)

    def merged(self, other: Segment) -> Segment:
        """Join with the segment that directly follows this one."""
        if self.pos1 + self.duration != other.pos1 or self.pos2 + self.duration != other.pos2:
            raise ValueError("segments are not adjacent")
        new_duration = self.duration + other.duration
        new_score = (self.score * self.duration + other.score * other.duration) / new_duration
        return Segment(self.pos1, self.pos2, new_duration, new_score, self.score, other.score)


def hash_time(config: FingerprinterConfiguration, i: int) -> float:
    """Return the start time in seconds of fingerprint item ``i``."""
    return config.item_duration_in_seconds() * i


def hash_duration(config: FingerprinterConfiguration, i: int) -> float:
    """Return the audio length in seconds needed to produce item ``i``."""
    return hash_time(config, i) + config.delay_in_seconds()