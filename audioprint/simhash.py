"""Similarity-preserving 32-bit hash of a fingerprint."""

from __future__ import annotations

from collections.abc import Iterable

_BITS = 32


def simhash(data: Iterable[int]) -> int:
    """Return the 32-bit SimHash of a sequence of 32-bit values."""
    votes = [0] * _BITS
    for value in data:
        for j in range(_BITS):
            votes[j] += 1 if (value >> j) & 1 else -1
    return sum(1 << j for j, vote in enumerate(votes) if vote > 0)