"""Feature stage that scales chroma vectors to unit length."""

from __future__ import annotations

from collections.abc import Sequence

from audioprint.image import FeatureVectorConsumer
from audioprint.utils import euclidean_norm, normalize_vector


class ChromaNormalizer:
    """Normalizes each feature vector and forwards it."""

    def __init__(self, consumer: FeatureVectorConsumer) -> None:
        self.consumer = consumer
        self.vectors_processed = 0

    def reset(self) -> None:
        """Start a new stream by clearing the count of processed vectors."""
        self.vectors_processed = 0

    def consume(self, features: Sequence[float]) -> None:
        """Normalize ``features`` by Euclidean norm and pass them on."""
        self.vectors_processed += 1
        self.consumer.consume(normalize_vector(features, euclidean_norm, 0.01))