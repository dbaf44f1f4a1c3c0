"""A filter paired with the quantizer that reads its response."""

from __future__ import annotations

from dataclasses import dataclass, field

from audioprint.filters import Filter, _AreaSource
from audioprint.quantizer import Quantizer


@dataclass
class Classifier:
    """Turns an image region into a two-bit value."""

    filter: Filter = field(default_factory=Filter)
    quantizer: Quantizer = field(default_factory=Quantizer)

    def classify(self, image: _AreaSource, offset: int) -> int:
        """Apply the filter at ``offset`` and quantize the response."""
        return self.quantizer.quantize(self.filter.apply(image, offset))

    def __str__(self) -> str:
        return f"Classifier({self.filter}, {self.quantizer})"