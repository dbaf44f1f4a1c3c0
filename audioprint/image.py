"""Row-by-row feature image and the consumer that fills it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol


class FeatureVectorConsumer(Protocol):
    """Anything that accepts one feature vector at a time."""

    def consume(self, features: Sequence[float]) -> None: ...


class Image:
    """A growable grid of floats with a fixed number of columns."""

    def __init__(self, columns: int, rows: int = 0, data: Iterable[float] | None = None) -> None:
        if columns < 1:
            raise ValueError("an image needs at least one column")
        self.num_columns = columns
        if data is not None:
            values = [float(v) for v in data]
            if len(values) % columns:
                raise ValueError("data length is not a multiple of the column count")
            self._rows = [values[start:start + columns] for start in range(0, len(values), columns)]
        else:
            self._rows = [[0.0] * columns for _ in range(rows)]

    def num_rows(self) -> int:
        """Return the number of rows."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self, row: Sequence[float]) -> None:
        """Append a row, padding it with zeros up to the column count."""
        values = [float(v) for v in row]
        if len(values) > self.num_columns:
            raise ValueError("row has more values than the image has columns")
        values.extend([0.0] * (self.num_columns - len(values)))
        self._rows.append(values)

    def row(self, i: int) -> list[float]:
        """Return row ``i``; changes to it change the image."""
        if not 0 <= i < len(self._rows):
            raise IndexError(f"row index out of range: {i}")
        return self._rows[i]

    def __getitem__(self, i: int) -> list[float]:
        return self.row(i)


class ImageBuilder:
    """Feature consumer that stores every vector as a new image row."""

    def __init__(self, image: Image | None = None) -> None:
        self.image = image

    def reset(self, image: Image | None) -> None:
        """Direct further rows into ``image``."""
        self.image = image

    def consume(self, features: Sequence[float]) -> None:
        """Append ``features`` to the image."""
        if self.image is None:
            raise RuntimeError("no image to build into")
        if len(features) != self.image.num_columns:
            raise ValueError("feature vector length does not match the image width")
        self.image.add_row(features)