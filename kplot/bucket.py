"""Data sources addressed by integer buckets in a half-open range."""

from __future__ import annotations

from .data import DataType, KData, KPair


class BucketData(KData):
    """One pair per integer in ``[rmin, rmax)``, with x set to that integer."""

    def __init__(self, rmin: int, rmax: int) -> None:
        if rmin < 0 or rmax < rmin:
            raise ValueError(f"invalid bucket range [{rmin}, {rmax})")
        super().__init__(
            (KPair(float(rmin + i), 0.0) for i in range(rmax - rmin)),
            DataType.BUCKET,
        )
        self.rmin = rmin
        self.rmax = rmax

    def _bucket_index(self, value: int) -> int:
        if not self.rmin <= value < self.rmax:
            raise IndexError(
                f"bucket {value} outside [{self.rmin}, {self.rmax})"
            )
        return value - self.rmin

    def set(self, value: int, x: float, y: float) -> None:
        """Replace the pair of bucket ``value``."""
        self._store(self._bucket_index(value), x, y)

    def add(self, value: int, amount: float) -> None:
        """Add ``amount`` to the y of bucket ``value``."""
        index = self._bucket_index(value)
        pair = self[index]
        self._store(index, pair.x, pair.y + amount)