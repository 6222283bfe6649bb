"""Fixed-size data sources filled by the caller."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from .data import DataType, KData, KPair, PairLike, as_pair


class ArrayData(KData):
    """A fixed number of pairs, each addressed by its position."""

    def __init__(self, pairs: Iterable[PairLike]) -> None:
        super().__init__(pairs, DataType.ARRAY)

    @classmethod
    def of_size(cls, size: int) -> "ArrayData":
        """Create ``size`` pairs whose x is their index and y is zero."""
        if size < 0:
            raise ValueError("array size must not be negative")
        return cls(KPair(float(i), 0.0) for i in range(size))

    def fill_y(self, values: Sequence[float]) -> None:
        """Set every pair's y from ``values``, keeping its x."""
        if len(values) < len(self):
            raise ValueError(
                f"need {len(self)} values, got {len(values)}"
            )
        for index, (pair, y) in enumerate(zip(self.pairs, values)):
            self._store(index, pair.x, y)

    def fill(self, func: Callable[[int], PairLike]) -> None:
        """Set every pair from ``func(index)``, which returns an (x, y) pair."""
        for index in range(len(self)):
            pair = as_pair(func(index))
            self._store(index, pair.x, pair.y)

    def add(self, index: int, value: float) -> None:
        """Add ``value`` to the y of the pair at ``index``."""
        self._check_index(index)
        pair = self[index]
        self._store(index, pair.x, pair.y + value)

    def set(self, index: int, x: float, y: float) -> None:
        """Replace the pair at ``index``."""
        self._store(index, x, y)