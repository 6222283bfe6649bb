"""Data sources whose contents are copied wholesale from another source."""

from __future__ import annotations

from .data import DataType, KData, KPair


class BufferData(KData):
    """A resizable source holding a copy of another source's pairs."""

    def __init__(self, hint: int = 0) -> None:
        if hint < 0:
            raise ValueError("buffer size hint must not be negative")
        super().__init__((KPair() for _ in range(hint)), DataType.BUFFER)

    def copy_from(self, source: KData) -> None:
        """Resize to the size of ``source`` and copy all of its pairs."""
        new_pairs = list(source)
        if not self._deps:
            self._pairs = new_pairs
            return
        self._pairs = [KPair() for _ in new_pairs]
        for index, pair in enumerate(new_pairs):
            self._store(index, pair.x, pair.y)