"""Core data-source model: pairs, source kinds and dependant propagation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Iterator, Union


@dataclass(frozen=True)
class KPair:
    """A single (x, y) point of a data source."""

    x: float = 0.0
    y: float = 0.0


PairLike = Union[KPair, "tuple[float, float]"]

SetFunc = Callable[["KData", int, float, float], None]
"""Called as ``func(dependant, index, x, y)`` when a source pair changes.

It should raise if the dependant cannot accept the update.
"""


class DataType(Enum):
    """The kind of a data source."""

    ARRAY = auto()
    BUCKET = auto()
    BUFFER = auto()
    HIST = auto()
    MEAN = auto()
    STDDEV = auto()
    VECTOR = auto()


def as_pair(value: PairLike) -> KPair:
    """Coerce a KPair or an (x, y) sequence into a KPair."""
    if isinstance(value, KPair):
        return value
    x, y = value
    return KPair(float(x), float(y))


@dataclass(frozen=True)
class _Dependant:
    data: "KData"
    func: SetFunc


class KData:
    """A sequence of pairs that notifies its dependants of every change.

    A source is either modified directly by the caller or is a dependant
    updated from another source through its set function.
    """

    def __init__(self, pairs: Iterable[PairLike], kind: DataType) -> None:
        self._pairs: list[KPair] = [as_pair(p) for p in pairs]
        self._deps: list[_Dependant] = []
        self.kind = DataType(kind)

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> KPair:
        return self._pairs[index]

    def __iter__(self) -> Iterator[KPair]:
        return iter(self._pairs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, size={len(self)})"

    @property
    def pairs(self) -> tuple[KPair, ...]:
        """A snapshot of the current pairs."""
        return tuple(self._pairs)

    @property
    def dependants(self) -> tuple["KData", ...]:
        """The data sources updated from this one."""
        return tuple(dep.data for dep in self._deps)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._pairs):
            raise IndexError(
                f"pair index {index} out of range for {len(self._pairs)} pairs"
            )

    def _store(self, index: int, x: float, y: float) -> None:
        self._check_index(index)
        self._pairs[index] = KPair(float(x), float(y))
        self.run_dependants(index)

    def set(self, index: int, x: float, y: float) -> None:
        """Replace the pair at ``index`` and notify dependants."""
        self._store(index, x, y)

    def add_dependant(self, dependant: "KData", func: SetFunc) -> None:
        """Register ``dependant`` to be updated through ``func`` on changes."""
        if dependant is self:
            raise ValueError("a data source cannot depend on itself")
        self._deps.append(_Dependant(dependant, func))

    def run_dependants(self, index: int) -> None:
        """Propagate the pair at ``index`` to every dependant."""
        self._check_index(index)
        pair = self._pairs[index]
        for dep in self._deps:
            dep.func(dep.data, index, pair.x, pair.y)