from __future__ import annotations

"""Matrix-style storage with one slot per coordinate."""

from typing import Any, Iterable, Iterator, Optional, Tuple

import numpy as np

from .coordinate import Coordinate


class DenseBacking:
    """Row-major slot array backed by ``np.ndarray``.

    Slots hold arbitrary Python objects, so a parallel boolean mask records
    which slots are filled. A stored ``None`` is therefore still a value.
    """

    def __init__(self, shape: Tuple[int, int]):
        rows, columns = shape
        self._shape = (rows, columns)
        self._slots = np.empty(rows * columns, dtype=object)
        self._filled = np.zeros(rows * columns, dtype=bool)

    @classmethod
    def from_items(
        cls, shape: Tuple[int, int], items: Iterable[Tuple[Coordinate, Any]]
    ) -> "DenseBacking":
        """Return a fully populated backing holding ``items``."""
        backing = cls(shape)
        for coord, value in items:
            backing.set(coord, value)
        return backing

    # ------------------------------------------------------------------
    def shape(self) -> Tuple[int, int]:
        return self._shape

    def _index(self, coord: Coordinate) -> int:
        return coord.flat_index(self._shape[1])

    def get(self, coord: Coordinate, default: Any | None = None) -> Any:
        idx = self._index(coord)
        if self._filled[idx]:
            return self._slots[idx]
        return default

    def contains(self, coord: Coordinate) -> bool:
        return bool(self._filled[self._index(coord)])

    def set(self, coord: Coordinate, value: Any) -> Optional[Any]:
        """Store ``value`` and return the previous slot content, if any."""
        idx = self._index(coord)
        previous = self._slots[idx] if self._filled[idx] else None
        self._slots[idx] = value
        self._filled[idx] = True
        return previous

    def remove(self, coord: Coordinate) -> Optional[Any]:
        idx = self._index(coord)
        if not self._filled[idx]:
            return None
        previous = self._slots[idx]
        self._slots[idx] = None
        self._filled[idx] = False
        return previous

    def items(self) -> Iterator[Tuple[Coordinate, Any]]:
        """Yield occupied ``(coord, value)`` pairs in row-major order."""
        columns = self._shape[1]
        for idx in np.flatnonzero(self._filled):
            yield Coordinate.from_flat_index(idx, columns), self._slots[idx]

    def occupied_count(self) -> int:
        """Full scan of the occupancy mask."""
        return int(np.count_nonzero(self._filled))

    def __repr__(self) -> str:
        return f"DenseBacking(shape={self._shape}, occupied={self.occupied_count()})"


__all__ = ["DenseBacking"]
