from __future__ import annotations

"""Map-style storage holding only occupied coordinates."""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .coordinate import Coordinate


class SparseBacking:
    """Coordinate to value mapping; a missing key means an empty cell."""

    def __init__(self, shape: Tuple[int, int]):
        self._shape = shape
        self._cells: Dict[Coordinate, Any] = {}

    @classmethod
    def from_items(
        cls, shape: Tuple[int, int], items: Iterable[Tuple[Coordinate, Any]]
    ) -> "SparseBacking":
        backing = cls(shape)
        for coord, value in items:
            backing._cells[coord] = value
        return backing

    def shape(self) -> Tuple[int, int]:
        return self._shape

    def get(self, coord: Coordinate, default: Any | None = None) -> Any:
        return self._cells.get(coord, default)

    def contains(self, coord: Coordinate) -> bool:
        return coord in self._cells

    def set(self, coord: Coordinate, value: Any) -> Optional[Any]:
        previous = self._cells.get(coord)
        self._cells[coord] = value
        return previous

    def remove(self, coord: Coordinate) -> Optional[Any]:
        return self._cells.pop(coord, None)

    def items(self) -> Iterator[Tuple[Coordinate, Any]]:
        """Yield ``(coord, value)`` pairs in insertion order."""
        for coord, value in self._cells.items():
            yield coord, value

    def occupied_count(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"SparseBacking(shape={self._shape}, occupied={len(self._cells)})"


__all__ = ["SparseBacking"]
