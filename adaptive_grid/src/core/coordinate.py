from __future__ import annotations

"""Validated ``(row, col)`` positions bound to a fixed grid shape."""

from dataclasses import dataclass
from operator import index as op_index
from typing import Any, Tuple

from .errors import OutOfBounds


def _as_index(value: Any, name: str) -> int:
    try:
        return op_index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


@dataclass(frozen=True, order=True)
class Coordinate:
    """Position of a cell. Ordering is row-major."""

    row: int
    col: int

    @classmethod
    def checked(cls, row: Any, col: Any, shape: Tuple[int, int]) -> "Coordinate":
        """Return ``Coordinate(row, col)`` or raise :class:`OutOfBounds` for ``shape``."""
        r = _as_index(row, "row")
        c = _as_index(col, "col")
        rows, columns = shape
        if r < 0 or c < 0 or r >= rows or c >= columns:
            raise OutOfBounds(r, c, shape)
        return cls(r, c)

    def flat_index(self, columns: int) -> int:
        """Return the row-major slot index of this coordinate."""
        return self.row * columns + self.col

    @classmethod
    def from_flat_index(cls, index: int, columns: int) -> "Coordinate":
        row, col = divmod(int(index), columns)
        return cls(row, col)

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.col


__all__ = ["Coordinate"]
