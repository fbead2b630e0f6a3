from __future__ import annotations

"""Error types raised by grid construction and coordinate validation."""

from typing import Tuple


class GridError(ValueError):
    """Base class for recoverable grid errors."""


class InvalidDimensions(GridError):
    """Raised when a grid is constructed with a zero or negative dimension."""

    def __init__(self, rows: int, columns: int) -> None:
        super().__init__(f"grid dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns


class OutOfBounds(GridError):
    """Raised for a coordinate outside the grid's fixed ``(rows, columns)`` domain."""

    def __init__(self, row: int, col: int, shape: Tuple[int, int]) -> None:
        super().__init__(
            f"coordinate ({row}, {col}) outside grid of shape {shape[0]}x{shape[1]}"
        )
        self.row = row
        self.col = col
        self.shape = shape


__all__ = ["GridError", "InvalidDimensions", "OutOfBounds"]
