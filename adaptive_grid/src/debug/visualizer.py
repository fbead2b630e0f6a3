from __future__ import annotations

"""Text rendering and comparison helpers for debugging grids."""

from typing import List

from adaptive_grid.src.core.grid import AdaptiveGrid


def render_grid(grid: AdaptiveGrid, empty: str = ".") -> str:
    """Return one line per row with cell values separated by spaces."""
    rows, cols = grid.shape()
    lines: List[str] = []
    for r in range(rows):
        cells = []
        for c in range(cols):
            cells.append(str(grid.get(r, c)) if (r, c) in grid else empty)
        lines.append(" ".join(cells))
    return "\n".join(lines)


def occupancy_report(grid: AdaptiveGrid) -> str:
    rows, cols = grid.shape()
    return "\n".join(
        [
            f"Shape: {rows}x{cols}",
            f"Representation: {grid.representation().value}",
            f"Occupied: {len(grid)}/{grid.capacity()}",
            f"Density: {grid.density():.2f}",
            f"Conversions: {grid.conversions}",
        ]
    )


def grid_diff_report(left: AdaptiveGrid, right: AdaptiveGrid) -> str:
    """Return a human-readable report of mismatches between ``left`` and ``right``.

    Each differing cell is listed with its coordinates and both values; a
    summary of total errors and match ratio is appended. Cells outside one of
    the grids count as empty on that side.
    """

    report_lines: List[str] = []

    shape_left = left.shape()
    shape_right = right.shape()
    if shape_left != shape_right:
        report_lines.append(f"Shape mismatch: left {shape_left}, right {shape_right}")

    h = max(shape_left[0], shape_right[0])
    w = max(shape_left[1], shape_right[1])

    def _describe(grid: AdaptiveGrid, r: int, c: int) -> str:
        if (r, c) not in grid:
            return "empty"
        return f"value {grid.get(r, c)!r}"

    errors = 0
    for r in range(h):
        for c in range(w):
            a = _describe(left, r, c)
            b = _describe(right, r, c)
            if a == b:
                continue
            report_lines.append(f"Mismatch at ({r},{c}): left {a}, right {b}")
            errors += 1

    total_cells = h * w
    match_ratio = (total_cells - errors) / total_cells if total_cells else 1.0
    report_lines.append(f"Total errors: {errors}")
    report_lines.append(f"Match ratio: {match_ratio:.2f}")

    return "\n".join(report_lines)


__all__ = ["render_grid", "occupancy_report", "grid_diff_report"]
