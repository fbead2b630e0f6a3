from __future__ import annotations

"""Density based representation policy with a hysteresis band."""

from typing import TYPE_CHECKING

from ..representation import Representation, Verdict

if TYPE_CHECKING:
    from ..core.coordinate import Coordinate


DEFAULT_TO_SPARSE_BELOW = 0.25
DEFAULT_TO_DENSE_ABOVE = 0.5


class OccupancySampler:
    """Decide between dense and sparse storage from the occupancy count.

    The verdict is computed from the exact density ``occupied / capacity``
    maintained by the owning grid, so no cells are visited. Two thresholds are
    used: a dense grid converts once density drops below ``to_sparse_below``
    and a sparse grid converts once density rises above ``to_dense_above``.
    Densities inside the band keep whatever representation is active.
    """

    def __init__(
        self,
        to_sparse_below: float = DEFAULT_TO_SPARSE_BELOW,
        to_dense_above: float = DEFAULT_TO_DENSE_ABOVE,
    ) -> None:
        to_sparse_below = float(to_sparse_below)
        to_dense_above = float(to_dense_above)
        if not 0.0 <= to_sparse_below < to_dense_above <= 1.0:
            raise ValueError(
                "thresholds must satisfy 0 <= to_sparse_below < to_dense_above <= 1, "
                f"got {to_sparse_below} and {to_dense_above}"
            )
        self.to_sparse_below = to_sparse_below
        self.to_dense_above = to_dense_above

    # Occupancy hooks ----------------------------------------------------
    def record_insert(self, coord: "Coordinate") -> None:
        """Called when ``coord`` becomes occupied."""

    def record_remove(self, coord: "Coordinate") -> None:
        """Called when ``coord`` becomes empty."""

    # ------------------------------------------------------------------
    def verdict(self, current: Representation, occupied: int, capacity: int) -> Verdict:
        """Return whether ``current`` should be kept for the given occupancy."""
        density = occupied / capacity if capacity else 0.0
        if current is Representation.DENSE and density < self.to_sparse_below:
            return Verdict.CONVERT_TO_SPARSE
        if current is Representation.SPARSE and density > self.to_dense_above:
            return Verdict.CONVERT_TO_DENSE
        return Verdict.KEEP

    def __repr__(self) -> str:
        return (
            f"OccupancySampler(to_sparse_below={self.to_sparse_below}, "
            f"to_dense_above={self.to_dense_above})"
        )


__all__ = ["OccupancySampler", "DEFAULT_TO_SPARSE_BELOW", "DEFAULT_TO_DENSE_ABOVE"]
