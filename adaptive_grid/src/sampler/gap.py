from __future__ import annotations

"""Max-gap representation policy.

Occupied row indices and column indices are tracked separately. When the
largest distance between two neighbouring occupied rows (or columns) reaches
the threshold, the contents are considered spread out enough for sparse
storage. Both measurements are maintained on insert/remove so the verdict
itself never visits cells.
"""

from bisect import bisect_left
from collections import Counter
from typing import TYPE_CHECKING, Dict, List

from ..representation import Representation, Verdict, verdict_for

if TYPE_CHECKING:
    from ..core.coordinate import Coordinate


class GapMeasurement:
    """Largest gap between neighbouring values of a multiset of indices."""

    def __init__(self) -> None:
        self._counts: Dict[int, int] = {}
        self._values: List[int] = []
        self._gaps: Counter = Counter()

    def add(self, value: int) -> None:
        count = self._counts.get(value, 0)
        self._counts[value] = count + 1
        if count:
            return
        pos = bisect_left(self._values, value)
        lower = self._values[pos - 1] if pos > 0 else None
        higher = self._values[pos] if pos < len(self._values) else None
        if lower is not None and higher is not None:
            self._drop_gap(higher - lower)
        if lower is not None:
            self._gaps[value - lower] += 1
        if higher is not None:
            self._gaps[higher - value] += 1
        self._values.insert(pos, value)

    def discard(self, value: int) -> None:
        count = self._counts.get(value, 0)
        if count == 0:
            return
        if count > 1:
            self._counts[value] = count - 1
            return
        del self._counts[value]
        pos = bisect_left(self._values, value)
        del self._values[pos]
        lower = self._values[pos - 1] if pos > 0 else None
        higher = self._values[pos] if pos < len(self._values) else None
        if lower is not None:
            self._drop_gap(value - lower)
        if higher is not None:
            self._drop_gap(higher - value)
        if lower is not None and higher is not None:
            self._gaps[higher - lower] += 1

    def _drop_gap(self, gap: int) -> None:
        self._gaps[gap] -= 1
        if self._gaps[gap] <= 0:
            del self._gaps[gap]

    @property
    def max_gap(self) -> int:
        return max(self._gaps) if self._gaps else 0

    def __len__(self) -> int:
        return len(self._values)


class MaxGapSampler:
    """Prefer sparse storage while rows or columns are far apart.

    Instances hold per-grid state and must not be shared between grids.
    """

    def __init__(self, max_gap_threshold: int = 5) -> None:
        max_gap_threshold = int(max_gap_threshold)
        if max_gap_threshold < 1:
            raise ValueError(f"max_gap_threshold must be >= 1, got {max_gap_threshold}")
        self.max_gap_threshold = max_gap_threshold
        self.rows = GapMeasurement()
        self.cols = GapMeasurement()

    def record_insert(self, coord: "Coordinate") -> None:
        self.rows.add(coord.row)
        self.cols.add(coord.col)

    def record_remove(self, coord: "Coordinate") -> None:
        self.rows.discard(coord.row)
        self.cols.discard(coord.col)

    def max_gap(self) -> int:
        return max(self.rows.max_gap, self.cols.max_gap)

    def verdict(self, current: Representation, occupied: int, capacity: int) -> Verdict:
        if self.max_gap() >= self.max_gap_threshold:
            return verdict_for(current, Representation.SPARSE)
        return verdict_for(current, Representation.DENSE)

    def __repr__(self) -> str:
        return f"MaxGapSampler(max_gap_threshold={self.max_gap_threshold})"


__all__ = ["GapMeasurement", "MaxGapSampler"]
