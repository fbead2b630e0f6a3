from __future__ import annotations

"""Grid container that switches between dense and sparse storage."""

from typing import Any, Iterator, NamedTuple, Optional, Tuple, Union

from adaptive_grid.src.representation import Representation, Verdict
from adaptive_grid.src.sampler.factory import Sampler, make_sampler
from adaptive_grid.src.utils import config_loader
from adaptive_grid.src.utils.logger import get_logger

from .coordinate import Coordinate, _as_index
from .dense import DenseBacking
from .errors import InvalidDimensions, OutOfBounds
from .sparse import SparseBacking

logger = get_logger(__name__)

Backing = Union[DenseBacking, SparseBacking]

_BACKINGS = {
    Representation.DENSE: DenseBacking,
    Representation.SPARSE: SparseBacking,
}


class _Active(NamedTuple):
    """The single live backing together with its tag."""

    kind: Representation
    store: Backing


class AdaptiveGrid:
    """Fixed-size 2D container of arbitrary cell values.

    Storage starts as ``representation`` (the configured default when
    omitted). After every mutation that changes the number of occupied cells
    the ``sampler`` is asked whether the other representation would now be
    better; if so the other backing is rebuilt from the current contents and
    swapped in. Reads never convert, and conversion never changes what
    ``get`` or ``iter`` report.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        *,
        representation: Representation | str | None = None,
        sampler: Optional[Sampler] = None,
    ) -> None:
        rows = _as_index(rows, "rows")
        columns = _as_index(columns, "columns")
        if rows < 1 or columns < 1:
            raise InvalidDimensions(rows, columns)
        self._shape: Tuple[int, int] = (rows, columns)
        kind = Representation.parse(representation or config_loader.INITIAL_REPRESENTATION)
        self._active = _Active(kind, _BACKINGS[kind](self._shape))
        self._sampler = sampler if sampler is not None else make_sampler()
        self._occupied = 0
        self._version = 0
        self.conversions = 0

    # ------------------------------------------------------------------
    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, columns)."""
        return self._shape

    def capacity(self) -> int:
        return self._shape[0] * self._shape[1]

    def density(self) -> float:
        return self._occupied / self.capacity()

    def representation(self) -> Representation:
        return self._active.kind

    def is_sparse(self) -> bool:
        return self._active.kind is Representation.SPARSE

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def __len__(self) -> int:
        return self._occupied

    def __contains__(self, key: Tuple[int, int]) -> bool:
        try:
            row, col = key
            coord = Coordinate.checked(row, col, self._shape)
        except (OutOfBounds, TypeError, ValueError):
            return False
        return self._active.store.contains(coord)

    # Reads ------------------------------------------------------------
    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the value at ``row``, ``col`` or ``default`` when empty."""
        coord = Coordinate.checked(row, col, self._shape)
        return self._active.store.get(coord, default)

    def iter(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield ``(row, col, value)`` for every occupied cell."""
        version = self._version
        for coord, value in self._active.store.items():
            if self._version != version:
                raise RuntimeError("grid changed during iteration")
            yield coord.row, coord.col, value
        if self._version != version:
            raise RuntimeError("grid changed during iteration")

    def __iter__(self) -> Iterator[Tuple[int, int, Any]]:
        return self.iter()

    def coords(self) -> Iterator[Coordinate]:
        """Yield the coordinates of occupied cells."""
        for row, col, _ in self.iter():
            yield Coordinate(row, col)

    # Writes -----------------------------------------------------------
    def set(self, row: int, col: int, value: Any) -> Optional[Any]:
        """Store ``value`` and return the previous value at that cell, if any."""
        coord = Coordinate.checked(row, col, self._shape)
        store = self._active.store
        was_occupied = store.contains(coord)
        previous = store.set(coord, value)
        if not was_occupied:
            self._occupied += 1
            self._version += 1
            self._sampler.record_insert(coord)
            self._rebalance()
        return previous

    def remove(self, row: int, col: int) -> Optional[Any]:
        """Clear the cell and return the removed value, if any."""
        coord = Coordinate.checked(row, col, self._shape)
        store = self._active.store
        if not store.contains(coord):
            return None
        previous = store.remove(coord)
        self._occupied -= 1
        self._version += 1
        self._sampler.record_remove(coord)
        self._rebalance()
        return previous

    # Conversion -------------------------------------------------------
    def _rebalance(self) -> None:
        verdict = self._sampler.verdict(self._active.kind, self._occupied, self.capacity())
        target = verdict.target()
        if verdict is Verdict.KEEP or target is self._active.kind:
            return
        self._convert(target)

    def _convert(self, target: Representation) -> None:
        source = self._active
        try:
            store = _BACKINGS[target].from_items(self._shape, source.store.items())
        except MemoryError:
            logger.warning(
                "conversion %s -> %s failed for grid %s; keeping %s",
                source.kind.value,
                target.value,
                self._shape,
                source.kind.value,
            )
            raise
        self._active = _Active(target, store)
        self._version += 1
        self.conversions += 1
        logger.debug(
            "converted grid %s from %s to %s at %d/%d occupied",
            self._shape,
            source.kind.value,
            target.value,
            self._occupied,
            self.capacity(),
        )

    def __repr__(self) -> str:
        return (
            f"AdaptiveGrid(shape={self._shape}, representation={self._active.kind.value}, "
            f"occupied={self._occupied})"
        )


__all__ = ["AdaptiveGrid", "Backing"]
