import logging

import numpy as np
import pytest

from adaptive_grid.src.core import (
    AdaptiveGrid,
    Coordinate,
    DenseBacking,
    GridError,
    InvalidDimensions,
    OutOfBounds,
    Representation,
)
from adaptive_grid.src.sampler import MaxGapSampler, OccupancySampler
from adaptive_grid.src.utils import config_loader


def _grid(rows, cols, representation="sparse", low=0.25, high=0.5):
    return AdaptiveGrid(
        rows,
        cols,
        representation=representation,
        sampler=OccupancySampler(low, high),
    )


def test_zero_dimension_rejected():
    with pytest.raises(InvalidDimensions):
        AdaptiveGrid(0, 5)
    with pytest.raises(InvalidDimensions):
        AdaptiveGrid(5, 0)
    with pytest.raises(GridError):
        AdaptiveGrid(-1, 3)


def test_non_integer_dimensions_rejected():
    with pytest.raises(TypeError):
        AdaptiveGrid(2.5, 3)
    with pytest.raises(TypeError):
        AdaptiveGrid(3, 2.9)
    assert AdaptiveGrid(np.int64(2), 3).shape() == (2, 3)


def test_out_of_bounds_is_rejected_without_side_effects():
    grid = _grid(10, 10)
    grid.set(0, 0, "a")
    with pytest.raises(OutOfBounds):
        grid.set(10, 0, "v")
    with pytest.raises(OutOfBounds):
        grid.get(-1, 0)
    with pytest.raises(OutOfBounds):
        grid.remove(0, 10)
    assert len(grid) == 1
    assert grid.conversions == 0


def test_default_representation_from_config(monkeypatch):
    assert AdaptiveGrid(3, 3).representation() is Representation.SPARSE
    monkeypatch.setattr(config_loader, "INITIAL_REPRESENTATION", "dense")
    assert AdaptiveGrid(3, 3).representation() is Representation.DENSE


def test_set_get_remove():
    grid = _grid(11, 11)
    assert grid.set(0, 0, "data 1") is None
    assert grid.set(10, 10, "data 2") is None
    assert grid.get(0, 0) == "data 1"
    assert grid.get(10, 10) == "data 2"
    assert grid.get(5, 5) is None
    assert grid.get(5, 5, "missing") == "missing"

    assert grid.remove(0, 0) == "data 1"
    assert grid.get(0, 0) is None
    assert grid.remove(0, 0) is None
    assert grid.remove(10, 10) == "data 2"
    assert len(grid) == 0


def test_overwrite_keeps_occupancy():
    grid = _grid(2, 2)
    grid.set(1, 1, "a")
    assert grid.set(1, 1, "b") == "a"
    assert len(grid) == 1
    assert grid.get(1, 1) == "b"


def test_none_value_is_distinct_from_absence():
    grid = _grid(3, 3)
    grid.set(1, 2, None)
    assert (1, 2) in grid
    assert (2, 1) not in grid
    assert len(grid) == 1
    assert list(grid) == [(1, 2, None)]


def test_contains_handles_invalid_keys():
    grid = _grid(3, 3)
    assert (5, 5) not in grid
    assert (1,) not in grid
    assert ("a", 0) not in grid


def test_contains_requires_pairs():
    grid = _grid(3, 3)
    grid.set(1, 1, "v")
    assert (1, 1) in grid
    assert (1, 1, 99) not in grid
    assert [1, 1] in grid
    assert 11 not in grid


def test_sparse_to_dense_scenario():
    grid = _grid(4, 4)
    assert grid.representation() is Representation.SPARSE
    cells = [(r, c) for r in range(4) for c in range(4)][:9]
    for i, (r, c) in enumerate(cells[:8]):
        grid.set(r, c, i)
        assert grid.representation() is Representation.SPARSE
    r, c = cells[8]
    assert grid.set(r, c, 8) is None
    assert grid.representation() is Representation.DENSE
    assert grid.get(r, c) == 8

    for r, c in cells[:3]:
        grid.remove(r, c)
    assert len(grid) == 6
    assert grid.representation() is Representation.DENSE


def test_dense_start_converts_on_first_write():
    grid = _grid(10, 10, representation=Representation.DENSE)
    assert grid.representation() is Representation.DENSE
    grid.get(0, 0)
    assert grid.representation() is Representation.DENSE
    grid.set(3, 3, "x")
    assert grid.representation() is Representation.SPARSE
    assert grid.conversions == 1
    assert grid.get(3, 3) == "x"


def test_only_occupancy_changes_consult_sampler():
    grid = _grid(4, 4)
    for i in range(9):
        grid.set(i // 4, i % 4, i)
    for i in range(4, 9):
        grid.remove(i // 4, i % 4)
    assert len(grid) == 4
    assert grid.representation() is Representation.DENSE

    grid.sampler.to_sparse_below = 0.45
    grid.set(0, 0, "overwrite")
    grid.remove(3, 3)
    grid.get(0, 1)
    assert grid.representation() is Representation.DENSE

    grid.remove(0, 0)
    assert grid.representation() is Representation.SPARSE


def test_no_thrash_inside_band():
    grid = _grid(10, 10)
    for i in range(30):
        grid.set(i // 10, i % 10, i)
    assert len(grid) == 30
    start = grid.conversions
    for _ in range(20):
        grid.set(9, 9, "x")
        grid.remove(9, 9)
    assert grid.conversions == start
    assert grid.representation() is Representation.SPARSE


def test_no_thrash_inside_band_when_dense():
    grid = _grid(10, 10)
    for i in range(60):
        grid.set(i // 10, i % 10, i)
    assert grid.representation() is Representation.DENSE
    for i in range(30, 60):
        grid.remove(i // 10, i % 10)
    assert len(grid) == 30
    assert grid.representation() is Representation.DENSE
    start = grid.conversions
    for _ in range(20):
        grid.set(9, 9, "x")
        grid.remove(9, 9)
    assert grid.conversions == start


def test_dense_iteration_is_row_major():
    grid = _grid(3, 3, low=0.0, high=1.0, representation="dense")
    for r, c in [(2, 2), (0, 1), (1, 0)]:
        grid.set(r, c, (r, c))
    assert grid.representation() is Representation.DENSE
    assert [(r, c) for r, c, _ in grid.iter()] == [(0, 1), (1, 0), (2, 2)]
    assert list(grid.coords()) == [Coordinate(0, 1), Coordinate(1, 0), Coordinate(2, 2)]


def test_mutation_during_iteration_raises():
    for representation in ("dense", "sparse"):
        grid = _grid(3, 3, low=0.0, high=1.0, representation=representation)
        grid.set(0, 0, 1)
        grid.set(1, 1, 2)
        it = grid.iter()
        next(it)
        grid.set(2, 2, 3)
        with pytest.raises(RuntimeError):
            list(it)


def test_conversion_invalidates_iterators():
    grid = _grid(4, 4)
    for i in range(8):
        grid.set(i // 4, i % 4, i)
    it = iter(grid)
    next(it)
    grid.set(3, 3, "trigger")
    assert grid.representation() is Representation.DENSE
    with pytest.raises(RuntimeError):
        list(it)


def test_failed_conversion_keeps_prior_state(monkeypatch):
    grid = _grid(4, 4)
    for i in range(8):
        grid.set(i // 4, i % 4, i)

    def _boom(cls, shape, items):
        raise MemoryError("no room")

    monkeypatch.setattr(DenseBacking, "from_items", classmethod(_boom))
    with pytest.raises(MemoryError):
        grid.set(3, 3, "x")
    assert grid.representation() is Representation.SPARSE
    assert grid.conversions == 0
    assert len(grid) == 9
    assert grid.get(3, 3) == "x"
    assert sorted(v for _, _, v in grid if v != "x") == list(range(8))


def test_max_gap_policy_converts():
    grid = AdaptiveGrid(11, 11, representation="dense", sampler=MaxGapSampler(5))
    assert not grid.is_sparse()
    grid.set(0, 0, "data 1")
    assert not grid.is_sparse()
    grid.set(10, 10, "data 2")
    assert grid.is_sparse()
    grid.remove(10, 10)
    assert not grid.is_sparse()
    assert grid.get(0, 0) == "data 1"


def test_shape_capacity_density():
    grid = _grid(4, 5)
    grid.set(0, 0, 1)
    grid.set(3, 4, 2)
    assert grid.shape() == (4, 5)
    assert grid.capacity() == 20
    assert grid.density() == pytest.approx(0.1)
    assert "sparse" in repr(grid)


def test_conversion_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="adaptive_grid.src.core.grid")
    grid = _grid(2, 2)
    grid.set(0, 0, 1)
    grid.set(0, 1, 1)
    grid.set(1, 0, 1)
    assert grid.representation() is Representation.DENSE
    assert any("converted grid" in rec.getMessage() for rec in caplog.records)
