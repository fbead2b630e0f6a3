from adaptive_grid.src.core.grid import AdaptiveGrid
from adaptive_grid.src.debug.visualizer import grid_diff_report, occupancy_report, render_grid
from adaptive_grid.src.sampler.occupancy import OccupancySampler


def test_render_grid():
    grid = AdaptiveGrid(2, 3)
    grid.set(0, 1, 7)
    grid.set(1, 2, "x")
    assert render_grid(grid) == ". 7 .\n. . x"
    assert render_grid(grid, empty="_") == "_ 7 _\n_ _ x"


def test_occupancy_report():
    grid = AdaptiveGrid(2, 2, sampler=OccupancySampler(0.25, 0.5))
    for r, c in [(0, 0), (0, 1), (1, 0)]:
        grid.set(r, c, 1)
    report = occupancy_report(grid)
    assert "Shape: 2x2" in report
    assert "Representation: dense" in report
    assert "Occupied: 3/4" in report
    assert "Density: 0.75" in report
    assert "Conversions: 1" in report


def test_grid_diff_report():
    left = AdaptiveGrid(2, 2)
    right = AdaptiveGrid(2, 3)
    left.set(0, 0, 1)
    right.set(0, 0, 2)
    right.set(1, 2, 3)
    report = grid_diff_report(left, right)
    assert "Shape mismatch" in report
    assert "Mismatch at (0,0): left value 1, right value 2" in report
    assert "Mismatch at (1,2): left empty, right value 3" in report
    assert "Total errors: 2" in report
    assert "Match ratio: 0.67" in report


def test_grid_diff_report_identical():
    left = AdaptiveGrid(2, 2, representation="dense")
    right = AdaptiveGrid(2, 2, representation="sparse")
    for grid in (left, right):
        grid.set(1, 1, "v")
    report = grid_diff_report(left, right)
    assert report.splitlines() == ["Total errors: 0", "Match ratio: 1.00"]
