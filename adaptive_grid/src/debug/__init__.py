from .visualizer import render_grid, occupancy_report, grid_diff_report

__all__ = ["render_grid", "occupancy_report", "grid_diff_report"]
