"""Core grid data structures."""

from adaptive_grid.src.representation import Representation, Verdict

from .coordinate import Coordinate
from .errors import GridError, InvalidDimensions, OutOfBounds
from .dense import DenseBacking
from .sparse import SparseBacking
from .grid import AdaptiveGrid

__all__ = [
    "AdaptiveGrid",
    "Coordinate",
    "DenseBacking",
    "SparseBacking",
    "Representation",
    "Verdict",
    "GridError",
    "InvalidDimensions",
    "OutOfBounds",
]
