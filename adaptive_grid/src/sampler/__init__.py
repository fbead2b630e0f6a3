"""Policies deciding when a grid should switch storage strategy."""

from .occupancy import OccupancySampler
from .gap import GapMeasurement, MaxGapSampler
from .factory import Sampler, make_sampler

__all__ = [
    "OccupancySampler",
    "GapMeasurement",
    "MaxGapSampler",
    "Sampler",
    "make_sampler",
]
