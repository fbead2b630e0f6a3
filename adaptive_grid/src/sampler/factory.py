from __future__ import annotations

"""Build representation samplers from the runtime configuration."""

from typing import Optional, Union

from adaptive_grid.src.utils import config_loader

from .gap import MaxGapSampler
from .occupancy import OccupancySampler

Sampler = Union[OccupancySampler, MaxGapSampler]


def make_sampler(policy: Optional[str] = None) -> Sampler:
    """Return a new sampler for ``policy`` (defaults to the configured one)."""
    name = (policy or config_loader.SAMPLER_POLICY).strip().lower()
    if name == "density":
        return OccupancySampler(config_loader.TO_SPARSE_BELOW, config_loader.TO_DENSE_ABOVE)
    if name == "max_gap":
        return MaxGapSampler(config_loader.MAX_GAP_THRESHOLD)
    raise ValueError(f"Unknown sampler policy: {policy!r}")


__all__ = ["Sampler", "make_sampler"]
