"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_POLICIES = {"density", "max_gap"}
_REPRESENTATIONS = {"dense", "sparse"}


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the grid configuration, or ``{}`` when the file is absent."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


def _choice(value: Any, allowed: set, name: str) -> str:
    text = str(value).strip().lower()
    if text not in allowed:
        raise ValueError(f"Unknown {name}: {value!r} (expected one of {sorted(allowed)})")
    return text


GRID_CONFIG: Dict[str, Any] = load_grid_config()
_SAMPLER_CONF = GRID_CONFIG.get("sampler", {})
SAMPLER_POLICY: str = _choice(_SAMPLER_CONF.get("policy", "density"), _POLICIES, "sampler policy")
TO_SPARSE_BELOW: float = float(_SAMPLER_CONF.get("to_sparse_below", 0.25))
TO_DENSE_ABOVE: float = float(_SAMPLER_CONF.get("to_dense_above", 0.5))
MAX_GAP_THRESHOLD: int = int(_SAMPLER_CONF.get("max_gap_threshold", 5))
INITIAL_REPRESENTATION: str = _choice(
    GRID_CONFIG.get("initial_representation", "sparse"), _REPRESENTATIONS, "representation"
)
LOG_LEVEL: int = logging.getLevelName(str(GRID_CONFIG.get("log_level", "INFO")).upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO


def set_density_thresholds(to_sparse_below: float, to_dense_above: float) -> None:
    """Override the density hysteresis band used by new samplers."""
    global TO_SPARSE_BELOW, TO_DENSE_ABOVE
    if not 0.0 <= to_sparse_below < to_dense_above <= 1.0:
        raise ValueError("thresholds must satisfy 0 <= to_sparse_below < to_dense_above <= 1")
    TO_SPARSE_BELOW = float(to_sparse_below)
    TO_DENSE_ABOVE = float(to_dense_above)
    conf = GRID_CONFIG.setdefault("sampler", {})
    conf["to_sparse_below"] = TO_SPARSE_BELOW
    conf["to_dense_above"] = TO_DENSE_ABOVE


def set_max_gap_threshold(value: int) -> None:
    """Override the gap that makes the max-gap policy prefer sparse storage."""
    global MAX_GAP_THRESHOLD
    if int(value) < 1:
        raise ValueError("max_gap_threshold must be >= 1")
    MAX_GAP_THRESHOLD = int(value)
    GRID_CONFIG.setdefault("sampler", {})["max_gap_threshold"] = MAX_GAP_THRESHOLD


def set_sampler_policy(value: str) -> None:
    """Select the policy used by :func:`make_sampler` when none is given."""
    global SAMPLER_POLICY
    SAMPLER_POLICY = _choice(value, _POLICIES, "sampler policy")
    GRID_CONFIG.setdefault("sampler", {})["policy"] = SAMPLER_POLICY


def set_initial_representation(value: str) -> None:
    """Override the representation new grids start in."""
    global INITIAL_REPRESENTATION
    INITIAL_REPRESENTATION = _choice(value, _REPRESENTATIONS, "representation")
    GRID_CONFIG["initial_representation"] = INITIAL_REPRESENTATION


def set_log_level(value: int | str) -> None:
    """Override the level applied by :func:`get_logger`."""
    global LOG_LEVEL
    level = logging.getLevelName(value.upper()) if isinstance(value, str) else int(value)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    LOG_LEVEL = level
    GRID_CONFIG["log_level"] = logging.getLevelName(level)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "sampler_policy": SAMPLER_POLICY,
        "to_sparse_below": TO_SPARSE_BELOW,
        "to_dense_above": TO_DENSE_ABOVE,
        "max_gap_threshold": MAX_GAP_THRESHOLD,
        "initial_representation": INITIAL_REPRESENTATION,
        "log_level": logging.getLevelName(LOG_LEVEL),
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
