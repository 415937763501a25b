"""Configuration for wrench-closure ray evaluation."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass

DEFAULT_TOLERANCE = 1e-8


@dataclass
class WrenchClosureConfig:
    """Constants fixed for the lifetime of an evaluator.

    ``min_ray_percentage`` is the minimum length, as a percentage of the ray
    range, of a feasible interval for it to be reported. ``tolerance`` is used
    for coefficient trimming, sign decisions and interval adjacency.
    """

    min_ray_percentage: float = 0.0
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        self.min_ray_percentage = float(self.min_ray_percentage)
        self.tolerance = float(self.tolerance)
        if not 0.0 <= self.min_ray_percentage <= 100.0:
            raise ValueError(
                f"min_ray_percentage must lie in [0, 100] (got {self.min_ray_percentage})"
            )
        if not math.isfinite(self.tolerance) or self.tolerance <= 0.0:
            raise ValueError(f"tolerance must be a positive finite number (got {self.tolerance})")


_DEFAULT_CONFIG = WrenchClosureConfig()


def get_default_config() -> WrenchClosureConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: WrenchClosureConfig) -> None:
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = copy.deepcopy(config)


__all__ = [
    "DEFAULT_TOLERANCE",
    "WrenchClosureConfig",
    "get_default_config",
    "set_default_config",
]
