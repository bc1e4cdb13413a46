"""Configuration layer: constants and typed config dataclasses."""

from dig_patterns.config.constants import (
    DIG_MARKER,
    METRIC_PRECISION,
    NO_DIG_MARKER,
    PADDING,
    PARTIAL_REVEAL_WEIGHT,
    SIMULATION_SIZE,
)
from dig_patterns.config.types import SimulationConfig

__all__ = [
    "DIG_MARKER",
    "METRIC_PRECISION",
    "NO_DIG_MARKER",
    "PADDING",
    "PARTIAL_REVEAL_WEIGHT",
    "SIMULATION_SIZE",
    "SimulationConfig",
]
