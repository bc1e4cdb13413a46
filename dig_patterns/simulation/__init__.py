"""Simulation engine: padded reveal grid, trimming, and pattern evaluation."""

from dig_patterns.simulation.engine import (
    DIAGONAL_OFFSETS,
    ORTHOGONAL_OFFSETS,
    GridResult,
    evaluate_catalog,
    evaluate_pattern,
    simulate_window,
    trim,
)

__all__ = [
    "DIAGONAL_OFFSETS",
    "GridResult",
    "ORTHOGONAL_OFFSETS",
    "evaluate_catalog",
    "evaluate_pattern",
    "simulate_window",
    "trim",
]
