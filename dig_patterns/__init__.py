"""Tile-digging pattern evaluation: stencil sampling, reveal simulation, metrics."""

from dig_patterns.domain.catalog import PATTERN_CATALOG
from dig_patterns.domain.pattern import Pattern
from dig_patterns.simulation.engine import GridResult, evaluate_catalog, evaluate_pattern

__all__ = [
    "GridResult",
    "PATTERN_CATALOG",
    "Pattern",
    "evaluate_catalog",
    "evaluate_pattern",
]
