"""Domain layer: patterns, stencil sampling, cell states, and the catalog."""

from dig_patterns.domain.catalog import PATTERN_CATALOG, find_pattern
from dig_patterns.domain.cell_state import (
    TRANSITIONS,
    CellState,
    apply_write,
    can_transition,
)
from dig_patterns.domain.errors import DegenerateMetricError, InvalidPatternError
from dig_patterns.domain.pattern import CellKind, Pattern, cell_kind_at, validate_pattern

__all__ = [
    "CellKind",
    "CellState",
    "DegenerateMetricError",
    "InvalidPatternError",
    "PATTERN_CATALOG",
    "Pattern",
    "TRANSITIONS",
    "apply_write",
    "can_transition",
    "cell_kind_at",
    "find_pattern",
    "validate_pattern",
]
