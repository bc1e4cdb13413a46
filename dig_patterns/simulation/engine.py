"""Reveal simulation over a padded window and per-pattern evaluation.

The window is a dense ``(W, W)`` array with ``W = simulation_size + 2 * padding``.
Window index ``(i, j)`` holds core-relative coordinate ``(i - padding, j - padding)``,
so the trimmed core starts at the pattern's origin. Writes that fall outside the
window are dropped; the padding absorbs that truncation before trimming.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np

from dig_patterns.config.types import SimulationConfig
from dig_patterns.domain.cell_state import CellState, apply_write
from dig_patterns.domain.errors import DegenerateMetricError, InvalidPatternError
from dig_patterns.domain.pattern import CellKind, Pattern, cell_kind_at, validate_pattern
from dig_patterns.metrics.reveal import (
    RevealMetrics,
    RevealTotals,
    compute_metrics,
    count_states,
    round_metrics,
)

logger = logging.getLogger(__name__)

ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

GRID_DTYPE = np.uint8


@dataclass(frozen=True)
class GridResult:
    """Outcome of evaluating one pattern."""

    style: str
    state: np.ndarray = field(compare=False, repr=False)  # trimmed, row-major, read-only
    totals: RevealTotals
    computed: RevealMetrics

    def rounded(self, precision: int) -> RevealMetrics:
        return round_metrics(self.computed, precision)

    def to_summary(self, precision: int) -> dict[str, Any]:
        """JSON-ready summary with metrics rounded for display."""
        metrics = self.rounded(precision)
        return {
            "style": self.style,
            "totals": {
                "total": self.totals.total,
                "dug": self.totals.dug,
                "revealed": self.totals.revealed,
                "unrevealed": self.totals.unrevealed,
                "partial": self.totals.partial,
            },
            "computed": {
                "effort": metrics.effort,
                "coverage": metrics.coverage,
                "efficiency": metrics.efficiency,
            },
        }


def _write(grid: np.ndarray, i: int, j: int, target: CellState) -> None:
    """Apply a precedence-checked write, ignoring cells outside the window."""
    size = grid.shape[0]
    if not (0 <= i < size and 0 <= j < size):
        return
    grid[i, j] = apply_write(CellState(int(grid[i, j])), target)


def _dig(grid: np.ndarray, i: int, j: int) -> None:
    """Mark ``(i, j)`` dug and propagate reveals to its eight neighbours."""
    _write(grid, i, j, CellState.DUG)
    for di, dj in ORTHOGONAL_OFFSETS:
        _write(grid, i + di, j + dj, CellState.REVEALED)
    for di, dj in DIAGONAL_OFFSETS:
        _write(grid, i + di, j + dj, CellState.PARTIAL)


def simulate_window(pattern: Pattern, config: SimulationConfig) -> np.ndarray:
    """Dig *pattern* across the padded window and return the untrimmed grid."""
    validate_pattern(pattern)
    size = config.window_size
    offset = config.padding
    grid = np.full((size, size), CellState.UNREVEALED, dtype=GRID_DTYPE)
    for i in range(size):
        for j in range(size):
            if cell_kind_at(pattern, i - offset, j - offset) is CellKind.DIG:
                _dig(grid, i, j)
    return grid


def trim(grid: np.ndarray, padding: int) -> np.ndarray:
    """Drop the *padding*-wide border on all four sides."""
    if padding == 0:
        return grid.copy()
    return grid[padding:-padding, padding:-padding].copy()


def evaluate_pattern(pattern: Pattern, config: SimulationConfig | None = None) -> GridResult:
    """Simulate *pattern*, trim the border, and reduce it to totals and metrics.

    Invalid patterns raise :exc:`InvalidPatternError` before any simulation.
    """
    config = config or SimulationConfig()
    window = simulate_window(pattern, config)
    state = trim(window, config.padding)
    state.setflags(write=False)
    totals = count_states(state)
    computed = compute_metrics(totals)
    logger.debug(
        "evaluated %r: dug=%d revealed=%d partial=%d unrevealed=%d",
        pattern.style,
        totals.dug,
        totals.revealed,
        totals.partial,
        totals.unrevealed,
    )
    return GridResult(style=pattern.style, state=state, totals=totals, computed=computed)


def evaluate_catalog(
    patterns: Iterable[Pattern],
    config: SimulationConfig | None = None,
    skip_invalid: bool = False,
) -> list[GridResult]:
    """Evaluate each pattern independently, preserving catalog order.

    With *skip_invalid*, patterns that fail validation or produce a degenerate
    metric are logged and left out; otherwise the error propagates.
    """
    config = config or SimulationConfig()
    results: list[GridResult] = []
    for pattern in patterns:
        try:
            results.append(evaluate_pattern(pattern, config))
        except (InvalidPatternError, DegenerateMetricError) as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping pattern %r: %s", pattern.style, exc)
    return results
