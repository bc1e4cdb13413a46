"""Reveal metrics: per-state totals and the effort/coverage/efficiency ratios."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from dig_patterns.config.constants import METRIC_PRECISION, PARTIAL_REVEAL_WEIGHT
from dig_patterns.domain.cell_state import CellState
from dig_patterns.domain.errors import DegenerateMetricError


@dataclass(frozen=True)
class RevealTotals:
    """Cell counts per state over a trimmed grid."""

    total: int
    dug: int
    revealed: int
    unrevealed: int
    partial: int

    @property
    def weighted_reveal(self) -> float:
        """Exposed area with partial reveals counted at a quarter cell."""
        return self.revealed + self.partial * PARTIAL_REVEAL_WEIGHT


@dataclass(frozen=True)
class RevealMetrics:
    """Derived ratios describing how much digging yields how much exposure."""

    effort: float
    coverage: float
    efficiency: float


def count_states(state: np.ndarray) -> RevealTotals:
    """Count cells of each state in *state*."""
    return RevealTotals(
        total=int(state.size),
        dug=int(np.count_nonzero(state == CellState.DUG)),
        revealed=int(np.count_nonzero(state == CellState.REVEALED)),
        unrevealed=int(np.count_nonzero(state == CellState.UNREVEALED)),
        partial=int(np.count_nonzero(state == CellState.PARTIAL)),
    )


def compute_metrics(totals: RevealTotals) -> RevealMetrics:
    """Compute effort, coverage and efficiency from *totals*.

    Raises :exc:`DegenerateMetricError` when the grid is empty or when nothing
    is revealed, e.g. for a pattern that digs every cell.
    """
    if totals.total == 0:
        raise DegenerateMetricError("cannot compute metrics over an empty grid")
    weighted = totals.weighted_reveal
    if weighted == 0:
        raise DegenerateMetricError(
            "efficiency is undefined: no cells were revealed or partially revealed"
        )
    return RevealMetrics(
        effort=totals.dug / totals.total,
        coverage=weighted / totals.total,
        efficiency=totals.dug / weighted,
    )


def round_metrics(metrics: RevealMetrics, precision: int = METRIC_PRECISION) -> RevealMetrics:
    """Round every ratio to *precision* decimal places for display."""
    return RevealMetrics(
        effort=round(metrics.effort, precision),
        coverage=round(metrics.coverage, precision),
        efficiency=round(metrics.efficiency, precision),
    )
