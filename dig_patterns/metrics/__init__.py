"""Metric reductions over trimmed reveal grids."""

from dig_patterns.metrics.reveal import (
    RevealMetrics,
    RevealTotals,
    compute_metrics,
    count_states,
    round_metrics,
)

__all__ = [
    "RevealMetrics",
    "RevealTotals",
    "compute_metrics",
    "count_states",
    "round_metrics",
]
