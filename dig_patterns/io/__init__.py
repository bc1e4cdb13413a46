"""Tabular result schemas and ranking."""

from dig_patterns.io.schemas import (
    METRIC_COLUMNS,
    RANKABLE_COLUMNS,
    RESULTS_SCHEMA,
    TOTALS_COLUMNS,
    rank_indices,
    rank_results,
    results_to_table,
)

__all__ = [
    "METRIC_COLUMNS",
    "RANKABLE_COLUMNS",
    "RESULTS_SCHEMA",
    "TOTALS_COLUMNS",
    "rank_indices",
    "rank_results",
    "results_to_table",
]
