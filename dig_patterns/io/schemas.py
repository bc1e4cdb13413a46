"""Arrow schema and table builders for per-pattern evaluation results.

The table is the tabular counterpart of the JSON summary printed by the CLI
and is used to rank patterns by a metric column.
"""

from __future__ import annotations

from typing import Sequence

import pyarrow as pa
import pyarrow.compute as pc

from dig_patterns.simulation.engine import GridResult

TOTALS_COLUMNS = ("total", "dug", "revealed", "unrevealed", "partial")
METRIC_COLUMNS = ("effort", "coverage", "efficiency")

RANKABLE_COLUMNS = METRIC_COLUMNS + TOTALS_COLUMNS
"""Columns accepted by :func:`rank_results`."""

RESULTS_SCHEMA = pa.schema(
    [("style", pa.string())]
    + [(name, pa.int64()) for name in TOTALS_COLUMNS]
    + [(name, pa.float64()) for name in METRIC_COLUMNS]
)


def results_to_table(results: Sequence[GridResult], precision: int | None = None) -> pa.Table:
    """Build a :data:`RESULTS_SCHEMA` table, one row per result.

    Metrics are raw floats unless *precision* is given.
    """
    rows = []
    for result in results:
        metrics = result.computed if precision is None else result.rounded(precision)
        rows.append(
            {
                "style": result.style,
                "total": result.totals.total,
                "dug": result.totals.dug,
                "revealed": result.totals.revealed,
                "unrevealed": result.totals.unrevealed,
                "partial": result.totals.partial,
                "effort": metrics.effort,
                "coverage": metrics.coverage,
                "efficiency": metrics.efficiency,
            }
        )
    return pa.Table.from_pylist(rows, schema=RESULTS_SCHEMA)


def rank_indices(table: pa.Table, by: str, descending: bool = True) -> list[int]:
    """Return row indices of *table* ordered on column *by*.

    The sort is stable, so ties keep their catalog order.
    """
    if by not in RANKABLE_COLUMNS:
        valid = ", ".join(RANKABLE_COLUMNS)
        raise ValueError(f"sort column must be one of {valid}")
    order = "descending" if descending else "ascending"
    indices = pc.sort_indices(table, sort_keys=[(by, order)])
    return [int(index) for index in indices.to_pylist()]


def rank_results(table: pa.Table, by: str, descending: bool = True) -> pa.Table:
    """Return *table* sorted on column *by*."""
    return table.take(rank_indices(table, by, descending))
