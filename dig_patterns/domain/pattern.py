"""Tileable dig/no-dig stencils and the sampler that interprets them.

A pattern is repeated infinitely in both axes. ``x`` indexes rows and ``y``
indexes columns, matching the row-major walk of the simulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from dig_patterns.config.constants import DIG_MARKER, NO_DIG_MARKER
from dig_patterns.domain.errors import InvalidPatternError

_MARKERS = frozenset({DIG_MARKER, NO_DIG_MARKER})


class CellKind(Enum):
    """What the stencil says to do with one cell."""

    DIG = "dig"
    NO_DIG = "no_dig"


@dataclass(frozen=True)
class Pattern:
    """A labelled digging stencil."""

    style: str
    rows: tuple[str, ...]

    @classmethod
    def from_rows(cls, style: str, rows: Sequence[str]) -> Pattern:
        """Build and validate a pattern from any sequence of row strings."""
        pattern = cls(style=style, rows=tuple(rows))
        validate_pattern(pattern)
        return pattern

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Column period; the first row defines it."""
        return len(self.rows[0])

    @property
    def dig_cell_count(self) -> int:
        return sum(row.count(DIG_MARKER) for row in self.rows)


def validate_pattern(pattern: Pattern) -> None:
    """Raise :exc:`InvalidPatternError` unless *pattern* is simulatable."""
    if not pattern.rows:
        raise InvalidPatternError(pattern.style, "pattern has no rows")
    width = len(pattern.rows[0])
    if width == 0:
        raise InvalidPatternError(pattern.style, "pattern rows are empty")
    for index, row in enumerate(pattern.rows):
        if len(row) != width:
            raise InvalidPatternError(
                pattern.style,
                f"row {index} has length {len(row)}, expected {width}",
            )
        unknown = set(row) - _MARKERS
        if unknown:
            raise InvalidPatternError(
                pattern.style,
                f"row {index} contains unknown markers {sorted(unknown)}",
            )
    if pattern.dig_cell_count == 0:
        raise InvalidPatternError(pattern.style, "pattern has no dig cells")


def cell_kind_at(pattern: Pattern, x: int, y: int) -> CellKind:
    """Return the stencil cell at ``(x, y)`` with the pattern tiled in both axes.

    Negative coordinates wrap the same way as positive ones.
    """
    row = pattern.rows[x % pattern.row_count]
    marker = row[y % pattern.column_count]
    return CellKind.DIG if marker == DIG_MARKER else CellKind.NO_DIG
