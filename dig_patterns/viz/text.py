"""Plain-text rendering of trimmed reveal grids."""

from __future__ import annotations

import numpy as np

from dig_patterns.domain.cell_state import CellState
from dig_patterns.viz.theme import DEFAULT_THEME, Theme


def format_state_grid(state: np.ndarray, theme: Theme = DEFAULT_THEME) -> str:
    """Return one line per grid row, one glyph per cell, in grid order."""
    lines = []
    for row in state:
        lines.append("".join(theme.glyphs[CellState(int(code))] for code in row))
    return "\n".join(lines)
