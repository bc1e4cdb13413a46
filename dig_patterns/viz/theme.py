"""Visualization theme presets for reveal-grid renderers.

A theme groups the per-state glyphs used by the text formatter and the
per-state colours used by the matplotlib renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dig_patterns.domain.cell_state import CellState


def _default_glyphs() -> dict[CellState, str]:
    return {
        CellState.DUG: "\u2b1c\ufe0f",
        CellState.REVEALED: "\U0001f7e9",
        CellState.PARTIAL: "\U0001f7e7",
        CellState.UNREVEALED: "\U0001f7e5",
    }


def _default_colors() -> dict[CellState, str]:
    return {
        CellState.DUG: "#F5F5F5",
        CellState.REVEALED: "#4CAF50",
        CellState.PARTIAL: "#FF9800",
        CellState.UNREVEALED: "#E53935",
    }


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    glyphs: dict[CellState, str] = field(default_factory=_default_glyphs)
    colors: dict[CellState, str] = field(default_factory=_default_colors)
    grid_line_color: str = "#CCCCCC"
    state_labels: dict[CellState, str] = field(
        default_factory=lambda: {
            CellState.DUG: "Dug",
            CellState.REVEALED: "Revealed",
            CellState.PARTIAL: "Partial",
            CellState.UNREVEALED: "Unrevealed",
        }
    )


DEFAULT_THEME = Theme()

ASCII_THEME = Theme(
    glyphs={
        CellState.DUG: "#",
        CellState.REVEALED: "+",
        CellState.PARTIAL: ".",
        CellState.UNREVEALED: " ",
    },
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "ascii": ASCII_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; must be one of {valid}") from None
