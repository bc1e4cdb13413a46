"""Visualization layer: themes, text formatting, and matplotlib rendering."""

from dig_patterns.viz.render import render_state_grid
from dig_patterns.viz.text import format_state_grid
from dig_patterns.viz.theme import (
    ASCII_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "ASCII_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "format_state_grid",
    "get_theme",
    "render_state_grid",
]
