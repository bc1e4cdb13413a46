"""Matplotlib rendering of trimmed reveal grids."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from dig_patterns.domain.cell_state import CellState  # noqa: E402
from dig_patterns.simulation.engine import GridResult  # noqa: E402
from dig_patterns.viz.theme import DEFAULT_THEME, Theme  # noqa: E402


def _state_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap indexed by :class:`CellState` code."""
    states = sorted(CellState)
    cmap = ListedColormap([theme.colors[state] for state in states])
    bounds = [int(states[0]) - 0.5] + [int(state) + 0.5 for state in states]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def _build_state_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.colors[state], edgecolor="gray", label=theme.state_labels[state])
        for state in sorted(CellState)
    ]


def _draw_cell_grid(ax: plt.Axes, grid: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """imshow with subtle grid lines on *ax*."""
    cmap, norm = _state_cmap(theme)
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_state_grid(
    result: GridResult,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    title: bool = True,
    dpi: int = 150,
) -> Path:
    """Write a PNG of *result*'s trimmed grid to *output_path* and return the path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 6.6))
    _draw_cell_grid(ax, np.asarray(result.state), theme)
    if title:
        ax.set_title(
            f"{result.style}\n"
            f"effort={result.computed.effort:.4f}  "
            f"coverage={result.computed.coverage:.4f}  "
            f"efficiency={result.computed.efficiency:.4f}",
            fontsize=9,
        )
    ax.legend(
        handles=_build_state_legend_handles(theme),
        loc="upper center",
        bbox_to_anchor=(0.5, -0.02),
        ncol=4,
        fontsize=8,
        frameon=False,
    )
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
    return output_path
