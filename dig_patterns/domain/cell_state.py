"""Per-cell reveal states and the transition table that orders them.

Precedence is ``DUG > REVEALED > PARTIAL > UNREVEALED``: a write never
downgrades a cell, so the final grid does not depend on the order in which
neighbours are visited.
"""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """Reveal state of one simulated cell. Values are the grid's storage codes."""

    DUG = 0
    REVEALED = 1
    PARTIAL = 2
    UNREVEALED = 3


# target -> states a write of that target is accepted from
TRANSITIONS: dict[CellState, frozenset[CellState]] = {
    CellState.DUG: frozenset(CellState),
    CellState.REVEALED: frozenset(
        {CellState.UNREVEALED, CellState.PARTIAL, CellState.REVEALED}
    ),
    CellState.PARTIAL: frozenset({CellState.UNREVEALED, CellState.PARTIAL}),
    CellState.UNREVEALED: frozenset({CellState.UNREVEALED}),
}


def can_transition(current: CellState, target: CellState) -> bool:
    """Return True when writing *target* over *current* is allowed."""
    return current in TRANSITIONS[target]


def apply_write(current: CellState, target: CellState) -> CellState:
    """Return the state a cell holds after *target* is written to it."""
    return target if can_transition(current, target) else current
