"""Centralized domain constants for pattern evaluation.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

SIMULATION_SIZE = 40
"""Side length of the square core window that metrics are computed over."""

PADDING = 4
"""Width of the border simulated around the core and trimmed afterwards."""

METRIC_PRECISION = 4
"""Decimal places used when rounding metrics for display."""

DIG_MARKER = "x"
"""Pattern character for a cell that is dug."""

NO_DIG_MARKER = "o"
"""Pattern character for a cell that is left alone."""

PARTIAL_REVEAL_WEIGHT = 0.25
"""Fraction of a cell a diagonal (partial) reveal counts for."""
