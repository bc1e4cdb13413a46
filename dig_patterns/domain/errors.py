"""Error types raised while validating patterns and reducing metrics."""

from __future__ import annotations


class InvalidPatternError(ValueError):
    """Pattern is empty, ragged, uses unknown markers, or has no dig cells."""

    def __init__(self, style: str, reason: str) -> None:
        super().__init__(f"invalid pattern {style!r}: {reason}")
        self.style = style
        self.reason = reason


class DegenerateMetricError(ValueError):
    """A derived ratio has a zero denominator."""
