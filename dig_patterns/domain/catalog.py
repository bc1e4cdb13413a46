"""Reference catalog of digging patterns.

``x`` marks a dug cell and ``o`` an untouched one. Each pattern tiles in both
axes.
"""

from __future__ import annotations

from dig_patterns.domain.pattern import Pattern

PATTERN_CATALOG: tuple[Pattern, ...] = (
    Pattern("straight, 2 spaces", ("xoo",)),
    Pattern("straight, 3 spaces", ("xooo",)),
    Pattern(
        "simple sawtooth",
        (
            "oxoo",
            "xxoo",
            "oxoo",
        ),
    ),
    Pattern(
        "double-tall sawtooth",
        (
            "ooxoo",
            "xxxoo",
            "ooxoo",
        ),
    ),
    Pattern(
        "two-sided sawtooth",
        (
            "ooxoo",
            "oxxxo",
            "ooxoo",
        ),
    ),
    Pattern(
        "offset sawtooth",
        (
            "oxxoo",
            "ooxxo",
            "ooxoo",
        ),
    ),
    Pattern(
        "fish hook",
        (
            "oxoooo",
            "oxxxxo",
            "oxooxo",
            "oxoooo",
        ),
    ),
    Pattern(
        "stair step",
        (
            "xoooox",
            "xxoooo",
            "oxxooo",
            "ooxxoo",
            "oooxxo",
            "ooooxx",
        ),
    ),
)


def find_pattern(style: str) -> Pattern:
    """Return the catalog pattern labelled *style*."""
    for pattern in PATTERN_CATALOG:
        if pattern.style == style:
            return pattern
    valid = ", ".join(repr(p.style) for p in PATTERN_CATALOG)
    raise ValueError(f"unknown pattern style {style!r}; must be one of {valid}")
