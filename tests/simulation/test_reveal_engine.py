"""Tests for dig_patterns.simulation.engine module."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from dig_patterns.config.types import SimulationConfig
from dig_patterns.domain.catalog import PATTERN_CATALOG
from dig_patterns.domain.cell_state import CellState
from dig_patterns.domain.errors import DegenerateMetricError, InvalidPatternError
from dig_patterns.domain.pattern import Pattern
from dig_patterns.simulation.engine import (
    GRID_DTYPE,
    _dig,
    evaluate_catalog,
    evaluate_pattern,
    simulate_window,
    trim,
)

D, R, P, U = CellState.DUG, CellState.REVEALED, CellState.PARTIAL, CellState.UNREVEALED


class TestSimulateWindow:
    def test_window_is_padded_on_all_sides(self) -> None:
        config = SimulationConfig(simulation_size=6, padding=2)
        grid = simulate_window(Pattern("p", ("xoo",)), config)
        assert grid.shape == (10, 10)

    def test_core_origin_aligns_with_pattern_origin(self) -> None:
        config = SimulationConfig(simulation_size=6, padding=2)
        grid = simulate_window(Pattern("p", ("xoo",)), config)
        assert grid[2, 2] == D
        assert grid[2, 3] == R
        assert grid[2, 4] == R
        assert grid[2, 5] == D

    def test_propagation_past_window_edge_is_dropped(self) -> None:
        # Core columns -1..2; only core column 0 (window column 1) is dug,
        # and the dig at core column 3 lies outside the window.
        config = SimulationConfig(simulation_size=2, padding=1)
        grid = simulate_window(Pattern("p", ("xoo",)), config)
        expected = np.array([[R, D, R, U]] * 4, dtype=GRID_DTYPE)
        np.testing.assert_array_equal(grid, expected)

    def test_invalid_pattern_raises_before_simulation(self) -> None:
        with pytest.raises(InvalidPatternError, match="row 1 has length 2"):
            simulate_window(Pattern("ragged", ("xoo", "xo")), SimulationConfig())

    def test_diagonal_neighbours_become_partial(self) -> None:
        config = SimulationConfig(simulation_size=4, padding=1)
        grid = trim(simulate_window(Pattern("p", ("xo", "oo")), config), 1)
        expected = np.array(
            [
                [D, R, D, R],
                [R, P, R, P],
                [D, R, D, R],
                [R, P, R, P],
            ],
            dtype=GRID_DTYPE,
        )
        np.testing.assert_array_equal(grid, expected)


class TestDig:
    def test_neighbour_order_does_not_change_result(self) -> None:
        first = np.full((5, 5), U, dtype=GRID_DTYPE)
        _dig(first, 2, 1)
        _dig(first, 2, 2)
        second = np.full((5, 5), U, dtype=GRID_DTYPE)
        _dig(second, 2, 2)
        _dig(second, 2, 1)
        np.testing.assert_array_equal(first, second)
        assert first[2, 1] == D and first[2, 2] == D
        assert first[1, 1] == R and first[1, 2] == R
        assert first[1, 0] == P and first[1, 3] == P

    def test_dig_at_corner_ignores_outside_cells(self) -> None:
        grid = np.full((3, 3), U, dtype=GRID_DTYPE)
        _dig(grid, 0, 0)
        expected = np.array([[D, R, U], [R, P, U], [U, U, U]], dtype=GRID_DTYPE)
        np.testing.assert_array_equal(grid, expected)


class TestTrim:
    def test_trim_removes_border(self) -> None:
        grid = np.arange(36).reshape(6, 6)
        trimmed = trim(grid, 2)
        np.testing.assert_array_equal(trimmed, [[14, 15], [20, 21]])

    def test_trim_returns_a_copy(self) -> None:
        grid = np.zeros((4, 4), dtype=GRID_DTYPE)
        trimmed = trim(grid, 1)
        trimmed[0, 0] = 3
        assert grid[1, 1] == 0

    def test_zero_padding_keeps_grid(self) -> None:
        grid = np.ones((3, 3), dtype=GRID_DTYPE)
        np.testing.assert_array_equal(trim(grid, 0), grid)


class TestEvaluatePattern:
    def test_straight_two_spaces(self) -> None:
        result = evaluate_pattern(Pattern("straight, 2 spaces", ("xoo",)))
        assert result.totals.total == 1600
        assert result.totals.dug == 560
        assert result.totals.revealed == 1040
        assert result.totals.partial == 0
        assert result.totals.unrevealed == 0
        assert result.computed.effort == pytest.approx(0.35)
        assert result.computed.coverage == pytest.approx(0.65)
        assert result.computed.efficiency == pytest.approx(560 / 1040)
        assert result.rounded(4).efficiency == 0.5385

    def test_straight_three_spaces(self) -> None:
        # The middle column between two dug columns touches neither of them.
        result = evaluate_pattern(Pattern("straight, 3 spaces", ("xooo",)))
        assert result.totals.dug == 400
        assert result.totals.revealed == 800
        assert result.totals.partial == 0
        assert result.totals.unrevealed == 400
        assert result.computed.effort == pytest.approx(0.25)
        assert result.computed.coverage == pytest.approx(0.5)
        assert result.computed.efficiency == pytest.approx(0.5)
        np.testing.assert_array_equal(result.state[0, :8], [D, R, U, R, D, R, U, R])

    def test_checkerboard_corner_produces_partials(self) -> None:
        result = evaluate_pattern(Pattern("corner", ("xo", "oo")))
        assert result.totals.dug == 400
        assert result.totals.revealed == 800
        assert result.totals.partial == 400
        assert result.totals.unrevealed == 0
        assert result.computed.coverage == pytest.approx(0.5625)
        assert result.rounded(4).efficiency == 0.4444

    def test_sparse_grid_leaves_cells_unrevealed(self) -> None:
        pattern = Pattern("sparse", ("xooo", "oooo", "oooo", "oooo"))
        result = evaluate_pattern(pattern)
        assert result.totals.dug == 100
        assert result.totals.revealed == 400
        assert result.totals.partial == 400
        assert result.totals.unrevealed == 700
        assert result.computed.effort == pytest.approx(0.0625)
        assert result.computed.coverage == pytest.approx(0.3125)
        assert result.computed.efficiency == pytest.approx(0.2)

    def test_state_is_trimmed_and_read_only(self) -> None:
        config = SimulationConfig(simulation_size=10, padding=3)
        result = evaluate_pattern(Pattern("p", ("xoo",)), config)
        assert result.state.shape == (10, 10)
        assert not result.state.flags.writeable

    def test_all_dig_pattern_is_degenerate(self) -> None:
        with pytest.raises(DegenerateMetricError, match="efficiency is undefined"):
            evaluate_pattern(Pattern("everything", ("x",)))

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(InvalidPatternError):
            evaluate_pattern(Pattern("idle", ("ooo",)))

    def test_summary_rounds_metrics(self) -> None:
        summary = evaluate_pattern(Pattern("straight, 2 spaces", ("xoo",))).to_summary(2)
        assert summary == {
            "style": "straight, 2 spaces",
            "totals": {
                "total": 1600,
                "dug": 560,
                "revealed": 1040,
                "unrevealed": 0,
                "partial": 0,
            },
            "computed": {"effort": 0.35, "coverage": 0.65, "efficiency": 0.54},
        }


class TestCatalogProperties:
    @pytest.mark.parametrize("pattern", PATTERN_CATALOG, ids=lambda p: p.style)
    def test_counts_partition_the_core(self, pattern: Pattern) -> None:
        totals = evaluate_pattern(pattern).totals
        assert totals.total == 40 * 40
        assert totals.dug + totals.revealed + totals.partial + totals.unrevealed == totals.total

    @pytest.mark.parametrize("pattern", PATTERN_CATALOG, ids=lambda p: p.style)
    def test_metric_bounds(self, pattern: Pattern) -> None:
        computed = evaluate_pattern(pattern).computed
        assert 0.0 <= computed.effort <= 1.0
        assert 0.0 <= computed.coverage <= 1.0
        assert computed.efficiency >= computed.effort

    @pytest.mark.parametrize("pattern", PATTERN_CATALOG, ids=lambda p: p.style)
    def test_evaluation_is_idempotent(self, pattern: Pattern) -> None:
        first = evaluate_pattern(pattern)
        second = evaluate_pattern(pattern)
        assert first == second
        np.testing.assert_array_equal(first.state, second.state)

    @pytest.mark.parametrize("pattern", PATTERN_CATALOG, ids=lambda p: p.style)
    def test_larger_window_keeps_shared_cells(self, pattern: Pattern) -> None:
        small = evaluate_pattern(pattern, SimulationConfig(simulation_size=13, padding=4))
        large = evaluate_pattern(pattern, SimulationConfig(simulation_size=29, padding=4))
        np.testing.assert_array_equal(small.state, large.state[:13, :13])


class TestEvaluateCatalog:
    def test_preserves_catalog_order(self) -> None:
        config = SimulationConfig(simulation_size=12)
        results = evaluate_catalog(PATTERN_CATALOG, config)
        assert [r.style for r in results] == [p.style for p in PATTERN_CATALOG]

    def test_invalid_pattern_propagates_by_default(self) -> None:
        patterns = [Pattern("ok", ("xoo",)), Pattern("idle", ("oo",))]
        with pytest.raises(InvalidPatternError, match="idle"):
            evaluate_catalog(patterns, SimulationConfig(simulation_size=6))

    def test_skip_invalid_logs_and_continues(self, caplog: pytest.LogCaptureFixture) -> None:
        patterns = [
            Pattern("idle", ("oo",)),
            Pattern("ok", ("xoo",)),
            Pattern("everything", ("x",)),
        ]
        with caplog.at_level(logging.WARNING, logger="dig_patterns.simulation.engine"):
            results = evaluate_catalog(
                patterns, SimulationConfig(simulation_size=6), skip_invalid=True
            )
        assert [r.style for r in results] == ["ok"]
        assert "Skipping pattern 'idle'" in caplog.text
        assert "Skipping pattern 'everything'" in caplog.text
