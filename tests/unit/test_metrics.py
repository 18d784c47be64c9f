"""
Tests for selection metrics and strategy comparison.
"""

import pytest

from knapsack_bnb.analysis.metrics import (
    compare_strategies,
    compute_optimality_gap,
    is_feasible,
    run_strategy,
    total_price,
    total_weight,
)
from knapsack_bnb.data.items import Catalogue, Item
from knapsack_bnb.utils.error_handler import StrategyError


class TestSelectionMetrics:
    """Test suite for selection metrics."""

    def test_totals(self):
        selection = [Item(2, 12), Item(12, 30)]
        assert total_weight(selection) == 14
        assert total_price(selection) == 42

    def test_totals_of_empty_selection(self):
        assert total_weight([]) == 0
        assert total_price([]) == 0

    def test_is_feasible(self):
        selection = [Item(2, 12), Item(12, 30)]
        assert is_feasible(selection, 14)
        assert not is_feasible(selection, 13)

    def test_optimality_gap(self):
        assert compute_optimality_gap(98.0, 100.0) == pytest.approx(2.0)
        assert compute_optimality_gap(100.0, 100.0) == 0.0

    def test_optimality_gap_zero_optimum(self):
        assert compute_optimality_gap(0.0, 0.0) == 0.0
        assert compute_optimality_gap(5.0, 0.0) == 100.0


class TestStrategyComparison:
    """Test suite for run_strategy and compare_strategies."""

    def test_run_strategy_leaves_input_untouched(self, scenario_catalogue):
        before = list(scenario_catalogue)
        report = run_strategy(scenario_catalogue, "sorted")
        assert report.strategy == "pruned"
        assert report.price == 72
        assert report.weight == 37
        assert report.n_selected == 4
        assert list(scenario_catalogue) == before
        assert type(scenario_catalogue.items) is list

    def test_run_strategy_counts_accesses(self, scenario_catalogue):
        report = run_strategy(scenario_catalogue, "exhaustive")
        # Exhaustive reads each visited node's item exactly once
        assert report.access_count == report.nodes_visited
        assert report.pruned_branches == 0
        assert report.time_ms >= 0.0

    def test_run_strategy_unknown(self, scenario_catalogue):
        with pytest.raises(StrategyError):
            run_strategy(scenario_catalogue, "greedy")

    def test_compare_strategies(self, scenario_catalogue):
        result = compare_strategies(scenario_catalogue)
        assert set(result.reports) == {"exhaustive", "pruned"}
        assert result.prices_agree
        assert result.n_items == 8
        assert result.capacity == 40
        assert 0.0 < result.access_reduction() < 100.0

    def test_access_reduction_with_no_baseline_reads(self):
        result = compare_strategies(Catalogue([], 10))
        assert result.access_reduction() == 0.0

    def test_report_to_dict(self, scenario_catalogue):
        data = run_strategy(scenario_catalogue, "pruned").to_dict()
        assert data["strategy"] == "pruned"
        assert set(data) >= {"price", "weight", "access_count", "time_ms"}
