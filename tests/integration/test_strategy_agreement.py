"""
Integration tests: both search strategies against the brute-force reference.
"""

import pytest

from knapsack_bnb.analysis.metrics import compare_strategies, is_feasible, total_price
from knapsack_bnb.data.generator import KnapsackGenerator
from knapsack_bnb.data.items import Item
from knapsack_bnb.solvers.backtrack import solve_exhaustive, solve_with_pruning
from knapsack_bnb.solvers.brute_force import brute_force_optimum


@pytest.mark.parametrize("seed", range(8))
def test_random_catalogues_match_brute_force(seed):
    generator = KnapsackGenerator(seed=seed)
    catalogue = generator.generate_catalogue(n_items=12, weight_range=(1, 30))
    optimum, _ = brute_force_optimum(catalogue)

    exhaustive = solve_exhaustive(catalogue.copy())
    pruned = solve_with_pruning(catalogue.copy())

    assert total_price(exhaustive) == optimum
    assert total_price(pruned) == optimum
    assert is_feasible(exhaustive, catalogue.capacity)
    assert is_feasible(pruned, catalogue.capacity)


@pytest.mark.parametrize("capacity_ratio", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_capacity_extremes(generator, capacity_ratio):
    catalogue = generator.generate_catalogue(n_items=10, capacity_ratio=capacity_ratio)
    optimum, _ = brute_force_optimum(catalogue)

    assert total_price(solve_with_pruning(catalogue.copy())) == optimum
    assert total_price(solve_exhaustive(catalogue.copy())) == optimum


def test_many_equal_ratios(generator):
    """Stable tie handling still finds the optimum."""
    catalogue = generator.generate_catalogue(n_items=14, weight_range=(1, 6))
    for item in list(catalogue):
        catalogue.add_item(Item(item.weight * 2, item.price * 2))
    catalogue.assign_items(list(catalogue)[:18])
    optimum, _ = brute_force_optimum(catalogue)

    assert total_price(solve_with_pruning(catalogue.copy())) == optimum


def test_batch_comparison_reduces_work():
    generator = KnapsackGenerator(seed=99)
    for catalogue in generator.generate_batch(4, (14, 16)):
        result = compare_strategies(catalogue)
        assert result.prices_agree
        exhaustive = result.reports["exhaustive"]
        pruned = result.reports["pruned"]
        assert pruned.access_count <= exhaustive.access_count
        assert pruned.nodes_visited <= exhaustive.nodes_visited
