"""Exact solvers: exhaustive backtracking, branch and bound, brute-force reference."""

from knapsack_bnb.solvers.registry import StrategyRegistry
from knapsack_bnb.solvers.bound import has_integral_prices, upper_bound
from knapsack_bnb.solvers.backtrack import (
    KnapsackSolver,
    SearchState,
    SearchStats,
    solve_exhaustive,
    solve_with_pruning,
)
from knapsack_bnb.solvers.brute_force import MAX_BRUTE_FORCE_ITEMS, brute_force_optimum

__all__ = [
    "KnapsackSolver",
    "SearchState",
    "SearchStats",
    "StrategyRegistry",
    "solve_exhaustive",
    "solve_with_pruning",
    "upper_bound",
    "has_integral_prices",
    "brute_force_optimum",
    "MAX_BRUTE_FORCE_ITEMS",
]
