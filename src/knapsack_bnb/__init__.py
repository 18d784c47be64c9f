"""
knapsack-bnb - Exact 0-1 Knapsack Solvers
==========================================

Exhaustive backtracking and branch-and-bound search for the 0-1 knapsack
problem, with access counting to compare the work the strategies perform.

Main modules:
- data: Items, catalogues, access counting and instance generation
- solvers: Backtracking search, fractional bound, brute-force reference
- analysis: Selection metrics and strategy comparison
- config: YAML configuration schemas and loading
- utils: Logging and error handling
"""

__version__ = "1.0.0"

# Public API exports
from knapsack_bnb import analysis, config, data, solvers
from knapsack_bnb.data import Catalogue, CountingItems, Item
from knapsack_bnb.solvers import solve_exhaustive, solve_with_pruning, upper_bound
from knapsack_bnb.types import ItemPair, Number, Price, Ratio, Weight

__all__ = [
    "data",
    "solvers",
    "analysis",
    "config",
    "__version__",
    # Core API
    "Item",
    "Catalogue",
    "CountingItems",
    "solve_exhaustive",
    "solve_with_pruning",
    "upper_bound",
    # Types
    "Number",
    "Weight",
    "Price",
    "Ratio",
    "ItemPair",
]
