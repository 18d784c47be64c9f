"""Selection metrics and strategy comparison."""

from knapsack_bnb.analysis.metrics import (
    ComparisonResult,
    StrategyReport,
    compare_strategies,
    compute_optimality_gap,
    is_feasible,
    run_strategy,
    total_price,
    total_weight,
)

__all__ = [
    "ComparisonResult",
    "StrategyReport",
    "compare_strategies",
    "run_strategy",
    "compute_optimality_gap",
    "is_feasible",
    "total_price",
    "total_weight",
]
