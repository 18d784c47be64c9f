"""
Evaluation metrics for knapsack selections and strategy comparison.

The selection metrics are pure functions. ``compare_strategies`` runs every
registered strategy on its own copy of a catalogue with access counting
enabled, so the reported work is measured on identical input.
"""

import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.items import Catalogue, Item
from knapsack_bnb.solvers.backtrack import KnapsackSolver
from knapsack_bnb.solvers.registry import StrategyRegistry
from knapsack_bnb.types import Number, Price, Weight


def total_weight(items: Iterable[Item]) -> Weight:
    return sum((item.weight for item in items), 0)


def total_price(items: Iterable[Item]) -> Price:
    return sum((item.price for item in items), 0)


def is_feasible(items: Iterable[Item], capacity: Number) -> bool:
    """Check that the selection fits the capacity."""
    return total_weight(items) <= capacity


def compute_optimality_gap(found_price: float, optimal_price: float) -> float:
    """
    Compute optimality gap as percentage.

    Args:
        found_price: Price of the evaluated selection
        optimal_price: Optimal price

    Returns:
        Gap percentage: (optimal - found) / optimal * 100

    Example:
        >>> compute_optimality_gap(98.0, 100.0)
        2.0
    """
    if optimal_price == 0:
        return 0.0 if found_price == 0 else 100.0
    return float((optimal_price - found_price) / optimal_price * 100.0)


@dataclass
class StrategyReport:
    """Result and work measurements of one strategy on one catalogue."""

    strategy: str
    price: Price
    weight: Weight
    n_selected: int
    access_count: int
    nodes_visited: int
    pruned_branches: int
    time_ms: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ComparisonResult:
    """Reports of all strategies on the same catalogue."""

    n_items: int
    capacity: Number
    reports: dict[str, StrategyReport]

    @property
    def prices_agree(self) -> bool:
        prices = {report.price for report in self.reports.values()}
        return len(prices) <= 1

    def access_reduction(self, baseline: str = "exhaustive", candidate: str = "pruned") -> float:
        """Percentage of baseline index reads saved by the candidate strategy."""
        base = self.reports[baseline].access_count
        if base == 0:
            return 0.0
        return 100.0 * (base - self.reports[candidate].access_count) / base


def run_strategy(catalogue: Catalogue, strategy: str) -> StrategyReport:
    """
    Solve a counting copy of ``catalogue`` with one strategy.

    The input catalogue is not modified, even for strategies that sort.
    """
    name = StrategyRegistry.resolve(strategy)
    counted = catalogue.copy(container_factory=CountingItems)
    solver = KnapsackSolver(counted)

    start_time = time.perf_counter()
    if name == "pruned":
        selection = solver.sorted_solve()
    elif name == "exhaustive":
        selection = solver.direct_solve()
    else:
        selection = StrategyRegistry.get(name)(counted)
    elapsed_ms = (time.perf_counter() - start_time) * 1000.0

    items = counted.items
    access_count = items.access_count if isinstance(items, CountingItems) else 0
    stats = solver.stats
    return StrategyReport(
        strategy=name,
        price=total_price(selection),
        weight=total_weight(selection),
        n_selected=len(selection),
        access_count=access_count,
        nodes_visited=stats.nodes_visited,
        pruned_branches=stats.pruned_branches,
        time_ms=elapsed_ms,
    )


def compare_strategies(
    catalogue: Catalogue, strategies: Iterable[str] = ("exhaustive", "pruned")
) -> ComparisonResult:
    """
    Run each strategy on an identical copy of ``catalogue``.

    Example:
        >>> result = compare_strategies(Catalogue.from_arrays([8, 2], [10, 12], 9))
        >>> result.prices_agree
        True
    """
    reports = {}
    for strategy in strategies:
        report = run_strategy(catalogue, strategy)
        reports[report.strategy] = report
    return ComparisonResult(n_items=len(catalogue), capacity=catalogue.capacity, reports=reports)
