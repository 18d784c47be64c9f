"""
Backtracking solvers for the 0-1 knapsack problem.

Unlike general backtracking, which stops at the first feasible solution, the
knapsack problem needs the optimal one, so the search walks the whole
include/exclude tree and keeps the best selection seen so far.

Two strategies are provided:

- ``direct``: plain exhaustive enumeration in catalogue order.
- ``sorted``: sorts the catalogue by descending price/weight ratio, then
  skips every exclude branch whose fractional-relaxation bound cannot beat
  the best price found so far (branch and bound).

Items are only read by index during the search, so a catalogue built on
:class:`~knapsack_bnb.data.access.CountingItems` reports the work performed.

The walk keeps its pending branches on an explicit stack rather than the
interpreter call stack, so catalogue size is not limited by the recursion
limit and concurrent solves share no interpreter state.
"""

from collections.abc import MutableSequence
from dataclasses import asdict, dataclass, field

from knapsack_bnb.data.items import Catalogue, Item
from knapsack_bnb.solvers.bound import has_integral_prices, upper_bound
from knapsack_bnb.solvers.registry import StrategyRegistry
from knapsack_bnb.types import Number, Price, Weight
from knapsack_bnb.utils.logger import get_logger, log_search_stats

logger = get_logger(__name__)

# Search stack frame kinds
_VISIT = 0
_EXCLUDE = 1


@dataclass
class SearchStats:
    """Counters collected during one solve."""

    nodes_visited: int = 0
    includes: int = 0
    improvements: int = 0
    bound_evaluations: int = 0
    pruned_branches: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class SearchState:
    """
    Mutable state of a single solve.

    Created at the start of a solve and discarded at its end. Invariants:
    ``current_weight <= capacity`` and ``current_price`` equals the total
    price of the items marked in ``choice``.
    """

    capacity: Number
    choice: list[bool]
    best_choice: list[bool]
    current_weight: Weight = 0
    current_price: Price = 0
    best_price: Price = 0
    stats: SearchStats = field(default_factory=SearchStats)

    @classmethod
    def fresh(cls, n_items: int, capacity: Number) -> "SearchState":
        return cls(capacity=capacity, choice=[False] * n_items, best_choice=[False] * n_items)

    def fits(self, item: Item) -> bool:
        return self.current_weight + item.weight <= self.capacity

    def select(self, depth: int, item: Item) -> None:
        self.current_weight += item.weight
        self.current_price += item.price
        self.choice[depth] = True
        self.stats.includes += 1

    def deselect(self, depth: int, item: Item) -> None:
        self.current_weight -= item.weight
        self.current_price -= item.price
        self.choice[depth] = False

    def record_if_better(self) -> None:
        # Strictly greater: ties keep the first selection found
        if self.current_price > self.best_price:
            self.best_price = self.current_price
            self.best_choice[:] = self.choice
            self.stats.improvements += 1


class KnapsackSolver:
    """
    Depth-first include/exclude search over a catalogue.

    The solver is reusable: each solve starts from empty totals and
    selections. After a solve, ``best_price``, ``best_weight`` and
    ``stats`` describe the last run.

    Example:
        >>> catalogue = Catalogue.from_arrays([8, 2, 15], [10, 12, 20], capacity=20)
        >>> solver = KnapsackSolver(catalogue)
        >>> [item.weight for item in solver.direct_solve()]
        [2, 15]
        >>> solver.best_price
        32
    """

    def __init__(self, catalogue: Catalogue):
        self.catalogue = catalogue
        self._items: MutableSequence[Item] = catalogue.items
        self._integral = False
        self._state: SearchState | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def direct_solve(self) -> list[Item]:
        """Exhaustive search in the current catalogue order."""
        return self._solve(pruned=False)

    def sorted_solve(self) -> list[Item]:
        """
        Branch-and-bound search.

        Sorts the catalogue in place by descending price/weight ratio before
        searching; the original order is not restored.
        """
        self.catalogue.sort_by_ratio_descending()
        return self._solve(pruned=True)

    @property
    def best_price(self) -> Price:
        return self._state.best_price if self._state is not None else 0

    @property
    def best_weight(self) -> Weight:
        if self._state is None:
            return 0
        return sum(
            (item.weight for item, chosen in zip(self._items, self._state.best_choice) if chosen),
            0,
        )

    @property
    def stats(self) -> SearchStats:
        return self._state.stats if self._state is not None else SearchStats()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _solve(self, pruned: bool) -> list[Item]:
        # Capacity and items are snapshotted for the duration of the solve
        self._items = self.catalogue.items
        n_items = len(self._items)
        self._state = SearchState.fresh(n_items, self.catalogue.capacity)
        self._integral = pruned and has_integral_prices(self._items)

        self._search(pruned)

        # Iteration does not go through indexed access, so it is not counted
        result = [item for item, chosen in zip(self._items, self._state.best_choice) if chosen]

        log_search_stats(
            logger,
            "pruned" if pruned else "exhaustive",
            n_items,
            self._state.best_price,
            self._state.stats,
        )
        return result

    def _search(self, pruned: bool) -> None:
        """
        Depth-first include/exclude walk on an explicit stack.

        ``_VISIT`` frames decide an item: the include branch is taken first
        when the item fits, and an ``_EXCLUDE`` frame pushed underneath it
        runs once the whole include subtree is done. That frame undoes the
        include and opens the exclude branch, which in pruned mode is only
        explored while its bound beats the best price so far.
        """
        state = self._state
        n_items = len(state.choice)
        stack: list[tuple[int, int, Item | None]] = [(_VISIT, 0, None)]

        while stack:
            action, depth, included = stack.pop()

            if action == _EXCLUDE:
                if included is not None:
                    state.deselect(depth, included)
                if pruned and not self._exclude_can_improve(depth):
                    state.stats.pruned_branches += 1
                    continue
                stack.append((_VISIT, depth + 1, None))
                continue

            if depth >= n_items:
                continue
            state.stats.nodes_visited += 1

            item = self._items[depth]

            if state.fits(item):
                state.select(depth, item)
                state.record_if_better()
                stack.append((_EXCLUDE, depth, item))
                # enter next layer
                stack.append((_VISIT, depth + 1, None))
            else:
                stack.append((_EXCLUDE, depth, None))

    def _exclude_can_improve(self, depth: int) -> bool:
        # Only the exclude branch is bounded; including the best-ratio item
        # left is always worth exploring
        state = self._state
        state.stats.bound_evaluations += 1
        bound = upper_bound(
            self._items,
            state.capacity,
            depth + 1,
            state.current_weight,
            state.current_price,
            integral=self._integral,
        )
        return bound > state.best_price


@StrategyRegistry.register("exhaustive", aliases=("direct",))
def solve_exhaustive(catalogue: Catalogue) -> list[Item]:
    """
    Optimal selection by exhaustive enumeration.

    Explores both branches at every item, so it is exponential in the number
    of items. Leaves the catalogue untouched.
    """
    return KnapsackSolver(catalogue).direct_solve()


@StrategyRegistry.register("pruned", aliases=("branch_and_bound", "sorted"))
def solve_with_pruning(catalogue: Catalogue) -> list[Item]:
    """
    Optimal selection by branch and bound.

    Sorts ``catalogue`` in place by descending price/weight ratio (stable)
    before searching. Returned items are in the sorted order.
    """
    return KnapsackSolver(catalogue).sorted_solve()
