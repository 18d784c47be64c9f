"""
Item and Catalogue models for the 0-1 knapsack problem.

An Item is an immutable (weight, price) pair with an exact price/weight
ratio. A Catalogue owns the ordered item sequence (the enumeration order of
the search) and the capacity, and can reorder its items by descending ratio.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from fractions import Fraction

from knapsack_bnb.types import Number, Price, Ratio, Weight
from knapsack_bnb.utils.error_handler import (
    DegenerateItemError,
    NegativePriceError,
    SizeMismatchError,
    require_capacity,
    require_real,
)

ContainerFactory = Callable[[list["Item"]], MutableSequence["Item"]]


def price_weight_ratio(weight: Weight, price: Price) -> Ratio:
    """
    Exact price per unit of weight.

    Raises:
        DegenerateItemError: If weight <= 0
    """
    if weight <= 0:
        raise DegenerateItemError(
            f"Item weight must be positive to compute a ratio, got: {weight}",
            suggestion="Remove zero-weight items or give them a positive weight.",
        )
    return Fraction(price) / Fraction(weight)


def _ratio_key(item: Item) -> Ratio:
    return item.ratio


@dataclass(frozen=True)
class Item:
    """
    An item that can be put in the knapsack at most once.

    Attributes
    ----------
    weight : int | float | Fraction
        Positive capacity consumption.
    price : int | float | Fraction
        Nonnegative objective contribution if selected.
    """

    weight: Weight
    price: Price

    def __post_init__(self) -> None:
        require_real(self.weight, "Item.weight")
        require_real(self.price, "Item.price")
        if self.weight <= 0:
            raise DegenerateItemError(
                f"Item weight must be positive, got: {self.weight}",
                suggestion="Every item needs a positive weight.",
            )
        if self.price < 0:
            raise NegativePriceError(
                f"Item price must be >= 0, got: {self.price}",
                suggestion="Drop items with negative price; they never improve a selection.",
            )

    @property
    def ratio(self) -> Ratio:
        """Price/weight ratio as an exact Fraction."""
        return price_weight_ratio(self.weight, self.price)


class Catalogue:
    """
    Knapsack instance: ordered items plus a capacity.

    The item order is the order in which the search decides include/exclude.
    ``container_factory`` builds the sequence that holds the items; pass
    :class:`~knapsack_bnb.data.access.CountingItems` to observe how many
    indexed reads a solve performs.

    Example:
        >>> catalogue = Catalogue.from_arrays([8, 2], [10, 12], capacity=9)
        >>> catalogue.sort_by_ratio_descending()
        >>> [item.weight for item in catalogue.items]
        [2, 8]
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        capacity: Number = 0,
        container_factory: ContainerFactory = list,
    ) -> None:
        self._container_factory = container_factory
        self._capacity = require_capacity(capacity)
        self._items: MutableSequence[Item] = container_factory(list(items))
        self._sorted_by_ratio = False

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[Weight, Price]],
        capacity: Number,
        container_factory: ContainerFactory = list,
    ) -> Catalogue:
        """Build a catalogue from (weight, price) pairs."""
        items = [Item(weight, price) for weight, price in pairs]
        return cls(items, capacity, container_factory=container_factory)

    @classmethod
    def from_arrays(
        cls,
        weights: Sequence[Weight],
        prices: Sequence[Price],
        capacity: Number,
        container_factory: ContainerFactory = list,
    ) -> Catalogue:
        """
        Build a catalogue from parallel weight and price sequences.

        Raises:
            SizeMismatchError: If the sequences differ in length. Checked
                before any item is built.
        """
        if len(weights) != len(prices):
            raise SizeMismatchError(
                f"weights and prices must have the same length, "
                f"got {len(weights)} weights and {len(prices)} prices",
                suggestion="Provide exactly one price per weight.",
            )
        return cls.from_pairs(zip(weights, prices), capacity, container_factory)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @property
    def items(self) -> MutableSequence[Item]:
        return self._items

    def assign_items(self, items: Iterable[Item]) -> None:
        """Replace all items (between solves only)."""
        self._items = self._container_factory(list(items))
        self._sorted_by_ratio = False

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        self._sorted_by_ratio = False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> Number:
        return self._capacity

    @capacity.setter
    def capacity(self, value: Number) -> None:
        self._capacity = require_capacity(value)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    @property
    def is_sorted_by_ratio(self) -> bool:
        """True once the items were sorted and not replaced since."""
        return self._sorted_by_ratio

    def sort_by_ratio_descending(self) -> None:
        """
        Reorder items in place by descending price/weight ratio.

        The sort is stable: equal-ratio items keep their relative order.
        The original order is not restored by anything afterwards.
        """
        self._items.sort(key=_ratio_key, reverse=True)
        self._sorted_by_ratio = True

    def sorted_items(self) -> list[Item]:
        """Items sorted by descending ratio, leaving the catalogue untouched."""
        return sorted(self._items, key=_ratio_key, reverse=True)

    def copy(self, container_factory: ContainerFactory | None = None) -> Catalogue:
        """Independent catalogue with the same items, order and capacity."""
        factory = container_factory or self._container_factory
        clone = Catalogue(list(self._items), self._capacity, container_factory=factory)
        clone._sorted_by_ratio = self._sorted_by_ratio
        return clone

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def get_optimal_choice(self) -> list[Item]:
        """
        Solve with branch-and-bound.

        Sorts this catalogue by descending ratio as a side effect.
        """
        from knapsack_bnb.solvers.backtrack import solve_with_pruning

        return solve_with_pruning(self)

    def __repr__(self) -> str:
        return f"Catalogue(n_items={len(self._items)}, capacity={self._capacity})"


def format_items(items: Iterable[Item]) -> str:
    """
    Render items one per line.

    Example:
        >>> print(format_items([Item(8, 10)]))
        item 1 : $10, 8kg, $1.250/kg.
    """
    lines = []
    for index, item in enumerate(items, start=1):
        lines.append(
            f"item {index} : ${item.price}, {item.weight}kg, ${float(item.ratio):.3f}/kg."
        )
    return "\n".join(lines)
