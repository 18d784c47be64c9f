"""
Fractional-relaxation upper bound for the 0-1 knapsack problem.

Fill the remaining capacity greedily with whole items in catalogue order;
the first item that does not fit contributes the fraction of its price that
fills the leftover capacity. On a catalogue sorted by descending
price/weight ratio this is the optimum of the LP relaxation, so no 0-1
completion of the current partial selection can exceed it.
"""

from collections.abc import Sequence

from knapsack_bnb.data.items import Item
from knapsack_bnb.types import Number, Price, Weight


def has_integral_prices(items: Sequence[Item]) -> bool:
    """True when every price is an int, so bounds can be rounded to ints."""
    return all(isinstance(item.price, int) for item in items)


def upper_bound(
    items: Sequence[Item],
    capacity: Number,
    depth: int,
    current_weight: Weight,
    current_price: Price,
    integral: bool = False,
) -> Price:
    """
    Optimistic bound on the price reachable from ``depth`` onwards.

    Args:
        items: Items sorted by descending price/weight ratio
        capacity: Knapsack capacity
        depth: Index of the next item not yet decided
        current_weight: Weight of the items already selected
        current_price: Price of the items already selected
        integral: Round the fractional part to an int (all prices are ints)

    Returns:
        Upper bound on the total price of any feasible completion. An exact
        Fraction when ``integral`` is False and an item had to be split.

    Example:
        >>> items = [Item(2, 12), Item(12, 30), Item(8, 10)]
        >>> upper_bound(items, 20, 0, 0, 0, integral=True)
        50
    """
    n_items = len(items)
    bound = current_price
    weight = current_weight

    while depth < n_items:
        item = items[depth]
        next_weight = weight + item.weight
        if next_weight > capacity:
            break
        weight = next_weight
        bound += item.price
        depth += 1

    if depth < n_items:
        item = items[depth]
        fraction = (capacity - weight) * item.ratio
        if integral:
            bound += round(fraction)
        else:
            bound += fraction

    return bound
