"""
Access-counting item container.

Wraps a list of items and counts indexed reads (``items[i]``), so the work
done by different search strategies on the same catalogue can be compared.
Iteration, ``len()`` and in-place sorting are not counted; the solvers only
touch items by index during the search, so the counter measures the search
and nothing else.
"""

from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Any, overload

from knapsack_bnb.data.items import Item


class CountingItems(MutableSequence[Item]):
    """
    List-like item container that counts index reads.

    Example:
        >>> items = CountingItems([Item(8, 10), Item(2, 12)])
        >>> items[0].price
        10
        >>> items.access_count
        1
        >>> items.reset_counter()
        >>> items.access_count
        0
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: list[Item] = list(items)
        self._count = 0

    @property
    def access_count(self) -> int:
        """Number of indexed reads since creation or the last reset."""
        return self._count

    def read_counter(self) -> int:
        return self._count

    def reset_counter(self) -> None:
        self._count = 0

    @overload
    def __getitem__(self, index: int) -> Item: ...

    @overload
    def __getitem__(self, index: slice) -> list[Item]: ...

    def __getitem__(self, index: Any) -> Any:
        self._count += 1
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: Any) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def insert(self, index: int, value: Item) -> None:
        self._items.insert(index, value)

    def sort(self, *, key: Callable[[Item], Any] | None = None, reverse: bool = False) -> None:
        """Sort in place (stable) without touching the counter."""
        self._items.sort(key=key, reverse=reverse)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountingItems):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CountingItems({self._items!r}, access_count={self._count})"
