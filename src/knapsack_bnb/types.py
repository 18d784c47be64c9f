"""
Common type definitions for knapsack-bnb.

Provides type aliases for type checking.
"""

from collections.abc import Callable, Sequence
from fractions import Fraction
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from knapsack_bnb.data.items import Catalogue, Item

# Weights and prices may be int, float or Fraction; ratios are always exact
Number: TypeAlias = int | float | Fraction
Weight: TypeAlias = Number
Price: TypeAlias = Number
Ratio: TypeAlias = Fraction

# (weight, price) pair as read from external sources
ItemPair: TypeAlias = tuple[Weight, Price]

# Solve entry point signature
SolveFn: TypeAlias = Callable[["Catalogue"], list["Item"]]
Selection: TypeAlias = Sequence["Item"]

# Config / metrics types
ConfigDict: TypeAlias = dict[str, int | float | str | bool | list | dict]
MetricsDict: TypeAlias = dict[str, float]

# Path types
PathLike: TypeAlias = str | Path
