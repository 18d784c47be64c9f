"""Item models, catalogue construction and instance generation."""

from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.generator import KnapsackGenerator, generate_catalogue
from knapsack_bnb.data.items import (
    Catalogue,
    Item,
    format_items,
    price_weight_ratio,
)

__all__ = [
    # Classes
    "Item",
    "Catalogue",
    "CountingItems",
    "KnapsackGenerator",
    # Functions
    "price_weight_ratio",
    "format_items",
    "generate_catalogue",
]
