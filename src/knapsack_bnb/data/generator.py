"""
Random knapsack catalogue generator.

Generates reproducible random catalogues for benchmarking the search
strategies against each other.
"""

from typing import Any

import numpy as np

from knapsack_bnb.data.items import Catalogue, ContainerFactory, Item
from knapsack_bnb.utils.error_handler import ValidationError, require_positive_int


class KnapsackGenerator:
    """Generates random knapsack catalogues from a seeded RandomState."""

    def __init__(self, seed: int = 42):
        self.seed = seed
        self.rng = np.random.RandomState(seed)

    def generate_catalogue(
        self,
        n_items: int,
        weight_range: tuple[int, int] = (1, 100),
        price_range: tuple[int, int] = (1, 100),
        capacity_ratio: float = 0.5,
        container_factory: ContainerFactory = list,
    ) -> Catalogue:
        """
        Generate a random catalogue with integer weights and prices.

        Args:
            n_items: Number of items
            weight_range: (min_weight, max_weight) inclusive, min >= 1
            price_range: (min_price, max_price) inclusive, min >= 0
            capacity_ratio: Capacity as a fraction of total weight (default: 0.5)
            container_factory: Item container for the catalogue

        Returns:
            Catalogue object
        """
        if n_items < 0:
            raise ValidationError(
                f"n_items must be >= 0, got: {n_items}",
                suggestion="Request zero or more items.",
            )
        if weight_range[0] < 1 or weight_range[0] > weight_range[1]:
            raise ValidationError(
                f"Invalid weight range: {weight_range}",
                suggestion="Use (min, max) with 1 <= min <= max.",
            )
        if price_range[0] < 0 or price_range[0] > price_range[1]:
            raise ValidationError(
                f"Invalid price range: {price_range}",
                suggestion="Use (min, max) with 0 <= min <= max.",
            )
        if not 0.0 <= capacity_ratio <= 1.0:
            raise ValidationError(
                f"capacity_ratio must be between 0.0 and 1.0, got: {capacity_ratio}",
                suggestion="Provide a fraction of the total weight in [0, 1].",
            )

        weights = self.rng.randint(weight_range[0], weight_range[1] + 1, size=n_items)
        prices = self.rng.randint(price_range[0], price_range[1] + 1, size=n_items)

        # Set capacity as a fraction of total weight
        total_weight = int(np.sum(weights))
        capacity = int(total_weight * capacity_ratio)

        # Plain ints keep ratio arithmetic exact
        items = [Item(int(w), int(p)) for w, p in zip(weights, prices)]
        return Catalogue(items, capacity, container_factory=container_factory)

    def generate_batch(
        self, n_catalogues: int, n_items_range: tuple[int, int], **kwargs: Any
    ) -> list[Catalogue]:
        """
        Generate multiple catalogues with varying sizes

        Args:
            n_catalogues: Number of catalogues to generate
            n_items_range: (min_items, max_items) range, inclusive
            **kwargs: Additional arguments passed to generate_catalogue

        Returns:
            List of Catalogue objects
        """
        require_positive_int(n_catalogues, "n_catalogues")
        catalogues = []
        for _ in range(n_catalogues):
            n_items = int(self.rng.randint(n_items_range[0], n_items_range[1] + 1))
            catalogues.append(self.generate_catalogue(n_items, **kwargs))
        return catalogues


def generate_catalogue(
    n_items: int,
    weight_range: tuple[int, int] = (1, 100),
    price_range: tuple[int, int] = (1, 100),
    capacity_ratio: float = 0.5,
    seed: int = 42,
) -> Catalogue:
    """
    Generate a single random catalogue.

    Args:
        n_items: Number of items
        weight_range: (min_weight, max_weight) for items
        price_range: (min_price, max_price) for items
        capacity_ratio: Capacity as a fraction of total weight
        seed: Random seed

    Returns:
        Catalogue object
    """
    generator = KnapsackGenerator(seed=seed)
    return generator.generate_catalogue(
        n_items=n_items,
        weight_range=weight_range,
        price_range=price_range,
        capacity_ratio=capacity_ratio,
    )
