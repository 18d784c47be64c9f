"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.generator import KnapsackGenerator
from knapsack_bnb.data.items import Catalogue

SCENARIO_WEIGHTS = [8, 7, 6, 2, 10, 11, 15, 12]
SCENARIO_PRICES = [10, 6, 8, 12, 5, 9, 20, 30]
SCENARIO_CAPACITY = 40


@pytest.fixture
def scenario_catalogue():
    """
    Eight-item catalogue with capacity 40.

    Optimal selection: (8, 10), (2, 12), (15, 20), (12, 30), total weight 37
    and total price 72.
    """
    return Catalogue.from_arrays(SCENARIO_WEIGHTS, SCENARIO_PRICES, SCENARIO_CAPACITY)


@pytest.fixture
def counting_scenario_catalogue():
    """Same scenario on an access-counting container."""
    return Catalogue.from_arrays(
        SCENARIO_WEIGHTS,
        SCENARIO_PRICES,
        SCENARIO_CAPACITY,
        container_factory=CountingItems,
    )


@pytest.fixture
def small_catalogue():
    """
    Five items, capacity 10.

    Known optimum: weights 2, 5, 3 with total price 45.
    """
    return Catalogue.from_arrays([2, 5, 3, 7, 4], [10, 20, 15, 25, 18], 10)


@pytest.fixture
def tiny_catalogues():
    """
    Tiny catalogues with their optimal prices.

    Returns:
        list of (catalogue, optimal_price) tuples
    """
    return [
        (Catalogue.from_arrays([1, 3, 2], [5, 10, 8], 4), 15),
        (Catalogue.from_arrays([3, 2, 4, 1], [12, 8, 15, 6], 6), 26),
        (Catalogue.from_arrays([5], [7], 4), 0),
    ]


@pytest.fixture
def generator():
    """Seeded catalogue generator."""
    return KnapsackGenerator(seed=1234)
