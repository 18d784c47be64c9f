"""
Brute-force reference solver.

Enumerates every subset with vectorized NumPy operations. Only meant for
small catalogues, as an independent check of the backtracking solvers.
"""

import numpy as np

from knapsack_bnb.data.items import Catalogue
from knapsack_bnb.utils.error_handler import ValidationError

MAX_BRUTE_FORCE_ITEMS = 20
_CHUNK_BITS = 16


def brute_force_optimum(catalogue: Catalogue) -> tuple[float, np.ndarray]:
    """
    Best total price over all 2^n subsets that fit the capacity.

    Args:
        catalogue: Catalogue with at most 20 items

    Returns:
        Tuple of (best_price, mask), where ``mask`` is an int8 vector in
        catalogue order. The first subset in enumeration order wins ties.

    Raises:
        ValidationError: If the catalogue has more than 20 items
    """
    items = list(catalogue)
    n_items = len(items)
    if n_items > MAX_BRUTE_FORCE_ITEMS:
        raise ValidationError(
            f"Brute force supports at most {MAX_BRUTE_FORCE_ITEMS} items, got: {n_items}",
            suggestion="Use the branch-and-bound solver for larger catalogues.",
        )

    weights = np.array([float(item.weight) for item in items], dtype=np.float64)
    prices = np.array([float(item.price) for item in items], dtype=np.float64)
    capacity = float(catalogue.capacity)
    bits = np.arange(n_items, dtype=np.int64)

    best_price = 0.0
    best_mask = np.zeros(n_items, dtype=np.int8)

    total = 1 << n_items
    chunk = 1 << _CHUNK_BITS
    for start in range(0, total, chunk):
        codes = np.arange(start, min(start + chunk, total), dtype=np.int64)
        masks = ((codes[:, None] >> bits) & 1).astype(np.int8)
        subset_weights = masks @ weights
        subset_prices = masks @ prices
        subset_prices[subset_weights > capacity + 1e-9] = -np.inf

        idx = int(np.argmax(subset_prices))
        if subset_prices[idx] > best_price:
            best_price = float(subset_prices[idx])
            best_mask = masks[idx].copy()

    return best_price, best_mask
