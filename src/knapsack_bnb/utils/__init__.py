"""Utility functions for logging and error handling."""

from knapsack_bnb.utils.error_handler import (
    ConfigurationError,
    DegenerateItemError,
    InvalidCapacityError,
    KnapsackError,
    NegativePriceError,
    SizeMismatchError,
    StrategyError,
    ValidationError,
    handle_cli_errors,
)
from knapsack_bnb.utils.logger import (
    get_logger,
    log_search_stats,
    log_solve_setup,
    log_strategy_report,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "log_solve_setup",
    "log_search_stats",
    "log_strategy_report",
    "KnapsackError",
    "ValidationError",
    "DegenerateItemError",
    "NegativePriceError",
    "SizeMismatchError",
    "InvalidCapacityError",
    "ConfigurationError",
    "StrategyError",
    "handle_cli_errors",
]
