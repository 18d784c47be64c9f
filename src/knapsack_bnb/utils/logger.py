"""
Logging for solver runs.

All package loggers live under ``knapsack_bnb`` and propagate to it; the CLI
configures that one logger from the ``logging`` section of a solve
configuration. Console output goes to stderr so selections printed on stdout
stay machine-readable.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from knapsack_bnb.analysis.metrics import StrategyReport
    from knapsack_bnb.config.schemas import LoggingConfig, SolveConfig
    from knapsack_bnb.data.items import Catalogue
    from knapsack_bnb.solvers.backtrack import SearchStats

PACKAGE_LOGGER = "knapsack_bnb"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    logging_config: LoggingConfig | None = None,
    level_override: str | None = None,
    console_output: bool = True,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Configure the package logger from a ``LoggingConfig``.

    Calling it again replaces the previous handlers, so each CLI command can
    reconfigure logging for its own config file.

    Args:
        logging_config: ``logging`` section of a solve configuration; INFO on
            the console only when omitted
        level_override: Level name that wins over the configured one
            (the CLI ``--log-level`` option)
        console_output: Also log to stderr
        name: Logger to configure

    Returns:
        Configured logger

    Example:
        >>> from knapsack_bnb.config.schemas import LoggingConfig
        >>> logger = setup_logger(LoggingConfig(level="DEBUG", log_file="runs/solve.log"))
    """
    level_name = level_override or (logging_config.level if logging_config else "INFO")
    level = logging.getLevelName(level_name.upper())
    log_file = logging_config.log_file if logging_config else None

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="a"))
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Logger inside the package hierarchy; handlers come from ``setup_logger``."""
    return logging.getLogger(name)


def log_solve_setup(logger: logging.Logger, config: SolveConfig, catalogue: Catalogue) -> None:
    """Log which catalogue is solved and how, before the search starts."""
    if config.generator is not None:
        source = f"generator(seed={config.generator.seed})"
    else:
        source = "catalogue"
    logger.info(
        "Solving %d items, capacity %s, strategy %s, source %s, access counting %s",
        len(catalogue),
        catalogue.capacity,
        config.strategy,
        source,
        "on" if config.count_accesses else "off",
    )


def log_search_stats(
    logger: logging.Logger,
    strategy: str,
    n_items: int,
    best_price: object,
    stats: SearchStats,
) -> None:
    """Debug line with the counters of one finished search."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    counters = " ".join(f"{key}={value}" for key, value in stats.to_dict().items())
    logger.debug(
        "%s search over %d items: best_price=%s %s", strategy, n_items, best_price, counters
    )


def log_strategy_report(logger: logging.Logger, report: StrategyReport) -> None:
    """
    Log one strategy's result and work measurements on a single line.

    Example:
        >>> log_strategy_report(get_logger(), run_strategy(catalogue, "pruned"))
        ... pruned | price: 72 | weight: 37 | selected: 4 | accesses: ... | time: 0.41 ms
    """
    logger.info(
        "%s | price: %s | weight: %s | selected: %d | accesses: %d | nodes: %d "
        "| pruned branches: %d | time: %.2f ms",
        report.strategy,
        report.price,
        report.weight,
        report.n_selected,
        report.access_count,
        report.nodes_visited,
        report.pruned_branches,
        report.time_ms,
    )
