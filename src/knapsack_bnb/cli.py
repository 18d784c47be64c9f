"""
Unified CLI for knapsack-bnb.

Provides subcommands for solving catalogues, comparing strategies,
generating random catalogues and validating configuration files.
"""

import sys

import click

from knapsack_bnb import __version__
from knapsack_bnb.analysis.metrics import compare_strategies, total_price, total_weight
from knapsack_bnb.config.loader import (
    build_catalogue,
    load_config,
    parse_config,
    save_config,
    validate_config_file,
)
from knapsack_bnb.config.schemas import CatalogueConfig, SolveConfig
from knapsack_bnb.data.items import Catalogue, format_items
from knapsack_bnb.solvers.registry import StrategyRegistry
from knapsack_bnb.types import Number
from knapsack_bnb.utils.error_handler import ValidationError, handle_cli_errors
from knapsack_bnb.utils.logger import log_solve_setup, log_strategy_report, setup_logger

STRATEGY_NAMES = ["exhaustive", "direct", "pruned", "branch_and_bound", "sorted"]


def _parse_number(token: str) -> Number:
    token = token.strip()
    try:
        if any(ch in token for ch in ".eE"):
            return float(token)
        return int(token)
    except ValueError as e:
        raise ValidationError(
            f"Not a number: {token!r}",
            suggestion="Use integers or decimals.",
        ) from e


def _parse_numbers(text: str) -> list[Number]:
    if not text.strip():
        return []
    return [_parse_number(token) for token in text.split(",")]


def _resolve_config(
    config: str | None,
    weights: str | None,
    prices: str | None,
    capacity: str | None,
    strategy: str | None,
    count_accesses: bool,
) -> SolveConfig:
    """Build a SolveConfig from a YAML file or from inline options."""
    if config:
        solve_config = load_config(config)
        if strategy:
            solve_config.strategy = strategy
        if count_accesses:
            solve_config.count_accesses = True
        return solve_config

    if weights is None or prices is None or capacity is None:
        raise click.UsageError("Provide --config or all of --weights, --prices and --capacity.")

    # Parallel lists go through Catalogue.from_arrays so a length mismatch
    # surfaces as SizeMismatchError before any item is built
    Catalogue.from_arrays(_parse_numbers(weights), _parse_numbers(prices), _parse_number(capacity))
    return parse_config(
        {
            "strategy": strategy or "pruned",
            "count_accesses": count_accesses,
            "catalogue": {
                "capacity": _parse_number(capacity),
                "weights": _parse_numbers(weights),
                "prices": _parse_numbers(prices),
            },
        },
        source="command line",
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """
    knapsack-bnb - exact 0-1 knapsack by backtracking and branch and bound.

    Examples:
        knapsack-bnb solve --weights 8,7,6,2 --prices 10,6,8,12 --capacity 15
        knapsack-bnb solve --config configs/example.yaml --strategy exhaustive
        knapsack-bnb compare --random 18 --seed 7
    """
    pass


@main.command()
@click.option("--config", type=click.Path(exists=True), help="Path to solve configuration YAML")
@click.option("--weights", type=str, help="Comma-separated item weights")
@click.option("--prices", type=str, help="Comma-separated item prices")
@click.option("--capacity", type=str, help="Knapsack capacity")
@click.option(
    "--strategy",
    type=click.Choice(STRATEGY_NAMES, case_sensitive=False),
    help="Solve strategy (overrides config)",
)
@click.option("--count-accesses", is_flag=True, help="Report indexed item reads")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides config)",
)
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@handle_cli_errors()
def solve(config, weights, prices, capacity, strategy, count_accesses, log_level, debug):
    """Solve a catalogue and print the optimal selection."""
    solve_config = _resolve_config(config, weights, prices, capacity, strategy, count_accesses)
    logger = setup_logger(solve_config.logging, level_override=log_level)

    catalogue = build_catalogue(solve_config)
    log_solve_setup(logger, solve_config, catalogue)

    solve_fn = StrategyRegistry.get(solve_config.strategy)
    selection = solve_fn(catalogue)

    click.echo(format_items(selection) if selection else "(no items selected)")
    click.echo(f"total weight: {total_weight(selection)}")
    click.echo(f"total price: {total_price(selection)}")
    if solve_config.count_accesses:
        click.echo(f"item accesses: {catalogue.items.access_count}")


@main.command()
@click.option("--config", type=click.Path(exists=True), help="Path to solve configuration YAML")
@click.option("--weights", type=str, help="Comma-separated item weights")
@click.option("--prices", type=str, help="Comma-separated item prices")
@click.option("--capacity", type=str, help="Knapsack capacity")
@click.option("--random", "n_random", type=int, help="Compare on a random catalogue of N items")
@click.option("--seed", type=int, default=42, help="Random seed for --random")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides config)",
)
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@handle_cli_errors()
def compare(config, weights, prices, capacity, n_random, seed, log_level, debug):
    """Run every strategy on the same catalogue and compare the work done."""
    if n_random is not None:
        solve_config = parse_config(
            {"generator": {"n_items": n_random, "seed": seed}}, source="command line"
        )
    else:
        solve_config = _resolve_config(config, weights, prices, capacity, None, False)
    logger = setup_logger(solve_config.logging, level_override=log_level)

    catalogue = build_catalogue(solve_config)
    log_solve_setup(logger, solve_config, catalogue)
    result = compare_strategies(catalogue)

    click.echo(f"items: {result.n_items}, capacity: {result.capacity}")
    click.echo(f"{'strategy':<12} {'price':>10} {'weight':>10} {'accesses':>10} {'nodes':>10}")
    for report in result.reports.values():
        click.echo(
            f"{report.strategy:<12} {str(report.price):>10} {str(report.weight):>10} "
            f"{report.access_count:>10} {report.nodes_visited:>10}"
        )
        log_strategy_report(logger, report)
    click.echo(f"prices agree: {'yes' if result.prices_agree else 'NO'}")
    click.echo(f"access reduction: {result.access_reduction():.1f}%")


@main.command()
@click.option("--n-items", type=int, default=20, help="Number of items")
@click.option("--seed", type=int, default=42, help="Random seed")
@click.option("--weight-max", type=int, default=100, help="Maximum item weight")
@click.option("--price-max", type=int, default=100, help="Maximum item price")
@click.option("--capacity-ratio", type=float, default=0.5, help="Capacity / total weight")
@click.option("--output", type=click.Path(), required=True, help="Output YAML path")
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@handle_cli_errors()
def generate(n_items, seed, weight_max, price_max, capacity_ratio, output, debug):
    """Write a random catalogue as a solve configuration file."""
    generator_config = parse_config(
        {
            "generator": {
                "n_items": n_items,
                "seed": seed,
                "weight_range": (1, weight_max),
                "price_range": (1, price_max),
                "capacity_ratio": capacity_ratio,
            }
        },
        source="command line",
    )
    catalogue = build_catalogue(generator_config)

    # Store the expanded items so the file does not depend on the RNG
    solve_config = SolveConfig(
        catalogue=CatalogueConfig(
            capacity=catalogue.capacity,
            weights=[item.weight for item in catalogue],
            prices=[item.price for item in catalogue],
        )
    )
    save_config(solve_config, output)
    click.echo(f"Wrote {len(catalogue)} items (capacity {catalogue.capacity}) to {output}")


@main.command(name="validate-config")
@click.argument("config_path", type=click.Path())
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@handle_cli_errors()
def validate_config(config_path, debug):
    """Validate a solve configuration file."""
    is_valid, message = validate_config_file(config_path)
    click.echo(message)
    if not is_valid:
        sys.exit(1)


if __name__ == "__main__":
    main()
