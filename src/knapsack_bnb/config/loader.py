"""
Configuration loading and validation utilities.

Provides functions to load YAML configs, validate them against Pydantic
schemas and turn them into catalogues.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from knapsack_bnb.config.schemas import SolveConfig
from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.generator import KnapsackGenerator
from knapsack_bnb.data.items import Catalogue, Item
from knapsack_bnb.utils.error_handler import ConfigurationError, SizeMismatchError


def load_config(config_path: str | Path) -> SolveConfig:
    """
    Load and validate solve configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated SolveConfig object

    Raises:
        ConfigurationError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = load_config("configs/example.yaml")
        >>> print(f"Strategy: {config.strategy}")
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or create a config file (see configs/ for templates).",
        )

    try:
        with open(config_file) as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if config_dict is None:
        raise ConfigurationError(
            f"Empty configuration file: {config_path}",
            suggestion="Add a 'catalogue' or 'generator' section to the YAML file.",
        )

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration must be a YAML mapping: {config_path}",
            suggestion="Use 'key: value' pairs at the top level.",
        )

    return parse_config(config_dict, source=str(config_path))


def parse_config(config_dict: dict[str, Any], source: str = "<dict>") -> SolveConfig:
    """
    Validate a configuration dictionary.

    Raises:
        SizeMismatchError: If parallel ``weights``/``prices`` lists differ in
            length
        ConfigurationError: If any other validation fails; every error is
            listed as ``loc -> msg``
    """
    try:
        return SolveConfig(**config_dict)
    except ValidationError as e:
        errors = []
        mismatches = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"]) or "<root>"
            msg = error["msg"]
            errors.append(f"  - {loc}: {msg}")
            if error["type"] == "size_mismatch":
                mismatches.append(f"{loc}: {msg}")

        if mismatches:
            raise SizeMismatchError(
                f"Parallel item lists differ in length in {source}: {'; '.join(mismatches)}",
                suggestion="Provide exactly one price per weight.",
            ) from e

        error_msg = "\n".join(errors)
        raise ConfigurationError(
            f"Configuration validation failed for {source}:\n{error_msg}",
            suggestion="Fix the configuration errors listed above. "
            "See configs/example.yaml for a valid example.",
        ) from e


def validate_config_file(config_path: str | Path) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"✓ Configuration is valid: {config_path}"
    except (ConfigurationError, SizeMismatchError) as e:
        return False, f"✗ {e.message}"


def config_to_dict(config: SolveConfig) -> dict[str, Any]:
    """Convert SolveConfig to a plain dictionary (unset sections dropped)."""
    return config.model_dump(exclude_none=True)


def save_config(config: SolveConfig, output_path: str | Path) -> None:
    """
    Save SolveConfig to YAML file.

    Args:
        config: SolveConfig instance
        output_path: Path to save YAML file
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config_to_dict(config)
    # Tuples are not safe-dumpable
    generator = config_dict.get("generator")
    if generator is not None:
        for key in ("weight_range", "price_range"):
            generator[key] = list(generator[key])

    with open(output_file, "w") as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2)


def build_catalogue(config: SolveConfig) -> Catalogue:
    """
    Build the catalogue described by a configuration.

    Items are wrapped in CountingItems when ``count_accesses`` is set.
    """
    factory = CountingItems if config.count_accesses else list

    if config.generator is not None:
        gen = config.generator
        return KnapsackGenerator(seed=gen.seed).generate_catalogue(
            n_items=gen.n_items,
            weight_range=gen.weight_range,
            price_range=gen.price_range,
            capacity_ratio=gen.capacity_ratio,
            container_factory=factory,
        )

    explicit = config.catalogue
    if explicit is None:
        raise ConfigurationError(
            "Configuration has neither a 'catalogue' nor a 'generator' section",
            suggestion="Add one of the two sections (see configs/example.yaml).",
        )
    if explicit.items is not None:
        items = [Item(entry.weight, entry.price) for entry in explicit.items]
        return Catalogue(items, explicit.capacity, container_factory=factory)
    return Catalogue.from_arrays(
        explicit.weights, explicit.prices, explicit.capacity, container_factory=factory
    )
