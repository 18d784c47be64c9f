"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
solve configurations.
"""

from knapsack_bnb.config.loader import (
    build_catalogue,
    config_to_dict,
    load_config,
    parse_config,
    save_config,
    validate_config_file,
)
from knapsack_bnb.config.schemas import (
    CatalogueConfig,
    GeneratorConfig,
    ItemConfig,
    LoggingConfig,
    SolveConfig,
)

__all__ = [
    "SolveConfig",
    "CatalogueConfig",
    "ItemConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "load_config",
    "parse_config",
    "validate_config_file",
    "config_to_dict",
    "save_config",
    "build_catalogue",
]
