"""
Pydantic schemas for configuration validation.

Defines the structure and validation rules for solve configuration files.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from knapsack_bnb.solvers.registry import StrategyRegistry
from knapsack_bnb.utils.error_handler import StrategyError


class ItemConfig(BaseModel):
    """A single (weight, price) item."""

    model_config = ConfigDict(extra="forbid")

    weight: int | float = Field(description="Item weight (> 0)")
    price: int | float = Field(description="Item price (>= 0)")

    @field_validator("weight")
    @classmethod
    def check_weight(cls, v: int | float) -> int | float:
        if v <= 0:
            raise ValueError(f"Item weight must be positive, got {v}")
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v: int | float) -> int | float:
        if v < 0:
            raise ValueError(f"Item price must be >= 0, got {v}")
        return v


class CatalogueConfig(BaseModel):
    """Explicit catalogue: capacity plus items or parallel weight/price lists."""

    model_config = ConfigDict(extra="forbid")

    capacity: int | float = Field(description="Knapsack capacity (>= 0)")
    items: list[ItemConfig] | None = Field(default=None, description="Items as objects")
    weights: list[int | float] | None = Field(default=None, description="Item weights")
    prices: list[int | float] | None = Field(default=None, description="Item prices")

    @field_validator("capacity")
    @classmethod
    def check_capacity(cls, v: int | float) -> int | float:
        if v < 0:
            raise ValueError(f"Capacity must be >= 0, got {v}")
        return v

    @model_validator(mode="after")
    def check_item_source(self) -> "CatalogueConfig":
        """Require exactly one item source with matching parallel lists."""
        has_items = self.items is not None
        has_arrays = self.weights is not None or self.prices is not None
        if has_items and has_arrays:
            raise ValueError("Provide either 'items' or 'weights'/'prices', not both")
        if not has_items and not has_arrays:
            raise ValueError("Provide 'items' or both 'weights' and 'prices'")
        if has_arrays:
            if self.weights is None or self.prices is None:
                raise ValueError("'weights' and 'prices' must be given together")
            if len(self.weights) != len(self.prices):
                raise PydanticCustomError(
                    "size_mismatch",
                    "Size mismatch: {n_weights} weights and {n_prices} prices",
                    {"n_weights": len(self.weights), "n_prices": len(self.prices)},
                )
        return self


class GeneratorConfig(BaseModel):
    """Random catalogue generation settings."""

    model_config = ConfigDict(extra="forbid")

    seed: int = Field(default=42, description="Random seed for reproducibility", ge=0)
    n_items: int = Field(default=20, description="Number of items", ge=0)
    weight_range: tuple[int, int] = Field(default=(1, 100), description="Range for item weights")
    price_range: tuple[int, int] = Field(default=(1, 100), description="Range for item prices")
    capacity_ratio: float = Field(
        default=0.5,
        description="Capacity as fraction of total weight",
        ge=0.0,
        le=1.0,
    )

    @field_validator("weight_range", "price_range")
    @classmethod
    def check_valid_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Ensure range is valid (min <= max, non-negative)."""
        if v[0] > v[1]:
            raise ValueError(f"Invalid range: {v}. Min must be <= Max.")
        if v[0] < 0:
            raise ValueError(f"Range minimum must be >= 0, got {v[0]}")
        return v

    @field_validator("weight_range")
    @classmethod
    def check_positive_weights(cls, v: tuple[int, int]) -> tuple[int, int]:
        if v[0] < 1:
            raise ValueError(f"Weight range minimum must be >= 1, got {v[0]}")
        return v

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int) -> int:
        """Validate seed range."""
        if not (0 <= v < 2**32):
            raise ValueError(f"Seed must be in range [0, {2**32 - 1}], got {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    log_file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class SolveConfig(BaseModel):
    """Complete solve configuration."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    strategy: str = Field(default="pruned", description="Solve strategy name")
    count_accesses: bool = Field(
        default=False, description="Count indexed item reads during the solve"
    )
    catalogue: CatalogueConfig | None = Field(default=None, description="Explicit catalogue")
    generator: GeneratorConfig | None = Field(default=None, description="Random catalogue")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Resolve aliases to the canonical strategy name."""
        try:
            return StrategyRegistry.resolve(v)
        except StrategyError as e:
            raise ValueError(e.message) from e

    @model_validator(mode="after")
    def check_catalogue_source(self) -> "SolveConfig":
        """Exactly one of 'catalogue' and 'generator' must be set."""
        if (self.catalogue is None) == (self.generator is None):
            raise ValueError("Set exactly one of 'catalogue' or 'generator'")
        return self
