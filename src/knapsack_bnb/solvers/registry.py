"""
Registry system for solve strategies.

Maps strategy names used in configuration files and on the command line to
solve functions.
"""

from collections.abc import Callable

from knapsack_bnb.types import SolveFn
from knapsack_bnb.utils.error_handler import StrategyError


class StrategyRegistry:
    """
    Global registry for solve strategies.

    Example:
        >>> @StrategyRegistry.register("my_strategy")
        ... def solve_mine(catalogue):
        ...     return []
        ...
        >>> solve = StrategyRegistry.get("my_strategy")
    """

    _strategies: dict[str, SolveFn] = {}
    _aliases: dict[str, str] = {}

    @classmethod
    def register(cls, name: str, aliases: tuple[str, ...] = ()) -> Callable[[SolveFn], SolveFn]:
        """
        Decorator to register a solve function.

        Args:
            name: Unique name for the strategy
            aliases: Alternative names resolving to the same strategy

        Returns:
            Decorator function
        """

        def wrapper(solve_fn: SolveFn) -> SolveFn:
            for key in (name, *aliases):
                if key in cls._strategies or key in cls._aliases:
                    raise ValueError(f"Strategy '{key}' already registered")
            cls._strategies[name] = solve_fn
            for alias in aliases:
                cls._aliases[alias] = name
            return solve_fn

        return wrapper

    @classmethod
    def resolve(cls, name: str) -> str:
        """Canonical strategy name for ``name`` or one of its aliases."""
        key = name.lower()
        key = cls._aliases.get(key, key)
        if key not in cls._strategies:
            available = ", ".join(cls.list_strategies())
            raise StrategyError(
                f"Strategy '{name}' not found. Available: {available}",
                suggestion="Pick one of the registered strategies.",
            )
        return key

    @classmethod
    def get(cls, name: str) -> SolveFn:
        """
        Get solve function by name.

        Raises:
            StrategyError: If the name is not registered
        """
        return cls._strategies[cls.resolve(name)]

    @classmethod
    def list_strategies(cls) -> list[str]:
        """List canonical strategy names."""
        return list(cls._strategies.keys())
