"""
Error handling utilities for the knapsack-bnb package and CLI.

Provides the exception hierarchy raised by catalogue validation and
configuration loading, plus a decorator for handling errors in CLI commands
with informative messages and actionable suggestions.
"""

import functools
import math
import numbers
import sys
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class KnapsackError(Exception):
    """Base exception for knapsack-bnb errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(KnapsackError):
    """Error related to configuration files or parameters."""

    pass


class StrategyError(KnapsackError):
    """Error related to selecting a solve strategy."""

    pass


class ValidationError(KnapsackError):
    """Error related to input validation."""

    pass


class DegenerateItemError(ValidationError):
    """Item weight is not positive, so its price/weight ratio is undefined."""

    pass


class NegativePriceError(ValidationError):
    """Item price is negative."""

    pass


class SizeMismatchError(ValidationError):
    """Parallel weight and price sequences have different lengths."""

    pass


class InvalidCapacityError(ValidationError):
    """Knapsack capacity is negative or not a finite real number."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def format_exception_info(exc: Exception, show_traceback: bool = False) -> str:
    """
    Format exception information for display.

    Args:
        exc: The exception to format
        show_traceback: Whether to include full traceback

    Returns:
        Formatted error string
    """
    if isinstance(exc, KnapsackError):
        return exc.format_error()
    elif show_traceback:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        error_type = type(exc).__name__
        return f"Error ({error_type}): {str(exc)}"


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def solve(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except KnapsackError as e:
                click.secho(e.format_error(), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except FileNotFoundError as e:
                msg = f"File not found: {e.filename}"
                suggestion = "Check that the path exists and is spelled correctly."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except click.ClickException:
                # Usage errors are reported by click itself
                raise

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)  # Standard exit code for SIGINT

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    error_type = type(e).__name__
                    click.secho(f"Unexpected error ({error_type}): {str(e)}", fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_real(value: Any, name: str) -> Any:
    """
    Validate that value is a finite real number (bool excluded).

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name} must be a real number, got: {value!r}",
            suggestion=f"Provide an int, float or Fraction for {name}.",
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(
            f"{name} must be finite, got: {value}",
            suggestion=f"Replace NaN/inf values of {name} with a finite number.",
        )
    return value


def require_capacity(value: Any) -> Any:
    """
    Validate a knapsack capacity.

    Args:
        value: Capacity to validate

    Returns:
        Validated value

    Raises:
        InvalidCapacityError: If capacity is negative or not a finite real number
    """
    try:
        require_real(value, "capacity")
    except ValidationError as e:
        raise InvalidCapacityError(e.message, suggestion=e.suggestion) from e
    if value < 0:
        raise InvalidCapacityError(
            f"capacity must be non-negative, got: {value}",
            suggestion="Use a capacity of 0 or more.",
        )
    return value


def require_positive_int(value: int, name: str) -> int:
    """
    Validate that value is a positive integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(
            f"{name} must be positive, got: {value}",
            suggestion=f"Provide a positive integer for {name}.",
        )
    return value
