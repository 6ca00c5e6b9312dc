"""
Centralized error handling and logging system.
"""

import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from conquest.core.logging import get_logger


class ConquestError(Exception):
    """Base class for caller errors raised by the simulation core."""


class GameSetupError(ConquestError, ValueError):
    """Raised when a game cannot be constructed or a setup step is misused."""


class InvalidMutationError(ConquestError, ValueError):
    """Raised when a mutation would break a territory or roster invariant."""


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the game's error handling system."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class GameError:
    """Represents a game error with severity, context, and optional exception information."""
    message: str
    severity: ErrorSeverity
    context: dict[str, Any]
    exception: Optional[Exception] = None


class ErrorHandler:
    """Centralized error handling for the game."""

    def __init__(self) -> None:
        """Initialize the ErrorHandler with a logger and empty error history."""
        self.logger = get_logger("conquest.errors")
        self.error_history: list[GameError] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> None:
        """Handle an error based on its severity."""
        error = GameError(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(error)

        if error.context:
            context_str = " ".join(f"{k}={v}" for k, v in error.context.items())
            message = f"{message} [{context_str}]"

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"CRITICAL: {message}")
            if error.exception:
                self.logger.critical(
                    "".join(traceback.format_exception(error.exception))
                )
        elif error.severity == ErrorSeverity.HIGH:
            self.logger.error(f"ERROR: {message}")
        elif error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"WARNING: {message}")
        else:
            self.logger.info(f"INFO: {message}")

    def clear(self) -> None:
        """Forget every recorded error."""
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()


def log_warning(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log a warning-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.MEDIUM, context, exception)


def log_error(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log an error-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.HIGH, context, exception)


def log_critical(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log a critical-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.CRITICAL, context, exception)


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# These helpers validate inputs with consistent logging. The require_* helpers
# raise, the ensure_* helpers correct the value and keep going.


def require_non_empty_string(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a non-empty string.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        ValueError: If validation fails
    """
    if not isinstance(value, str) or not value.strip():
        log_error(
            f"{param_name} must be a non-empty string, got: {value!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "type": type(value).__name__,
            },
        )
        raise ValueError(f"Invalid {param_name}: {value!r}")
    return value


def ensure_max_length(
    value: str,
    param_name: str,
    max_length: int,
    context: Optional[dict[str, Any]] = None,
) -> str:
    """
    Ensures a string fits in max_length characters, truncating if needed.
    Logs a warning when the value is truncated.

    Args:
        value: The string to check
        param_name: Human-readable parameter name for error messages
        max_length: Maximum number of characters allowed
        context: Additional context for logging

    Returns:
        str: The value, truncated to max_length characters
    """
    if len(value) > max_length:
        truncated = value[:max_length]
        log_warning(
            f"{param_name} longer than {max_length} characters, truncating to {truncated!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "length": len(value),
            },
        )
        return truncated
    return value


def ensure_int_in_range(
    value: Any,
    param_name: str,
    min_val: int,
    max_val: Optional[int] = None,
    default: Optional[int] = None,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Ensures a value is an integer within the specified range, correcting if needed.
    Logs a warning for out-of-range values but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive), None for no maximum
        default: Default value if correction is needed, uses min_val if None
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if default is None:
        default = min_val

    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or value < min_val
        or (max_val is not None and value > max_val)
    ):
        range_desc = (
            f">= {min_val}" if max_val is None else f"between {min_val} and {max_val}"
        )
        log_warning(
            f"{param_name} must be integer {range_desc}, got: {value}, correcting",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "min_val": min_val,
                "max_val": max_val,
            },
        )

        try:
            converted = int(value) if isinstance(value, (int, float)) else default
        except (ValueError, TypeError, OverflowError):
            return default
        if converted < min_val:
            return min_val
        if max_val is not None and converted > max_val:
            return max_val
        return converted
    return value
