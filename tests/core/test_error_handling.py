"""
Tests for the error handler and the validation helpers.
"""

import pytest
from conquest.core.error_handling import (
    ERROR_HANDLER,
    ConquestError,
    ErrorSeverity,
    GameSetupError,
    InvalidMutationError,
    ensure_int_in_range,
    ensure_max_length,
    log_critical,
    require_non_empty_string,
)


@pytest.fixture(autouse=True)
def clean_history():
    ERROR_HANDLER.clear()
    yield
    ERROR_HANDLER.clear()


def test_exception_hierarchy():
    """Test that caller errors are both ConquestError and ValueError."""
    assert issubclass(GameSetupError, ConquestError)
    assert issubclass(GameSetupError, ValueError)
    assert issubclass(InvalidMutationError, ConquestError)
    assert issubclass(InvalidMutationError, ValueError)


def test_require_non_empty_string():
    """Test that blank and non-string values are refused."""
    assert require_non_empty_string("Brazil", "name") == "Brazil"
    with pytest.raises(ValueError):
        require_non_empty_string("   ", "name")
    with pytest.raises(ValueError):
        require_non_empty_string(42, "name")
    assert len(ERROR_HANDLER.error_history) == 2
    assert ERROR_HANDLER.error_history[0].severity == ErrorSeverity.HIGH


def test_ensure_max_length_truncates_with_warning():
    """Test that over-long strings are truncated and a warning recorded."""
    assert ensure_max_length("short", "name", 10) == "short"
    assert ERROR_HANDLER.error_history == []

    assert ensure_max_length("a" * 15, "name", 10) == "a" * 10
    assert len(ERROR_HANDLER.error_history) == 1
    assert ERROR_HANDLER.error_history[0].severity == ErrorSeverity.MEDIUM


def test_ensure_int_in_range():
    """Test that out-of-range values are clamped."""
    assert ensure_int_in_range(4, "players", 2, 6) == 4
    assert ensure_int_in_range(9, "players", 2, 6) == 6
    assert ensure_int_in_range(0, "players", 2, 6) == 2
    assert ensure_int_in_range("three", "players", 2, 6, default=3) == 3
    assert ensure_int_in_range(True, "players", 2, 6) == 2
    assert len(ERROR_HANDLER.error_history) == 4


def test_log_critical_keeps_exception():
    """Test that critical errors keep their exception in the history."""
    error = GameSetupError("broken")
    log_critical("Setup failed", {"players": 9}, error)
    recorded = ERROR_HANDLER.error_history[-1]
    assert recorded.severity == ErrorSeverity.CRITICAL
    assert recorded.exception is error
    assert recorded.context == {"players": 9}
