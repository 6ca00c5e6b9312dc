"""
Core system module for the conquest simulator.

This module contains the fundamental components shared by the rest of the
simulator: game constants, the random sources, configuration, logging,
error handling and display utilities.
"""

from .config import (
    DEFAULT_SETTINGS,
    GameSettings,
)
from .constants import (
    DEFAULT_FACTION_COLORS,
    DIE_MAX,
    DIE_MIN,
    MAX_COLOR_LENGTH,
    MAX_OWNER_NAME_LENGTH,
    MAX_TERRITORY_NAME_LENGTH,
    CombatOutcome,
    FinishReason,
    GamePhase,
    MissionId,
    RejectionReason,
    colorize_faction,
    normalize_color,
)
from .dice import (
    RandomSource,
    ScriptedRandomSource,
)
from .error_handling import (
    ERROR_HANDLER,
    ConquestError,
    GameSetupError,
    InvalidMutationError,
    log_critical,
    log_error,
    log_warning,
)
from .logging import (
    get_logger,
    log_debug,
    log_info,
    setup_logging,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from config.py
    "DEFAULT_SETTINGS",
    "GameSettings",
    # Import from constants.py
    "DEFAULT_FACTION_COLORS",
    "DIE_MAX",
    "DIE_MIN",
    "MAX_COLOR_LENGTH",
    "MAX_OWNER_NAME_LENGTH",
    "MAX_TERRITORY_NAME_LENGTH",
    "CombatOutcome",
    "FinishReason",
    "GamePhase",
    "MissionId",
    "RejectionReason",
    "colorize_faction",
    "normalize_color",
    # Import from dice.py
    "RandomSource",
    "ScriptedRandomSource",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "ConquestError",
    "GameSetupError",
    "InvalidMutationError",
    "log_critical",
    "log_error",
    "log_warning",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_info",
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
