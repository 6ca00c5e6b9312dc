"""
Combat system module for the conquest simulator.

This module resolves attacks between territories with one die per side.
"""

from .combat_resolver import (
    BattleReport,
    conquest_transfer,
    resolve,
    validate_attack,
)

__all__ = [
    "BattleReport",
    "conquest_transfer",
    "resolve",
    "validate_attack",
]
