"""
World module for the conquest simulator.

This module holds the map and the players: territories with their owners
and troops, and the roster that tracks who is still in the game.
"""

from .player import (
    Player,
    PlayerRoster,
)
from .territory import (
    MapStatistics,
    Territory,
    TerritoryStore,
)

__all__ = [
    # Import from player.py
    "Player",
    "PlayerRoster",
    # Import from territory.py
    "MapStatistics",
    "Territory",
    "TerritoryStore",
]
