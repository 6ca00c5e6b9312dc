"""
Mission module for the conquest simulator.

This module holds the catalog of secret missions and the predicates that
decide when a player has completed theirs.
"""

from .mission_catalog import (
    MISSIONS,
    Mission,
    MissionStats,
    collect_stats,
    describe,
    evaluate,
    random_mission,
)

__all__ = [
    "MISSIONS",
    "Mission",
    "MissionStats",
    "collect_stats",
    "describe",
    "evaluate",
    "random_mission",
]
