"""
Territory Conquest simulator.

A turn-based territorial conquest game: colored factions fight over a fixed
map with dice, and each player wins by completing a secret mission.
"""

__version__ = "0.1.0"
