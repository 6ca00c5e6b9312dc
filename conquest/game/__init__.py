"""
Game module for the conquest simulator.

This module drives a game session: setup, rounds of attacks, eliminations,
and the mission and attrition checks that end the game.
"""

from .events import (
    AttackRejectedEvent,
    BattleResolvedEvent,
    EventType,
    GameEvent,
    GameFinishedEvent,
    GameStartedEvent,
    PlayerEliminatedEvent,
)
from .game_state import (
    GameState,
)
from .turn_controller import (
    AttackResult,
    RoundReport,
    assign_missions,
    attack,
    check_winner,
    distribute_territories,
    end_session,
    new_game,
    play_round,
    recompute_standings,
    setup_game,
    start_game,
)

__all__ = [
    # Import from events.py
    "AttackRejectedEvent",
    "BattleResolvedEvent",
    "EventType",
    "GameEvent",
    "GameFinishedEvent",
    "GameStartedEvent",
    "PlayerEliminatedEvent",
    # Import from game_state.py
    "GameState",
    # Import from turn_controller.py
    "AttackResult",
    "RoundReport",
    "assign_missions",
    "attack",
    "check_winner",
    "distribute_territories",
    "end_session",
    "new_game",
    "play_round",
    "recompute_standings",
    "setup_game",
    "start_game",
]
