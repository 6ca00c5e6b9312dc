"""
Event module for the conquest simulator.

Defines the events recorded in a game's history while the turn controller
moves the game through its phases.
"""

from enum import Enum

from pydantic import BaseModel, Field

from conquest.combat.combat_resolver import BattleReport
from conquest.core.constants import FinishReason, MissionId, RejectionReason


class EventType(Enum):
    """Enumeration of available event types."""

    GAME_STARTED = "game_started"  # When the setup phase is over
    ATTACK_REJECTED = "attack_rejected"  # When an attack request is refused
    BATTLE_RESOLVED = "battle_resolved"  # When the dice of an attack are rolled
    PLAYER_ELIMINATED = "player_eliminated"  # When a player loses their last territory
    GAME_FINISHED = "game_finished"  # When the game reaches its terminal phase


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: EventType = Field(
        description="The type of the event.",
    )
    turn_number: int = Field(
        description="The turn during which the event happened.",
    )


class GameStartedEvent(GameEvent):
    """Event data for GAME_STARTED."""

    event_type: EventType = Field(
        default=EventType.GAME_STARTED,
        description="The type of the event.",
    )
    num_territories: int = Field(description="Territories on the map.")
    num_players: int = Field(description="Players in the roster.")

    def __str__(self) -> str:
        return (
            f"GameStartedEvent(territories={self.num_territories}, "
            f"players={self.num_players})"
        )


class AttackRejectedEvent(GameEvent):
    """Event data for ATTACK_REJECTED."""

    event_type: EventType = Field(
        default=EventType.ATTACK_REJECTED,
        description="The type of the event.",
    )
    attacker_index: int = Field(description="The requested attacking territory.")
    defender_index: int = Field(description="The requested defending territory.")
    reason: RejectionReason = Field(description="Why the attack was refused.")

    def __str__(self) -> str:
        return (
            f"AttackRejectedEvent({self.attacker_index} -> {self.defender_index}, "
            f"reason={self.reason})"
        )


class BattleResolvedEvent(GameEvent):
    """Event data for BATTLE_RESOLVED."""

    event_type: EventType = Field(
        default=EventType.BATTLE_RESOLVED,
        description="The type of the event.",
    )
    report: BattleReport = Field(description="The full report of the battle.")

    def __str__(self) -> str:
        return f"BattleResolvedEvent({self.report})"


class PlayerEliminatedEvent(GameEvent):
    """Event data for PLAYER_ELIMINATED."""

    event_type: EventType = Field(
        default=EventType.PLAYER_ELIMINATED,
        description="The type of the event.",
    )
    player_index: int = Field(description="Roster index of the eliminated player.")
    player_name: str = Field(description="Name of the eliminated player.")

    def __str__(self) -> str:
        return f"PlayerEliminatedEvent({self.player_name})"


class GameFinishedEvent(GameEvent):
    """Event data for GAME_FINISHED."""

    event_type: EventType = Field(
        default=EventType.GAME_FINISHED,
        description="The type of the event.",
    )
    reason: FinishReason = Field(description="How the game ended.")
    winner_index: int | None = Field(
        default=None,
        description="Roster index of the winner, None when nobody won.",
    )
    winner_name: str | None = Field(
        default=None,
        description="Name of the winner, None when nobody won.",
    )
    mission_id: MissionId | None = Field(
        default=None,
        description="The mission of the winner, if any.",
    )

    def __str__(self) -> str:
        return f"GameFinishedEvent(reason={self.reason}, winner={self.winner_name})"
