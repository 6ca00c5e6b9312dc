"""
Game state module for the conquest simulator.

GameState is the single mutable aggregate of one session: the map, the
roster, the random source and the turn bookkeeping. Every operation of the
turn controller receives it explicitly.
"""

from conquest.core.config import GameSettings
from conquest.core.constants import FinishReason, GamePhase
from conquest.core.dice import RandomSource
from conquest.game.events import GameEvent
from conquest.world.player import Player, PlayerRoster
from conquest.world.territory import TerritoryStore


class GameState:
    """
    Holds everything that changes while a game is played.

    Attributes:
        territories (TerritoryStore):
            The map.
        roster (PlayerRoster):
            The players, in turn order.
        rng (RandomSource):
            The random source used for every draw.
        settings (GameSettings):
            The settings the game was created with.
        phase (GamePhase):
            The current phase of the game.
        turn_number (int):
            Number of resolved rounds so far.
        missions_assigned (bool):
            Whether every player has been given a mission.
        territories_distributed (bool):
            Whether the map has been handed out to the players.
        winner_index (int | None):
            Roster index of the winner once the game is finished.
        finish_reason (FinishReason | None):
            How the game ended, None while it is still running.
        history (list[GameEvent]):
            Every event recorded since the game was created.

    """

    def __init__(
        self,
        territories: TerritoryStore,
        roster: PlayerRoster,
        rng: RandomSource,
        settings: GameSettings,
    ) -> None:
        self.territories = territories
        self.roster = roster
        self.rng = rng
        self.settings = settings
        self.phase: GamePhase = GamePhase.SETUP
        self.turn_number: int = 0
        self.missions_assigned: bool = False
        self.territories_distributed: bool = False
        self.winner_index: int | None = None
        self.finish_reason: FinishReason | None = None
        self.history: list[GameEvent] = []

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def is_in_progress(self) -> bool:
        return self.phase == GamePhase.IN_PROGRESS

    @property
    def winner(self) -> Player | None:
        """Returns the winning player, if the game has one."""
        if self.winner_index is None:
            return None
        return self.roster.get(self.winner_index)

    def record(self, event: GameEvent) -> GameEvent:
        """Appends an event to the history and returns it."""
        self.history.append(event)
        return event

    def __repr__(self) -> str:
        return (
            f"GameState(phase={self.phase}, turn={self.turn_number}, "
            f"territories={len(self.territories)}, players={len(self.roster)})"
        )
