"""
Player module for the conquest simulator.

Defines the Player record and the PlayerRoster, which recomputes territory
standings and eliminates players left without ground.
"""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conquest.core.constants import (
    MAX_COLOR_LENGTH,
    MAX_OWNER_NAME_LENGTH,
    MissionId,
    colorize_faction,
    normalize_color,
)
from conquest.core.error_handling import (
    GameSetupError,
    InvalidMutationError,
    ensure_max_length,
    log_error,
    require_non_empty_string,
)
from conquest.core.logging import log_debug, log_info
from conquest.world.territory import Territory


class Player(BaseModel):
    """
    A participant with a faction color, a mission, and an activity status.

    `territories_owned` is only meaningful right after a standings
    recomputation.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        description="The name of the player.",
    )
    faction_color: str = Field(
        description="The normalized color of the player's faction.",
    )
    mission_id: MissionId | None = Field(
        default=None,
        description="The mission assigned to the player, None before assignment.",
    )
    active: bool = Field(
        default=True,
        description="False once the player has been eliminated.",
    )
    territories_owned: int = Field(
        default=0,
        ge=0,
        description="Territories held at the last standings recomputation.",
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        require_non_empty_string(value, "player name")
        return ensure_max_length(value.strip(), "player name", MAX_OWNER_NAME_LENGTH)

    @field_validator("faction_color")
    @classmethod
    def _validate_faction_color(cls, value: str) -> str:
        require_non_empty_string(value, "faction color")
        return ensure_max_length(normalize_color(value), "faction color", MAX_COLOR_LENGTH)

    @property
    def colored_name(self) -> str:
        """Returns the player name in the style of their faction."""
        return colorize_faction(self.faction_color, self.name)

    def __str__(self) -> str:
        status = "active" if self.active else "eliminated"
        return f"{self.name} ({self.faction_color}, {status}, {self.territories_owned} territories)"


class PlayerRoster:
    """
    Holds the players of a game in turn order.

    The roster is sized once at construction. Players are never removed:
    elimination only flips their `active` flag.

    Attributes:
        players (list[Player]):
            The players, addressed by their zero-based index.

    """

    def __init__(self, players: Iterable[Player]) -> None:
        self.players: list[Player] = list(players)
        if not self.players:
            log_error("Cannot create a roster without players")
            raise GameSetupError("A roster needs at least one player")
        colors = [player.faction_color for player in self.players]
        if len(set(colors)) != len(colors):
            log_error("Faction colors must be unique", {"colors": colors})
            raise GameSetupError(f"Duplicate faction colors in roster: {colors}")

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def get(self, index: int) -> Player:
        """
        Returns the player at the given index.

        Raises:
            InvalidMutationError: If the index is out of range.

        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.players):
            log_error("Invalid player index", {"index": index, "size": len(self.players)})
            raise InvalidMutationError(f"Player index {index!r} out of range")
        return self.players[index]

    def index_of_color(self, color: str) -> int | None:
        """Returns the index of the player with the given faction color, if any."""
        normalized = normalize_color(color)
        for index, player in enumerate(self.players):
            if player.faction_color == normalized:
                return index
        return None

    def active_players(self) -> list[Player]:
        """Returns the players still in the game, in roster order."""
        return [player for player in self.players if player.active]

    def active_count(self) -> int:
        """Returns the number of players still in the game."""
        return sum(1 for player in self.players if player.active)

    def recompute_standings(self, territories: Iterable[Territory]) -> list[int]:
        """
        Recounts the territories owned by each player and eliminates every
        active player left without one.

        Each territory is credited to the first player whose faction color
        matches; territories of unknown colors are not credited to anyone.

        Args:
            territories (Iterable[Territory]): The territories of the map.

        Returns:
            list[int]: Indices of the players eliminated by this recomputation.

        """
        counts = [0] * len(self.players)
        for territory in territories:
            index = self.index_of_color(territory.faction_color) if territory.faction_color else None
            if index is not None:
                counts[index] += 1

        eliminated: list[int] = []
        for index, player in enumerate(self.players):
            player.territories_owned = counts[index]
            if player.active and counts[index] == 0:
                player.active = False
                eliminated.append(index)
                log_info(
                    f"{player.name} has been eliminated",
                    {"player": player.name, "color": player.faction_color},
                )

        log_debug(
            "Standings recomputed",
            {p.name: p.territories_owned for p in self.players},
        )
        return eliminated
