"""
Territory module for the conquest simulator.

Defines the Territory record and the TerritoryStore, the fixed-size map that
owns every territory of a game and guards the mutations applied to them.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conquest.core.constants import (
    MAX_COLOR_LENGTH,
    MAX_OWNER_NAME_LENGTH,
    MAX_TERRITORY_NAME_LENGTH,
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


class Territory(BaseModel):
    """
    A unit of owned ground with a faction color and a troop count.

    Assignments are validated, so no code path can store a negative troop
    count or an over-long name.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        description="The name of the territory.",
    )
    owner_name: str = Field(
        default="",
        description="The name of the commander holding the territory.",
    )
    faction_color: str = Field(
        default="",
        description="The normalized color of the occupying faction.",
    )
    troop_count: int = Field(
        default=0,
        ge=0,
        description="Number of troops stationed in the territory.",
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        require_non_empty_string(value, "territory name")
        return ensure_max_length(value.strip(), "territory name", MAX_TERRITORY_NAME_LENGTH)

    @field_validator("owner_name")
    @classmethod
    def _validate_owner_name(cls, value: str) -> str:
        return ensure_max_length(value.strip(), "owner name", MAX_OWNER_NAME_LENGTH)

    @field_validator("faction_color")
    @classmethod
    def _validate_faction_color(cls, value: str) -> str:
        return ensure_max_length(normalize_color(value), "faction color", MAX_COLOR_LENGTH)

    def is_owned_by(self, color: str) -> bool:
        """
        Checks whether the territory belongs to the faction of the given color.

        Args:
            color (str): The faction color, in any case.

        Returns:
            bool: True if the territory's faction color matches.

        """
        return bool(self.faction_color) and self.faction_color == normalize_color(color)

    @property
    def colored_name(self) -> str:
        """Returns the territory name in the style of its faction."""
        return colorize_faction(self.faction_color, self.name)

    def __str__(self) -> str:
        return f"{self.name} ({self.owner_name}, {self.faction_color}, {self.troop_count} troops)"


class MapStatistics(BaseModel):
    """Aggregate figures about the whole map."""

    total_territories: int = Field(description="Number of territories on the map.")
    total_troops: int = Field(description="Troops stationed across the map.")
    average_troops: float = Field(description="Average troops per territory.")
    strongest_index: int = Field(description="Index of the most garrisoned territory.")
    strongest_name: str = Field(description="Name of the most garrisoned territory.")
    strongest_owner: str = Field(description="Owner of the most garrisoned territory.")
    strongest_troops: int = Field(description="Troops in the most garrisoned territory.")


class TerritoryStore:
    """
    Holds the territories of a game and exposes safe mutation of their
    ownership and troop counts.

    The store is sized once at construction; territories are never added or
    removed afterwards, only their fields change.

    Attributes:
        territories (list[Territory]):
            The territories, addressed by their zero-based index.

    """

    def __init__(self, territories: list[Territory]) -> None:
        if not territories:
            log_error("Cannot create a territory store without territories")
            raise GameSetupError("A territory store needs at least one territory")
        self.territories: list[Territory] = list(territories)

    @classmethod
    def from_names(cls, names: list[str]) -> "TerritoryStore":
        """
        Creates an unowned, empty territory for each name.

        Args:
            names (list[str]): The territory names, in map order.

        Returns:
            TerritoryStore: The new store.

        """
        return cls([Territory(name=name) for name in names])

    def __len__(self) -> int:
        return len(self.territories)

    def __iter__(self) -> Iterator[Territory]:
        return iter(self.territories)

    def is_valid_index(self, index: int) -> bool:
        """Checks whether index addresses a territory of the store."""
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self.territories)
        )

    def _check_index(self, index: int, operation: str) -> None:
        if not self.is_valid_index(index):
            log_error(
                f"Invalid territory index for {operation}",
                {"index": index, "size": len(self.territories)},
            )
            raise InvalidMutationError(
                f"Territory index {index!r} out of range [0, {len(self.territories) - 1}]"
            )

    def get(self, index: int) -> Territory:
        """
        Returns the territory at the given index.

        Raises:
            InvalidMutationError: If the index is out of range.

        """
        self._check_index(index, "get")
        return self.territories[index]

    def set_owner(self, index: int, color: str, owner_name: str) -> None:
        """
        Hands a territory over to a faction.

        Args:
            index (int): The territory index.
            color (str): The new faction color (normalized on assignment).
            owner_name (str): The name of the new owner.

        Raises:
            InvalidMutationError: If the index is out of range, the color is blank
                or the owner name is not a string.

        """
        self._check_index(index, "set_owner")
        if not isinstance(color, str) or not color.strip():
            log_error("Faction color must be a non-empty string", {"index": index, "color": color})
            raise InvalidMutationError(f"Invalid faction color: {color!r}")
        if not isinstance(owner_name, str):
            log_error("Owner name must be a string", {"index": index, "owner_name": owner_name})
            raise InvalidMutationError(f"Invalid owner name: {owner_name!r}")
        territory = self.territories[index]
        territory.faction_color = color
        territory.owner_name = owner_name

    def set_troops(self, index: int, troops: int) -> None:
        """
        Sets the troop count of a territory.

        Args:
            index (int): The territory index.
            troops (int): The new troop count, must be non-negative.

        Raises:
            InvalidMutationError: If the index is out of range or troops is negative.

        """
        self._check_index(index, "set_troops")
        if isinstance(troops, bool) or not isinstance(troops, int) or troops < 0:
            log_error(
                "Troop count must be a non-negative integer",
                {"index": index, "troops": troops},
            )
            raise InvalidMutationError(f"Invalid troop count: {troops!r}")
        self.territories[index].troop_count = troops

    def indices_owned_by(self, color: str) -> list[int]:
        """Returns the indices of the territories held by the given faction."""
        return [i for i, territory in enumerate(self.territories) if territory.is_owned_by(color)]

    def statistics(self) -> MapStatistics:
        """
        Computes aggregate figures about the map.

        The strongest territory is the first one holding the highest troop
        count.

        Returns:
            MapStatistics: The computed statistics.

        """
        total_troops = sum(t.troop_count for t in self.territories)
        strongest_index = max(
            range(len(self.territories)),
            key=lambda i: (self.territories[i].troop_count, -i),
        )
        strongest = self.territories[strongest_index]
        return MapStatistics(
            total_territories=len(self.territories),
            total_troops=total_troops,
            average_troops=total_troops / len(self.territories),
            strongest_index=strongest_index,
            strongest_name=strongest.name,
            strongest_owner=strongest.owner_name,
            strongest_troops=strongest.troop_count,
        )
