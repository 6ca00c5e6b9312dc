"""
Game configuration for the conquest simulator.

Holds the bounds a game is created within and the faction palette. Settings
can be loaded from a JSON file; anything not present keeps its default.
"""

import json
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, PositiveInt, field_validator, model_validator

from conquest.core.constants import (
    DEFAULT_FACTION_COLORS,
    DIE_MAX,
    DIE_MIN,
    MAX_COLOR_LENGTH,
    normalize_color,
)


class GameSettings(BaseModel):
    """
    Bounds and defaults used when creating a new game.
    """

    min_territories: PositiveInt = Field(
        default=5,
        description="Minimum number of territories on the map.",
    )
    max_territories: PositiveInt = Field(
        default=20,
        description="Maximum number of territories on the map.",
    )
    min_players: Annotated[int, Field(ge=2)] = Field(
        default=2,
        description="Minimum number of players.",
    )
    max_players: Annotated[int, Field(ge=2)] = Field(
        default=6,
        description="Maximum number of players.",
    )
    dice_min: int = Field(
        default=DIE_MIN,
        description="Lowest face of the combat die.",
    )
    dice_max: int = Field(
        default=DIE_MAX,
        description="Highest face of the combat die.",
    )
    initial_troops_min: Annotated[int, Field(ge=0)] = Field(
        default=2,
        description="Lowest troop count a territory can start with.",
    )
    initial_troops_max: Annotated[int, Field(ge=0)] = Field(
        default=6,
        description="Highest troop count a territory can start with.",
    )
    faction_colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FACTION_COLORS),
        description="Faction colors handed out to players in roster order.",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source, None for an OS-seeded game.",
    )

    @field_validator("faction_colors")
    @classmethod
    def _normalize_colors(cls, colors: list[str]) -> list[str]:
        normalized = [normalize_color(color) for color in colors]
        for color in normalized:
            if not color or len(color) > MAX_COLOR_LENGTH:
                raise ValueError(
                    f"faction color {color!r} must have 1 to {MAX_COLOR_LENGTH} characters"
                )
        if len(set(normalized)) != len(normalized):
            raise ValueError("faction_colors must not contain duplicates")
        return normalized

    @model_validator(mode="after")
    def _check_bounds(self) -> "GameSettings":
        if self.min_territories > self.max_territories:
            raise ValueError("min_territories must not exceed max_territories")
        if self.min_players > self.max_players:
            raise ValueError("min_players must not exceed max_players")
        if self.initial_troops_min > self.initial_troops_max:
            raise ValueError("initial_troops_min must not exceed initial_troops_max")
        if (self.dice_min, self.dice_max) != (DIE_MIN, DIE_MAX):
            raise ValueError(
                f"combat always uses a d{DIE_MAX}: dice range must be [{DIE_MIN}, {DIE_MAX}]"
            )
        if len(self.faction_colors) < self.max_players:
            raise ValueError(
                f"at least {self.max_players} faction colors are required, "
                f"got {len(self.faction_colors)}"
            )
        return self

    @classmethod
    def load_json(cls, path: str | Path) -> "GameSettings":
        """
        Loads and validates settings from a JSON file.

        Args:
            path (str | Path): Path to the JSON file.

        Returns:
            GameSettings: The validated settings.

        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


DEFAULT_SETTINGS = GameSettings()
