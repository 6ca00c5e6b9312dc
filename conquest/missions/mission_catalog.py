"""
Mission catalog for the conquest simulator.

Defines the eight fixed mission templates, the statistics they are judged
on, and the table mapping each mission to its completion predicate.

Missions are evaluated on the current map only: nothing is remembered
between turns. "Strategist" and "Expansionist" are therefore checked as
point-in-time thresholds, and the missions that would need history
("Total Domination", "Liberator", "Fortress") are marked as not
implemented and never complete.
"""

from collections.abc import Callable, Iterable

from pydantic import BaseModel, Field

from conquest.core.constants import MissionId
from conquest.core.dice import RandomSource
from conquest.core.logging import log_debug
from conquest.world.territory import Territory

# Troops a territory needs (strictly more than) to count for the Strategist.
STRONG_TERRITORY_TROOPS = 5


class Mission(BaseModel):
    """Descriptor of a mission template."""

    id: MissionId = Field(
        description="The identifier of the mission.",
    )
    title: str = Field(
        description="Short title shown to the player.",
    )
    description: str = Field(
        description="What the player has to achieve.",
    )
    implemented: bool = Field(
        default=True,
        description="False for missions whose predicate is a stub that never completes.",
    )
    simplified: bool = Field(
        default=False,
        description="True for missions checked as a threshold on the current map only.",
    )

    def __str__(self) -> str:
        return f"{self.title.upper()}: {self.description}"


class MissionStats(BaseModel):
    """Aggregate statistics of one faction, gathered from the map."""

    owned: int = Field(default=0, description="Territories held by the faction.")
    total_troops: int = Field(default=0, description="Troops across the faction's territories.")
    strong_territories: int = Field(
        default=0,
        description=f"Territories of the faction holding more than {STRONG_TERRITORY_TROOPS} troops.",
    )
    total_territories: int = Field(default=0, description="Territories on the whole map.")


# Catalog order is the draw order: a draw of k in [0, 7] selects MISSIONS[k].
MISSIONS: list[Mission] = [
    Mission(
        id=MissionId.CONQUEROR,
        title="Conqueror",
        description="Control at least 5 territories at the same time.",
    ),
    Mission(
        id=MissionId.TOTAL_DOMINATION,
        title="Total Domination",
        description="Completely eliminate 1 player (capture all of their territories).",
        implemented=False,
    ),
    Mission(
        id=MissionId.STRATEGIST,
        title="Strategist",
        description="Hold 3 territories with more than 5 troops each at the same time.",
        simplified=True,
    ),
    Mission(
        id=MissionId.EXPANSIONIST,
        title="Expansionist",
        description="Control at least 4 territories at the same time.",
        simplified=True,
    ),
    Mission(
        id=MissionId.SUPREME_GENERAL,
        title="Supreme General",
        description="Gather more than 30 troops across your territories.",
    ),
    Mission(
        id=MissionId.LIBERATOR,
        title="Liberator",
        description="Conquer territories from at least 3 different players.",
        implemented=False,
    ),
    Mission(
        id=MissionId.FORTRESS,
        title="Fortress",
        description="Repel 5 consecutive attacks without losing a territory.",
        implemented=False,
    ),
    Mission(
        id=MissionId.EMPEROR,
        title="Emperor",
        description="Control more than half of all the territories on the map.",
    ),
]

MISSIONS_BY_ID: dict[MissionId, Mission] = {mission.id: mission for mission in MISSIONS}


def _never(_: MissionStats) -> bool:
    return False


MISSION_PREDICATES: dict[MissionId, Callable[[MissionStats], bool]] = {
    MissionId.CONQUEROR: lambda s: s.owned >= 5,
    MissionId.TOTAL_DOMINATION: _never,
    MissionId.STRATEGIST: lambda s: s.strong_territories >= 3,
    MissionId.EXPANSIONIST: lambda s: s.owned >= 4,
    MissionId.SUPREME_GENERAL: lambda s: s.total_troops > 30,
    MissionId.LIBERATOR: _never,
    MissionId.FORTRESS: _never,
    MissionId.EMPEROR: lambda s: s.owned > s.total_territories // 2,
}


def describe(mission_id: MissionId) -> Mission:
    """Returns the descriptor of a mission."""
    return MISSIONS_BY_ID[mission_id]


def collect_stats(owner_color: str, territories: Iterable[Territory]) -> MissionStats:
    """
    Gathers the statistics of one faction from the map.

    Args:
        owner_color (str): The faction color.
        territories (Iterable[Territory]): The territories of the map.

    Returns:
        MissionStats: The gathered statistics.

    """
    stats = MissionStats()
    for territory in territories:
        stats.total_territories += 1
        if territory.is_owned_by(owner_color):
            stats.owned += 1
            stats.total_troops += territory.troop_count
            if territory.troop_count > STRONG_TERRITORY_TROOPS:
                stats.strong_territories += 1
    return stats


def evaluate(
    mission_id: MissionId,
    owner_color: str,
    territories: Iterable[Territory],
) -> bool:
    """
    Checks whether the faction of the given color currently satisfies a mission.

    This is a pure function of the map: it never mutates a territory and
    keeps no memory of earlier turns.

    Args:
        mission_id (MissionId): The mission to evaluate.
        owner_color (str): The faction the mission belongs to.
        territories (Iterable[Territory]): The territories of the map.

    Returns:
        bool: True if the mission is complete.

    """
    stats = collect_stats(owner_color, territories)
    completed = MISSION_PREDICATES[mission_id](stats)
    log_debug(
        f"Mission {mission_id} evaluated",
        {"color": owner_color, "completed": completed, **stats.model_dump()},
    )
    return completed


def random_mission(rng: RandomSource) -> MissionId:
    """
    Draws a mission uniformly from the catalog.

    Args:
        rng (RandomSource): The random source, asked for a value in [0, 7].

    Returns:
        MissionId: The drawn mission.

    """
    return MISSIONS[rng.randint(0, len(MISSIONS) - 1)].id
