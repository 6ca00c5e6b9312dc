"""
Combat resolution for the conquest simulator.

One attack is one roll of a six-sided die per side. The higher die wins;
equal dice leave the map as it was. Preconditions are checked before any
field is written, so a rejected attack never mutates the map.
"""

from pydantic import BaseModel, Field

from conquest.core.constants import CombatOutcome, RejectionReason
from conquest.core.dice import RandomSource
from conquest.core.logging import log_debug, log_info
from conquest.world.territory import TerritoryStore


class BattleReport(BaseModel):
    """Everything that happened during one resolved attack."""

    attacker_index: int = Field(description="Index of the attacking territory.")
    defender_index: int = Field(description="Index of the defending territory.")
    attacker_name: str = Field(description="Name of the attacking territory.")
    defender_name: str = Field(description="Name of the defending territory.")
    attacker_color: str = Field(description="Faction color of the attacker.")
    defender_color_before: str = Field(description="Faction color of the defender before the battle.")
    defender_owner_before: str = Field(description="Owner of the defender before the battle.")
    attacker_roll: int = Field(description="The attacker's die.")
    defender_roll: int = Field(description="The defender's die.")
    outcome: CombatOutcome = Field(description="The result of the battle.")
    attacker_troops_before: int = Field(description="Attacker troops before the battle.")
    attacker_troops_after: int = Field(description="Attacker troops after the battle.")
    defender_troops_before: int = Field(description="Defender troops before the battle.")
    defender_troops_after: int = Field(description="Defender troops after the battle.")
    transferred: int = Field(default=0, description="Troops moved into a conquered territory.")

    def __str__(self) -> str:
        return (
            f"{self.attacker_name} ({self.attacker_roll}) vs "
            f"{self.defender_name} ({self.defender_roll}): {self.outcome}"
        )


def validate_attack(
    store: TerritoryStore,
    attacker_index: int,
    defender_index: int,
) -> RejectionReason | None:
    """
    Checks the preconditions of an attack without touching the map.

    Checks run in order: both indices in range, distinct territories,
    different faction colors, and at least 2 attacking troops.

    Args:
        store (TerritoryStore): The map.
        attacker_index (int): Index of the attacking territory.
        defender_index (int): Index of the defending territory.

    Returns:
        RejectionReason | None: The first failed check, None if the attack is legal.

    """
    if not store.is_valid_index(attacker_index) or not store.is_valid_index(defender_index):
        return RejectionReason.INVALID_INDEX
    if attacker_index == defender_index:
        return RejectionReason.SELF_TARGET
    attacker = store.get(attacker_index)
    defender = store.get(defender_index)
    if attacker.faction_color == defender.faction_color:
        return RejectionReason.FRIENDLY_FIRE
    if attacker.troop_count <= 1:
        return RejectionReason.INSUFFICIENT_TROOPS
    return None


def conquest_transfer(attacker_troops: int) -> int:
    """Returns the troops moved into a conquered territory: half the attackers, at least 1."""
    return max(1, attacker_troops // 2)


def resolve(
    store: TerritoryStore,
    attacker_index: int,
    defender_index: int,
    rng: RandomSource,
) -> BattleReport:
    """
    Resolves one attack between two territories.

    The caller must have checked the attack with validate_attack first.

    Args:
        store (TerritoryStore): The map.
        attacker_index (int): Index of the attacking territory.
        defender_index (int): Index of the defending territory.
        rng (RandomSource): Source of the two dice, attacker first.

    Returns:
        BattleReport: The outcome and the troop counts before and after.

    Raises:
        ValueError: If the attack breaks one of its preconditions.

    """
    reason = validate_attack(store, attacker_index, defender_index)
    if reason is not None:
        raise ValueError(f"Illegal attack {attacker_index} -> {defender_index}: {reason}")

    attacker = store.get(attacker_index)
    defender = store.get(defender_index)

    attacker_troops = attacker.troop_count
    defender_troops = defender.troop_count
    defender_color = defender.faction_color
    defender_owner = defender.owner_name

    attacker_roll = rng.roll_die()
    defender_roll = rng.roll_die()
    log_debug(
        "Dice rolled",
        {
            "attacker": attacker.name,
            "attacker_roll": attacker_roll,
            "defender": defender.name,
            "defender_roll": defender_roll,
        },
    )

    transferred = 0
    if attacker_roll > defender_roll:
        outcome = CombatOutcome.CONQUERED
        transferred = conquest_transfer(attacker_troops)
        store.set_owner(defender_index, attacker.faction_color, attacker.owner_name)
        store.set_troops(defender_index, transferred)
        store.set_troops(attacker_index, attacker_troops - transferred)
        log_info(
            f"{attacker.owner_name} conquered {defender.name}",
            {
                "from": attacker.name,
                "previous_owner": defender_owner,
                "transferred": transferred,
            },
        )
    elif defender_roll > attacker_roll:
        outcome = CombatOutcome.REPELLED
        store.set_troops(attacker_index, attacker_troops - 1)
    else:
        outcome = CombatOutcome.DRAW

    return BattleReport(
        attacker_index=attacker_index,
        defender_index=defender_index,
        attacker_name=attacker.name,
        defender_name=defender.name,
        attacker_color=attacker.faction_color,
        defender_color_before=defender_color,
        defender_owner_before=defender_owner,
        attacker_roll=attacker_roll,
        defender_roll=defender_roll,
        outcome=outcome,
        attacker_troops_before=attacker_troops,
        attacker_troops_after=attacker.troop_count,
        defender_troops_before=defender_troops,
        defender_troops_after=defender.troop_count,
        transferred=transferred,
    )
