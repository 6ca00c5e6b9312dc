"""
Constants and enumerations for the conquest simulator.

Defines the global limits of the game, the faction palette, and the
enumerations for missions, combat outcomes, attack rejections and game
phases used throughout the simulator.
"""

from enum import Enum

# Field length limits, inherited from the fixed-size records of the board.
MAX_TERRITORY_NAME_LENGTH = 29
MAX_OWNER_NAME_LENGTH = 29
MAX_COLOR_LENGTH = 9

# Fixed six-sided combat die.
DIE_MIN = 1
DIE_MAX = 6

# Default faction palette, assigned to players in roster order.
DEFAULT_FACTION_COLORS = ["Red", "Blue", "Green", "Yellow", "Purple", "Orange"]

# Rich styles used when displaying a faction.
FACTION_STYLES = {
    "Red": "bold red",
    "Blue": "bold blue",
    "Green": "bold green",
    "Yellow": "bold yellow",
    "Purple": "bold magenta",
    "Orange": "bold dark_orange",
}


def normalize_color(color: str) -> str:
    """
    Normalizes a faction color: surrounding whitespace is dropped, the first
    letter is upper-cased and the rest lower-cased.

    Args:
        color (str): The raw color name.

    Returns:
        str: The normalized color name.

    """
    return color.strip().capitalize()


def colorize_faction(color: str, message: str) -> str:
    """Wraps a message in the rich style of the given faction color."""
    style = FACTION_STYLES.get(normalize_color(color), "bold white")
    return f"[{style}]{message}[/]"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().title()


class MissionId(NiceEnum):
    """Identifies one of the eight fixed mission templates."""

    CONQUEROR = "CONQUEROR"
    TOTAL_DOMINATION = "TOTAL_DOMINATION"
    STRATEGIST = "STRATEGIST"
    EXPANSIONIST = "EXPANSIONIST"
    SUPREME_GENERAL = "SUPREME_GENERAL"
    LIBERATOR = "LIBERATOR"
    FORTRESS = "FORTRESS"
    EMPEROR = "EMPEROR"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this mission."""
        return {
            MissionId.CONQUEROR: "🏰",
            MissionId.TOTAL_DOMINATION: "💀",
            MissionId.STRATEGIST: "🧠",
            MissionId.EXPANSIONIST: "🗺️",
            MissionId.SUPREME_GENERAL: "🎖️",
            MissionId.LIBERATOR: "🕊️",
            MissionId.FORTRESS: "🛡️",
            MissionId.EMPEROR: "👑",
        }.get(self, "❔")


class CombatOutcome(NiceEnum):
    """Defines the possible results of a resolved attack."""

    CONQUERED = "CONQUERED"
    REPELLED = "REPELLED"
    DRAW = "DRAW"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this outcome."""
        return {
            CombatOutcome.CONQUERED: "🏆",
            CombatOutcome.REPELLED: "🛡️",
            CombatOutcome.DRAW: "🤝",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this outcome."""
        return {
            CombatOutcome.CONQUERED: "bold green",
            CombatOutcome.REPELLED: "bold red",
            CombatOutcome.DRAW: "bold yellow",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies outcome color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class RejectionReason(NiceEnum):
    """Defines why an attack request was refused without touching the map."""

    INVALID_INDEX = "INVALID_INDEX"
    SELF_TARGET = "SELF_TARGET"
    FRIENDLY_FIRE = "FRIENDLY_FIRE"
    INSUFFICIENT_TROOPS = "INSUFFICIENT_TROOPS"
    GAME_NOT_IN_PROGRESS = "GAME_NOT_IN_PROGRESS"

    @property
    def message(self) -> str:
        """Returns a human readable explanation of the rejection."""
        return {
            RejectionReason.INVALID_INDEX: "Territory index out of range.",
            RejectionReason.SELF_TARGET: "A territory cannot attack itself.",
            RejectionReason.FRIENDLY_FIRE: "Cannot attack a territory of the same color.",
            RejectionReason.INSUFFICIENT_TROOPS: "The attacker needs at least 2 troops.",
            RejectionReason.GAME_NOT_IN_PROGRESS: "The game is not in progress.",
        }.get(self, "Unknown reason.")


class GamePhase(NiceEnum):
    """Defines the phases of a game session."""

    SETUP = "SETUP"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


class FinishReason(NiceEnum):
    """Defines how a finished game ended."""

    MISSION_COMPLETED = "MISSION_COMPLETED"
    LAST_PLAYER_STANDING = "LAST_PLAYER_STANDING"
    STOPPED = "STOPPED"
