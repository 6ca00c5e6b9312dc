"""
Turn controller for the conquest simulator.

Drives a game through its phases: setup (missions and territories are
handed out), rounds of attacks, and the terminal phase reached through a
completed mission, attrition, or an explicit stop.
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field, ValidationError

from conquest.combat.combat_resolver import BattleReport, resolve, validate_attack
from conquest.core.config import DEFAULT_SETTINGS, GameSettings
from conquest.core.constants import FinishReason, GamePhase, RejectionReason
from conquest.core.dice import RandomSource
from conquest.core.error_handling import GameSetupError, log_error, log_warning
from conquest.core.logging import log_debug, log_info
from conquest.game.events import (
    AttackRejectedEvent,
    BattleResolvedEvent,
    GameEvent,
    GameFinishedEvent,
    GameStartedEvent,
    PlayerEliminatedEvent,
)
from conquest.game.game_state import GameState
from conquest.missions.mission_catalog import evaluate, random_mission
from conquest.world.player import Player, PlayerRoster
from conquest.world.territory import TerritoryStore


class AttackResult(BaseModel):
    """The answer to an attack request: a battle report or a rejection."""

    attacker_index: int = Field(description="The requested attacking territory.")
    defender_index: int = Field(description="The requested defending territory.")
    report: BattleReport | None = Field(
        default=None,
        description="The battle report, None if the attack was rejected.",
    )
    rejection: RejectionReason | None = Field(
        default=None,
        description="Why the attack was rejected, None if it was resolved.",
    )

    @property
    def accepted(self) -> bool:
        return self.report is not None


class RoundReport(BaseModel):
    """Everything that happened during one call to play_round."""

    turn_number: int = Field(
        description="Resolved rounds before this one, i.e. the zero-based round index.",
    )
    result: AttackResult = Field(description="The outcome of the attack request.")
    eliminated: list[int] = Field(
        default_factory=list,
        description="Roster indices of the players eliminated this round.",
    )
    finished: bool = Field(
        default=False,
        description="Whether the game reached its terminal phase this round.",
    )
    winner_index: int | None = Field(
        default=None,
        description="Roster index of the winner, if the game ended with one.",
    )
    finish_reason: FinishReason | None = Field(
        default=None,
        description="How the game ended, if it did this round.",
    )
    events: list[GameEvent] = Field(
        default_factory=list,
        description="The events recorded during the round.",
    )


# ==============================================================================
# SETUP
# ==============================================================================


def _check_count(value: int, param_name: str, min_val: int, max_val: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not min_val <= value <= max_val:
        log_error(
            f"{param_name} must be an integer between {min_val} and {max_val}",
            {"param_name": param_name, "value": value},
        )
        raise GameSetupError(f"Invalid {param_name}: {value!r} (expected {min_val}-{max_val})")


def _check_names(names: Sequence[str] | None, expected: int, param_name: str) -> None:
    if names is not None and len(names) != expected:
        log_error(
            f"Wrong number of {param_name}",
            {"expected": expected, "got": len(names)},
        )
        raise GameSetupError(f"Expected {expected} {param_name}, got {len(names)}")


def _require_setup_phase(state: GameState, operation: str) -> None:
    if state.phase != GamePhase.SETUP:
        log_error(
            f"{operation} is only allowed during setup",
            {"operation": operation, "phase": state.phase},
        )
        raise GameSetupError(f"Cannot {operation} while the game is {state.phase}")


def new_game(
    num_territories: int,
    num_players: int,
    rng: RandomSource | None = None,
    *,
    player_names: Sequence[str] | None = None,
    territory_names: Sequence[str] | None = None,
    settings: GameSettings | None = None,
) -> GameState:
    """
    Creates a game in the setup phase, with unowned territories and players
    without missions.

    Args:
        num_territories (int): Territories on the map.
        num_players (int): Players in the roster, at most num_territories.
        rng (RandomSource | None): The random source, seeded from the settings if None.
        player_names (Sequence[str] | None): Player names, "Player N" if None.
        territory_names (Sequence[str] | None): Territory names, "Territory N" if None.
        settings (GameSettings | None): Bounds and palette, the defaults if None.

    Returns:
        GameState: The new game.

    Raises:
        GameSetupError: If a count is out of bounds, names are missing or invalid,
            or there are fewer territories than players.

    """
    settings = settings or DEFAULT_SETTINGS
    _check_count(num_territories, "num_territories", settings.min_territories, settings.max_territories)
    _check_count(num_players, "num_players", settings.min_players, settings.max_players)
    if num_territories < num_players:
        log_error(
            "Every player needs at least one territory",
            {"num_territories": num_territories, "num_players": num_players},
        )
        raise GameSetupError(
            f"{num_territories} territories cannot be shared by {num_players} players"
        )
    _check_names(player_names, num_players, "player names")
    _check_names(territory_names, num_territories, "territory names")

    if player_names is None:
        player_names = [f"Player {i + 1}" for i in range(num_players)]
    if territory_names is None:
        territory_names = [f"Territory {i + 1}" for i in range(num_territories)]

    try:
        players = [
            Player(name=name, faction_color=settings.faction_colors[i])
            for i, name in enumerate(player_names)
        ]
        territories = TerritoryStore.from_names(list(territory_names))
    except ValidationError as e:
        log_error("Invalid names for a new game", {"errors": e.error_count()}, e)
        raise GameSetupError(f"Invalid game names: {e}") from e

    state = GameState(
        territories=territories,
        roster=PlayerRoster(players),
        rng=rng if rng is not None else RandomSource(settings.seed),
        settings=settings,
    )
    log_debug(
        "New game created",
        {"territories": num_territories, "players": num_players},
    )
    return state


def assign_missions(state: GameState) -> None:
    """
    Draws one mission per player, uniformly and with repeats allowed.

    Raises:
        GameSetupError: If the game is not in the setup phase.

    """
    _require_setup_phase(state, "assign missions")
    for player in state.roster:
        player.mission_id = random_mission(state.rng)
        log_debug("Mission assigned", {"player": player.name, "mission": player.mission_id})
    state.missions_assigned = True


def distribute_territories(state: GameState) -> None:
    """
    Hands the territories out round-robin: territory i goes to player
    i modulo the number of players, with a random initial garrison.

    Raises:
        GameSetupError: If the game is not in the setup phase.

    """
    _require_setup_phase(state, "distribute territories")
    num_players = len(state.roster)
    for index in range(len(state.territories)):
        player = state.roster.get(index % num_players)
        state.territories.set_owner(index, player.faction_color, player.name)
        state.territories.set_troops(
            index,
            state.rng.randint(
                state.settings.initial_troops_min,
                state.settings.initial_troops_max,
            ),
        )
    state.territories_distributed = True


def start_game(state: GameState) -> None:
    """
    Ends the setup phase and starts the first round.

    Raises:
        GameSetupError: If the game is not in the setup phase, or missions or
            territories have not been handed out yet.

    """
    _require_setup_phase(state, "start the game")
    if not (state.missions_assigned and state.territories_distributed):
        log_error(
            "Missions and territories must be handed out before starting",
            {
                "missions_assigned": state.missions_assigned,
                "territories_distributed": state.territories_distributed,
            },
        )
        raise GameSetupError("Setup is incomplete")
    recompute_standings(state)
    state.phase = GamePhase.IN_PROGRESS
    state.record(
        GameStartedEvent(
            turn_number=state.turn_number,
            num_territories=len(state.territories),
            num_players=len(state.roster),
        )
    )
    log_info(
        "Game started",
        {"territories": len(state.territories), "players": len(state.roster)},
    )


def setup_game(
    num_territories: int,
    num_players: int,
    rng: RandomSource | None = None,
    *,
    player_names: Sequence[str] | None = None,
    territory_names: Sequence[str] | None = None,
    settings: GameSettings | None = None,
) -> GameState:
    """
    Creates a game and runs the whole setup: missions are drawn first, then
    territories are distributed, then the game is started.

    Returns:
        GameState: A game in progress.

    """
    state = new_game(
        num_territories,
        num_players,
        rng,
        player_names=player_names,
        territory_names=territory_names,
        settings=settings,
    )
    assign_missions(state)
    distribute_territories(state)
    start_game(state)
    return state


# ==============================================================================
# ROUNDS
# ==============================================================================


def attack(state: GameState, attacker_index: int, defender_index: int) -> AttackResult:
    """
    Validates and, if legal, resolves one attack.

    A rejected attack leaves the game untouched apart from the recorded
    rejection event.

    Args:
        state (GameState): The game.
        attacker_index (int): Index of the attacking territory.
        defender_index (int): Index of the defending territory.

    Returns:
        AttackResult: The battle report, or the reason the attack was refused.

    """
    if not state.is_in_progress:
        reason: RejectionReason | None = RejectionReason.GAME_NOT_IN_PROGRESS
    else:
        reason = validate_attack(state.territories, attacker_index, defender_index)

    if reason is not None:
        log_warning(
            f"Attack rejected: {reason.message}",
            {
                "attacker": attacker_index,
                "defender": defender_index,
                "reason": reason,
            },
        )
        state.record(
            AttackRejectedEvent(
                turn_number=state.turn_number,
                attacker_index=attacker_index,
                defender_index=defender_index,
                reason=reason,
            )
        )
        return AttackResult(
            attacker_index=attacker_index,
            defender_index=defender_index,
            rejection=reason,
        )

    report = resolve(state.territories, attacker_index, defender_index, state.rng)
    state.record(BattleResolvedEvent(turn_number=state.turn_number, report=report))
    return AttackResult(
        attacker_index=attacker_index,
        defender_index=defender_index,
        report=report,
    )


def recompute_standings(state: GameState) -> list[int]:
    """
    Recounts the territories of every player and eliminates the players
    left without one.

    Returns:
        list[int]: Roster indices of the players eliminated by this call.

    """
    eliminated = state.roster.recompute_standings(state.territories)
    for index in eliminated:
        state.record(
            PlayerEliminatedEvent(
                turn_number=state.turn_number,
                player_index=index,
                player_name=state.roster.get(index).name,
            )
        )
    return eliminated


def check_winner(state: GameState) -> int | None:
    """
    Finds the first active player, in roster order, whose mission is
    complete on the current map. Eliminated players are never considered.

    Returns:
        int | None: Roster index of the winner, None if nobody has won.

    """
    for index, player in enumerate(state.roster):
        if not player.active or player.mission_id is None:
            continue
        if evaluate(player.mission_id, player.faction_color, state.territories):
            return index
    return None


def _finish(state: GameState, reason: FinishReason, winner_index: int | None) -> None:
    state.phase = GamePhase.FINISHED
    state.finish_reason = reason
    state.winner_index = winner_index
    winner = state.winner
    state.record(
        GameFinishedEvent(
            turn_number=state.turn_number,
            reason=reason,
            winner_index=winner_index,
            winner_name=winner.name if winner else None,
            mission_id=winner.mission_id if winner else None,
        )
    )
    log_info(
        "Game finished",
        {
            "reason": reason,
            "winner": winner.name if winner else None,
            "turns": state.turn_number,
        },
    )


def play_round(state: GameState, attacker_index: int, defender_index: int) -> RoundReport:
    """
    Plays one round: the attack, then the standings, the mission check and
    the attrition check.

    The mission check runs before the attrition check, so a player who
    completes their mission with the last conquest wins by mission. A
    rejected attack ends the round early and does not advance the turn
    counter.

    Args:
        state (GameState): The game.
        attacker_index (int): Index of the attacking territory.
        defender_index (int): Index of the defending territory.

    Returns:
        RoundReport: What happened during the round.

    """
    first_event = len(state.history)
    turn_number = state.turn_number
    result = attack(state, attacker_index, defender_index)
    if not result.accepted:
        return RoundReport(
            turn_number=turn_number,
            result=result,
            events=state.history[first_event:],
        )

    eliminated = recompute_standings(state)

    winner_index = check_winner(state)
    if winner_index is not None:
        _finish(state, FinishReason.MISSION_COMPLETED, winner_index)
    elif state.roster.active_count() <= 1:
        survivors = [i for i, player in enumerate(state.roster) if player.active]
        _finish(
            state,
            FinishReason.LAST_PLAYER_STANDING,
            survivors[0] if survivors else None,
        )

    state.turn_number += 1
    return RoundReport(
        turn_number=turn_number,
        result=result,
        eliminated=eliminated,
        finished=state.is_finished,
        winner_index=state.winner_index,
        finish_reason=state.finish_reason,
        events=state.history[first_event:],
    )


def end_session(state: GameState) -> None:
    """
    Stops the game on request of the driver, without a winner.

    Does nothing if the game is already finished.
    """
    if state.is_finished:
        return
    _finish(state, FinishReason.STOPPED, None)
