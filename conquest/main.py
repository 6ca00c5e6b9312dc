"""
Main entry point for the Territory Conquest simulator.

Asks for the players and the map, sets the game up, then plays rounds of
attacks until a player completes their mission, a single player is left,
or the user stops.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from conquest.core.config import DEFAULT_SETTINGS, GameSettings
from conquest.core.dice import RandomSource
from conquest.core.error_handling import GameSetupError, ensure_int_in_range, log_critical
from conquest.core.logging import setup_logging
from conquest.core.utils import cprint, crule
from conquest.game.turn_controller import end_session, play_round, setup_game
from conquest.ui.cli_interface import ConquestInterface


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="conquest",
        description="Turn-based territorial conquest with secret missions.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the dice")
    parser.add_argument("--config", type=str, default=None, help="Settings JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(settings: GameSettings, rng: RandomSource, ui: ConquestInterface) -> int:
    """
    Plays one full game on the console.

    Returns:
        int: The process exit code.

    """
    ui.show_intro()

    crule("Game setup", style="bold green", characters="-")
    num_players = ui.ask_int("👥 How many players?", settings.min_players, settings.max_players)
    num_territories = ui.ask_int(
        "🗺️ How many territories?", settings.min_territories, settings.max_territories
    )
    if num_territories < num_players:
        adjusted = ensure_int_in_range(
            num_players + 2,
            "num_territories",
            settings.min_territories,
            settings.max_territories,
        )
        cprint(
            f"[yellow]Every player needs a territory: using {adjusted} territories "
            f"for {num_players} players.[/]"
        )
        num_territories = adjusted

    player_names = [
        ui.ask_name(f"👤 Name of player {i + 1}", f"Player {i + 1}") for i in range(num_players)
    ]
    territory_names = [
        ui.ask_name(f"🏰 Name of territory {i + 1}", f"Territory {i + 1}")
        for i in range(num_territories)
    ]

    try:
        state = setup_game(
            num_territories,
            num_players,
            rng,
            player_names=player_names,
            territory_names=territory_names,
            settings=settings,
        )
    except GameSetupError as e:
        log_critical("Could not set up the game", {"players": num_players}, e)
        return 1

    ui.show_missions(state.roster)
    ui.show_map(state.territories, "Initial map")

    while not state.is_finished:
        crule(f"Turn {state.turn_number + 1}", style="bold cyan")
        ui.show_standings(state.roster)
        ui.show_map(state.territories)
        attacker, defender = ui.ask_attack(state.territories)
        report = play_round(state, attacker, defender)
        if report.result.rejection is not None:
            ui.show_rejection(report.result.rejection)
            continue
        ui.show_battle(report.result.report)
        if report.finished:
            break
        if not ui.ask_yes_no("🎮 Continue to the next turn?"):
            end_session(state)

    ui.show_final_report(state)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    settings = DEFAULT_SETTINGS
    if args.config:
        try:
            settings = GameSettings.load_json(args.config)
        except (OSError, ValueError) as e:
            log_critical("Could not load the settings", {"path": args.config}, e)
            return 1
    seed = args.seed if args.seed is not None else settings.seed

    try:
        return run(settings, RandomSource(seed), ConquestInterface())
    except (KeyboardInterrupt, EOFError):
        cprint("\n[yellow]Game interrupted.[/]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
