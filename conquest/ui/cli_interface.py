"""
User interface module for the conquest simulator.

Provides the console front-end: rich tables for the map, the players and
the battle reports, and prompt_toolkit prompts that keep asking until the
answer is valid. The simulation core never talks to the console; only this
module and the entry point do.
"""

from typing import Any

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from conquest.combat.combat_resolver import BattleReport
from conquest.core.constants import CombatOutcome, FinishReason, RejectionReason, colorize_faction
from conquest.core.utils import ccapture, cprint, crule, make_bar
from conquest.game.game_state import GameState
from conquest.missions.mission_catalog import describe
from conquest.world.player import PlayerRoster
from conquest.world.territory import MapStatistics, TerritoryStore


def territory_table(store: TerritoryStore, title: str = "Territories") -> Table:
    """
    Builds the table listing every territory of the map, numbered from 1.

    Args:
        store (TerritoryStore): The map.
        title (str): The table title.

    Returns:
        Table: The rich table.

    """
    strongest = max((t.troop_count for t in store), default=0)
    table = Table(title=title, pad_edge=False)
    table.add_column("#", style="cyan")
    table.add_column("Territory", style="bold")
    table.add_column("Owner")
    table.add_column("Faction")
    table.add_column("Troops", justify="right")
    table.add_column("")
    for i, territory in enumerate(store, 1):
        table.add_row(
            str(i),
            territory.colored_name,
            territory.owner_name or "-",
            colorize_faction(territory.faction_color, territory.faction_color or "-"),
            str(territory.troop_count),
            make_bar(territory.troop_count, strongest, color="green"),
        )
    return table


def standings_table(roster: PlayerRoster, show_missions: bool = False) -> Table:
    """
    Builds the table of the players and the territories they hold.

    Args:
        roster (PlayerRoster): The players.
        show_missions (bool): Whether to reveal each player's mission.

    Returns:
        Table: The rich table.

    """
    table = Table(title="Players", pad_edge=False)
    table.add_column("Player", style="bold")
    table.add_column("Faction")
    table.add_column("Status")
    table.add_column("Territories", justify="right")
    if show_missions:
        table.add_column("Mission")
    for player in roster:
        status = "[green]active[/]" if player.active else "[dim red]eliminated[/]"
        row = [
            player.colored_name,
            colorize_faction(player.faction_color, player.faction_color),
            status,
            str(player.territories_owned),
        ]
        if show_missions:
            if player.mission_id is None:
                row.append("-")
            else:
                row.append(f"{player.mission_id.emoji} {describe(player.mission_id).title}")
        table.add_row(*row)
    return table


def battle_table(report: BattleReport) -> Table:
    """
    Builds the table summarizing one battle.

    Args:
        report (BattleReport): The battle to show.

    Returns:
        Table: The rich table.

    """
    table = Table(
        title=f"{report.outcome.emoji} {report.outcome.colored_name}",
        pad_edge=False,
    )
    table.add_column("Side", style="bold")
    table.add_column("Territory")
    table.add_column("Die", justify="right")
    table.add_column("Troops", justify="right")
    table.add_row(
        "Attacker",
        colorize_faction(report.attacker_color, report.attacker_name),
        str(report.attacker_roll),
        f"{report.attacker_troops_before} → {report.attacker_troops_after}",
    )
    table.add_row(
        "Defender",
        colorize_faction(report.defender_color_before, report.defender_name),
        str(report.defender_roll),
        f"{report.defender_troops_before} → {report.defender_troops_after}",
    )
    return table


def statistics_table(stats: MapStatistics) -> Table:
    """Builds the table of the map statistics."""
    table = Table(title="Map statistics", pad_edge=False, show_header=False)
    table.add_column("Figure", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Territories", str(stats.total_territories))
    table.add_row("Total troops", str(stats.total_troops))
    table.add_row("Average troops", f"{stats.average_troops:.1f}")
    table.add_row(
        "Strongest territory",
        f"{stats.strongest_name} ({stats.strongest_owner}, {stats.strongest_troops} troops)",
    )
    return table


class ConquestInterface:
    """
    Console interface used by the entry point to play a game.

    Prompts are read through a prompt_toolkit session, created on first use
    unless one is given.
    """

    def __init__(self, session: Any = None) -> None:
        self._session = session

    @property
    def session(self) -> Any:
        if self._session is None:
            self._session = PromptSession(erase_when_done=False)
        return self._session

    def _ask(self, question: str) -> str:
        answer = self.session.prompt(ANSI(ccapture(question) + " "))
        return answer.strip() if isinstance(answer, str) else ""

    def ask_int(self, question: str, min_val: int, max_val: int) -> int:
        """
        Keeps asking until the user types an integer in [min_val, max_val].

        Args:
            question (str): The question to show.
            min_val (int): Lowest accepted value.
            max_val (int): Highest accepted value.

        Returns:
            int: The accepted value.

        """
        while True:
            answer = self._ask(f"{question} [dim]({min_val}-{max_val})[/]")
            try:
                value = int(answer)
            except ValueError:
                value = None
            if value is not None and min_val <= value <= max_val:
                return value
            cprint(f"[red]Please enter a number between {min_val} and {max_val}.[/]")

    def ask_name(self, question: str, default: str) -> str:
        """Asks for a name, falling back to the default on an empty answer."""
        answer = self._ask(f"{question} [dim](default: {default})[/]")
        return answer or default

    def ask_yes_no(self, question: str) -> bool:
        """Asks a yes/no question; anything but an explicit yes counts as no."""
        answer = self._ask(f"{question} [dim](y/N)[/]")
        return answer.lower() in ("y", "yes")

    def ask_attack(self, store: TerritoryStore) -> tuple[int, int]:
        """
        Asks for the attacking and the defending territory.

        Returns:
            tuple[int, int]: The zero-based attacker and defender indices.

        """
        attacker = self.ask_int("🏴 Attacking territory", 1, len(store))
        defender = self.ask_int("🏰 Defending territory", 1, len(store))
        return attacker - 1, defender - 1

    def show_intro(self) -> None:
        crule("Territory Conquest", style="bold green")
        cprint(
            "Every player holds a secret mission. Battles are decided by one die per side: "
            "the attacker wins on a higher roll and moves half of their troops in, "
            "otherwise the attacker loses a troop. Only enemy territories can be attacked.\n",
            style="bold blue",
        )

    def show_map(self, store: TerritoryStore, title: str = "Territories") -> None:
        cprint(territory_table(store, title))

    def show_standings(self, roster: PlayerRoster, show_missions: bool = False) -> None:
        cprint(standings_table(roster, show_missions))

    def show_missions(self, roster: PlayerRoster) -> None:
        crule("Missions", style="bold yellow", characters="-")
        for player in roster:
            if player.mission_id is None:
                continue
            mission = describe(player.mission_id)
            note = ""
            if not mission.implemented:
                note = " [dim](cannot be completed yet)[/]"
            elif mission.simplified:
                note = " [dim](checked on the current map)[/]"
            cprint(f"{player.mission_id.emoji} {player.colored_name}: {mission}{note}")

    def show_battle(self, report: BattleReport) -> None:
        cprint(battle_table(report))
        if report.outcome == CombatOutcome.CONQUERED:
            cprint(
                f"🎊 {report.defender_name} was conquered, "
                f"{report.transferred} troops moved in."
            )

    def show_rejection(self, reason: RejectionReason) -> None:
        cprint(f"[bold red]❌ {reason.message}[/]")

    def show_statistics(self, store: TerritoryStore) -> None:
        cprint(statistics_table(store.statistics()))

    def show_final_report(self, state: GameState) -> None:
        """Prints how the game ended, the final standings and the map statistics."""
        crule("Final report", style="bold green")
        winner = state.winner
        if state.finish_reason == FinishReason.MISSION_COMPLETED and winner is not None:
            mission = describe(winner.mission_id)
            cprint(f"🏆 {winner.colored_name} completed their mission and won the game!")
            cprint(f"🎯 Mission: {mission}")
            cprint(f"🏰 Territories held: {winner.territories_owned}")
        elif state.finish_reason == FinishReason.LAST_PLAYER_STANDING:
            if winner is not None:
                cprint(f"🏁 {winner.colored_name} is the last player standing!")
            else:
                cprint("🏁 No player is left standing.")
        else:
            cprint("🏁 The game was stopped without a winner.")
        cprint(f"Game over after {state.turn_number} turns.")
        self.show_standings(state.roster, show_missions=True)
        self.show_statistics(state.territories)
