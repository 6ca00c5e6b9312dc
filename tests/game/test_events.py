"""
Tests for the game history.
"""

import pytest
from conquest.core.constants import CombatOutcome, FinishReason, RejectionReason
from conquest.core.dice import ScriptedRandomSource
from conquest.game.events import (
    AttackRejectedEvent,
    BattleResolvedEvent,
    EventType,
    GameFinishedEvent,
    GameStartedEvent,
)
from conquest.game.turn_controller import end_session, play_round, setup_game


@pytest.fixture
def state():
    rng = ScriptedRandomSource([6, 6, 6, 2, 3, 3, 3])
    return setup_game(5, 2, rng, player_names=["Alice", "Bob"])


def test_history_of_a_short_game(state):
    """Test the events recorded through start, a rejection, a battle and a stop."""
    play_round(state, 0, 2)
    state.rng.push(2, 4)
    play_round(state, 0, 1)
    end_session(state)

    started, rejected, battle, finished = state.history
    assert isinstance(started, GameStartedEvent)
    assert started.num_territories == 5
    assert started.num_players == 2

    assert isinstance(rejected, AttackRejectedEvent)
    assert rejected.reason == RejectionReason.FRIENDLY_FIRE
    assert rejected.turn_number == 0

    assert isinstance(battle, BattleResolvedEvent)
    assert battle.report.outcome == CombatOutcome.REPELLED
    assert battle.turn_number == 0

    assert isinstance(finished, GameFinishedEvent)
    assert finished.reason == FinishReason.STOPPED
    assert finished.winner_name is None
    assert finished.turn_number == 1


def test_event_strings(state):
    """Test the string representation of the events."""
    state.rng.push(5, 2)
    report = play_round(state, 0, 1)
    (event,) = report.events
    assert event.event_type == EventType.BATTLE_RESOLVED
    assert "Territory 1" in str(event)
    assert "CONQUERED" in str(event)
    assert str(state.history[0]) == "GameStartedEvent(territories=5, players=2)"
