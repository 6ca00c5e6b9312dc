"""
Tests for creating and setting up a game.
"""

import pytest
from conquest.core.config import GameSettings
from conquest.core.constants import GamePhase, MissionId
from conquest.core.dice import ScriptedRandomSource
from conquest.core.error_handling import GameSetupError
from conquest.game.events import EventType
from conquest.game.turn_controller import (
    assign_missions,
    distribute_territories,
    new_game,
    setup_game,
    start_game,
)


@pytest.fixture
def rng():
    """Mission draws for two players, then the garrison of five territories."""
    return ScriptedRandomSource([7, 6, 6, 2, 3, 4, 5])


@pytest.fixture
def state(rng):
    return new_game(5, 2, rng, player_names=["Alice", "Bob"])


def test_new_game(state):
    """Test a freshly created game."""
    assert state.phase == GamePhase.SETUP
    assert state.turn_number == 0
    assert len(state.territories) == 5
    assert [t.name for t in state.territories][:2] == ["Territory 1", "Territory 2"]
    assert [p.faction_color for p in state.roster] == ["Red", "Blue"]
    assert all(t.faction_color == "" and t.troop_count == 0 for t in state.territories)
    assert state.history == []


@pytest.mark.parametrize(
    "num_territories, num_players",
    [(4, 2), (21, 2), (5, 1), (8, 7), (5, 6), (True, 2), ("5", 2)],
)
def test_new_game_invalid_counts(num_territories, num_players):
    """Test that out-of-bounds counts, or fewer territories than players, are refused."""
    with pytest.raises(GameSetupError):
        new_game(num_territories, num_players)


def test_new_game_name_count_mismatch():
    """Test that the number of names must match the counts."""
    with pytest.raises(GameSetupError):
        new_game(5, 2, player_names=["Alice"])
    with pytest.raises(GameSetupError):
        new_game(5, 2, territory_names=["A", "B", "C"])


def test_new_game_blank_name():
    """Test that blank names are reported as a setup failure."""
    with pytest.raises(GameSetupError):
        new_game(5, 2, player_names=["Alice", "  "])


def test_new_game_custom_settings():
    """Test that the bounds come from the settings."""
    settings = GameSettings(min_territories=2, max_territories=3)
    state = new_game(3, 2, settings=settings)
    assert len(state.territories) == 3
    with pytest.raises(GameSetupError):
        new_game(5, 2, settings=settings)


def test_new_game_seeded_from_settings():
    """Test that the random source is seeded from the settings when none is given."""
    state = new_game(5, 2, settings=GameSettings(seed=11))
    assert state.rng.seed == 11


def test_assign_missions(state, rng):
    """Test that each player gets the drawn mission."""
    assign_missions(state)
    assert [p.mission_id for p in state.roster] == [MissionId.EMPEROR, MissionId.FORTRESS]
    assert state.missions_assigned
    assert rng.remaining == 5


def test_distribute_territories_round_robin(state):
    """Test that territory i goes to player i modulo the player count."""
    assign_missions(state)
    distribute_territories(state)
    territories = list(state.territories)
    assert [t.faction_color for t in territories] == ["Red", "Blue", "Red", "Blue", "Red"]
    assert [t.owner_name for t in territories] == ["Alice", "Bob", "Alice", "Bob", "Alice"]
    assert [t.troop_count for t in territories] == [6, 2, 3, 4, 5]


def test_start_game_requires_setup(state):
    """Test that the game cannot start before missions and territories are handed out."""
    with pytest.raises(GameSetupError):
        start_game(state)
    assign_missions(state)
    with pytest.raises(GameSetupError):
        start_game(state)
    assert state.phase == GamePhase.SETUP


def test_start_game(state):
    """Test that starting the game computes standings and records the event."""
    assign_missions(state)
    distribute_territories(state)
    start_game(state)
    assert state.phase == GamePhase.IN_PROGRESS
    assert [p.territories_owned for p in state.roster] == [3, 2]
    assert [e.event_type for e in state.history] == [EventType.GAME_STARTED]


def test_setup_steps_refused_after_start(state):
    """Test that setup operations are only allowed during setup."""
    assign_missions(state)
    distribute_territories(state)
    start_game(state)
    with pytest.raises(GameSetupError):
        assign_missions(state)
    with pytest.raises(GameSetupError):
        distribute_territories(state)
    with pytest.raises(GameSetupError):
        start_game(state)


def test_setup_game(rng):
    """Test the whole setup in one call."""
    state = setup_game(5, 2, rng)
    assert state.phase == GamePhase.IN_PROGRESS
    assert rng.remaining == 0
    assert [p.territories_owned for p in state.roster] == [3, 2]
