"""
Tests for players and the player roster.
"""

import pytest
from conquest.core.error_handling import GameSetupError, InvalidMutationError
from conquest.world.player import Player, PlayerRoster
from conquest.world.territory import TerritoryStore
from pydantic import ValidationError


@pytest.fixture
def roster():
    return PlayerRoster(
        [
            Player(name="Alice", faction_color="Red"),
            Player(name="Bob", faction_color="Blue"),
            Player(name="Carol", faction_color="Green"),
        ]
    )


@pytest.fixture
def store():
    """Four territories: two red, one blue, one of a color nobody plays."""
    store = TerritoryStore.from_names(["A", "B", "C", "D"])
    for index, color in enumerate(["Red", "Blue", "Red", "Black"]):
        store.set_owner(index, color, "Someone")
        store.set_troops(index, 3)
    return store


def test_player_defaults():
    """Test a freshly created player."""
    player = Player(name="Alice", faction_color="red")
    assert player.faction_color == "Red"
    assert player.mission_id is None
    assert player.active is True
    assert player.territories_owned == 0


def test_player_requires_name_and_color():
    """Test that a player needs a name and a color."""
    with pytest.raises(ValidationError):
        Player(name="", faction_color="Red")
    with pytest.raises(ValidationError):
        Player(name="Alice", faction_color=" ")


def test_roster_requires_players():
    """Test that a roster cannot be empty."""
    with pytest.raises(GameSetupError):
        PlayerRoster([])


def test_roster_rejects_duplicate_colors():
    """Test that colors must be unique after normalization."""
    with pytest.raises(GameSetupError):
        PlayerRoster(
            [
                Player(name="Alice", faction_color="red"),
                Player(name="Bob", faction_color="RED"),
            ]
        )


def test_roster_accessors(roster):
    """Test lookups on the roster."""
    assert len(roster) == 3
    assert roster.get(1).name == "Bob"
    assert roster.index_of_color("green") == 2
    assert roster.index_of_color("Black") is None
    with pytest.raises(InvalidMutationError):
        roster.get(3)


def test_recompute_standings(roster, store):
    """Test that territories are counted and empty-handed players eliminated."""
    eliminated = roster.recompute_standings(store)

    assert [p.territories_owned for p in roster] == [2, 1, 0]
    assert eliminated == [2]
    assert roster.get(2).active is False
    assert roster.active_count() == 2
    assert [p.name for p in roster.active_players()] == ["Alice", "Bob"]


def test_recompute_standings_eliminates_once(roster, store):
    """Test that an eliminated player is reported only once."""
    roster.recompute_standings(store)
    store.set_owner(1, "Red", "Alice")

    eliminated = roster.recompute_standings(store)

    assert eliminated == [1]
    assert [p.territories_owned for p in roster] == [3, 0, 0]
    assert roster.active_count() == 1


def test_recompute_standings_zeroes_stale_counts(roster, store):
    """Test that counts are recomputed from scratch."""
    roster.get(0).territories_owned = 10
    roster.recompute_standings(store)
    assert roster.get(0).territories_owned == 2
