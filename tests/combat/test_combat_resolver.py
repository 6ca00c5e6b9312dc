"""
Tests for the dice combat resolver.
"""

import pytest
from conquest.combat.combat_resolver import conquest_transfer, resolve, validate_attack
from conquest.core.constants import CombatOutcome, RejectionReason
from conquest.core.dice import RandomSource, ScriptedRandomSource
from conquest.world.territory import TerritoryStore


@pytest.fixture
def store():
    """Red holds territories 0 and 2, Blue holds territory 1."""
    store = TerritoryStore.from_names(["Brazil", "Argentina", "Peru"])
    store.set_owner(0, "Red", "Alice")
    store.set_troops(0, 6)
    store.set_owner(1, "Blue", "Bob")
    store.set_troops(1, 2)
    store.set_owner(2, "Red", "Alice")
    store.set_troops(2, 1)
    return store


def snapshot(store):
    return [t.model_dump() for t in store]


def test_validate_legal_attack(store):
    """Test that an attack between enemies with enough troops is legal."""
    assert validate_attack(store, 0, 1) is None


@pytest.mark.parametrize(
    "attacker, defender, reason",
    [
        (0, 3, RejectionReason.INVALID_INDEX),
        (-1, 1, RejectionReason.INVALID_INDEX),
        (3, 3, RejectionReason.INVALID_INDEX),
        (0, 0, RejectionReason.SELF_TARGET),
        (0, 2, RejectionReason.FRIENDLY_FIRE),
        (2, 0, RejectionReason.FRIENDLY_FIRE),
        (2, 1, RejectionReason.INSUFFICIENT_TROOPS),
    ],
)
def test_validate_rejections(store, attacker, defender, reason):
    """Test each rejection, checked in order: index, self, color, troops."""
    before = snapshot(store)
    assert validate_attack(store, attacker, defender) == reason
    assert snapshot(store) == before


def test_resolve_refuses_illegal_attack(store):
    """Test that resolving an illegal attack raises before any write."""
    before = snapshot(store)
    with pytest.raises(ValueError):
        resolve(store, 0, 2, ScriptedRandomSource([6, 1]))
    assert snapshot(store) == before


def test_conquest(store):
    """Test that a conquest hands over the territory and half the attackers."""
    rng = ScriptedRandomSource([5, 2])
    report = resolve(store, 0, 1, rng)

    assert report.outcome == CombatOutcome.CONQUERED
    assert (report.attacker_roll, report.defender_roll) == (5, 2)
    assert report.transferred == 3
    assert report.defender_owner_before == "Bob"
    assert report.defender_color_before == "Blue"
    assert (report.attacker_troops_before, report.attacker_troops_after) == (6, 3)
    assert (report.defender_troops_before, report.defender_troops_after) == (2, 3)

    defender = store.get(1)
    assert defender.faction_color == "Red"
    assert defender.owner_name == "Alice"
    assert defender.troop_count == 3
    assert store.get(0).troop_count == 3
    assert rng.remaining == 0


@pytest.mark.parametrize(
    "troops, transferred, left",
    [(2, 1, 1), (3, 1, 2), (6, 3, 3), (7, 3, 4)],
)
def test_conquest_arithmetic(store, troops, transferred, left):
    """Test that transferred troops are max(1, troops // 2)."""
    store.set_troops(0, troops)
    report = resolve(store, 0, 1, ScriptedRandomSource([6, 1]))
    assert report.transferred == transferred == conquest_transfer(troops)
    assert store.get(1).troop_count == transferred
    assert store.get(0).troop_count == left


def test_repelled(store):
    """Test that a repelled attacker loses exactly one troop."""
    report = resolve(store, 0, 1, ScriptedRandomSource([2, 5]))
    assert report.outcome == CombatOutcome.REPELLED
    assert store.get(0).troop_count == 5
    assert store.get(1).troop_count == 2
    assert store.get(1).faction_color == "Blue"
    assert report.transferred == 0


def test_draw_changes_nothing(store):
    """Test that equal dice leave the map untouched."""
    before = snapshot(store)
    report = resolve(store, 0, 1, ScriptedRandomSource([4, 4]))
    assert report.outcome == CombatOutcome.DRAW
    assert snapshot(store) == before


def test_troops_never_negative():
    """Test that repeated random battles never produce negative troops."""
    rng = RandomSource(seed=1234)
    for _ in range(200):
        store = TerritoryStore.from_names(["A", "B"])
        store.set_owner(0, "Red", "Alice")
        store.set_troops(0, rng.randint(2, 6))
        store.set_owner(1, "Blue", "Bob")
        store.set_troops(1, rng.randint(0, 6))
        while validate_attack(store, 0, 1) is None:
            report = resolve(store, 0, 1, rng)
            assert 1 <= report.attacker_roll <= 6
            assert 1 <= report.defender_roll <= 6
            assert all(t.troop_count >= 0 for t in store)
