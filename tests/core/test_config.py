"""
Tests for the game settings.
"""

import json

import pytest
from conquest.core.config import DEFAULT_SETTINGS, GameSettings
from pydantic import ValidationError


def test_default_settings():
    """Test the default bounds and palette."""
    settings = GameSettings()
    assert settings.min_territories == 5
    assert settings.max_territories == 20
    assert settings.min_players == 2
    assert settings.max_players == 6
    assert (settings.dice_min, settings.dice_max) == (1, 6)
    assert (settings.initial_troops_min, settings.initial_troops_max) == (2, 6)
    assert settings.faction_colors == ["Red", "Blue", "Green", "Yellow", "Purple", "Orange"]
    assert settings.seed is None
    assert DEFAULT_SETTINGS == settings


def test_colors_are_normalized():
    """Test that faction colors are case-normalized."""
    settings = GameSettings(
        max_players=2,
        faction_colors=[" red", "BLUE"],
    )
    assert settings.faction_colors == ["Red", "Blue"]


def test_duplicate_colors_rejected():
    """Test that colors equal after normalization are rejected."""
    with pytest.raises(ValidationError):
        GameSettings(max_players=2, faction_colors=["red", "Red"])


def test_too_few_colors_rejected():
    """Test that there must be a color for every possible player."""
    with pytest.raises(ValidationError):
        GameSettings(faction_colors=["Red", "Blue"])


def test_too_long_color_rejected():
    """Test that colors longer than nine characters are rejected."""
    with pytest.raises(ValidationError):
        GameSettings(max_players=2, faction_colors=["Red", "Ultramarine"])


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_territories": 10, "max_territories": 8},
        {"min_players": 4, "max_players": 3},
        {"initial_troops_min": 5, "initial_troops_max": 2},
        {"dice_max": 8},
    ],
)
def test_inconsistent_bounds_rejected(overrides):
    """Test that inconsistent bounds and a non six-sided die are rejected."""
    with pytest.raises(ValidationError):
        GameSettings(**overrides)


def test_load_json(tmp_path):
    """Test loading settings from a JSON file, keeping defaults for missing keys."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"max_territories": 10, "seed": 99}), encoding="utf-8")
    settings = GameSettings.load_json(path)
    assert settings.max_territories == 10
    assert settings.seed == 99
    assert settings.min_territories == 5


def test_load_json_invalid(tmp_path):
    """Test that invalid settings files are rejected."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_players": 1}), encoding="utf-8")
    with pytest.raises(ValidationError):
        GameSettings.load_json(path)
