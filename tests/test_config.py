from __future__ import annotations

from pathlib import Path

import pytest

from tinyrogue.config import Difficulty, DifficultyProfile, Settings
from tinyrogue.errors import ConfigError


def test_defaults_match_presets():
    settings = Settings.load()
    assert (settings.map.width, settings.map.height) == (20, 10)
    assert settings.map.room_count == (3, 6)
    assert settings.player.max_hp == 20
    assert settings.player.attack == 4

    assert settings.profile(Difficulty.EASY) == DifficultyProfile((2, 4), (3, 5), (1, 2), (5, 7))
    assert settings.profile(Difficulty.NORMAL) == DifficultyProfile((3, 6), (4, 8), (2, 3), (3, 5))
    assert settings.profile(Difficulty.HARD) == DifficultyProfile((5, 8), (6, 12), (3, 5), (1, 3))


def test_user_file_is_deep_merged(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text(
        "map:\n  width: 30\ndifficulties:\n  hard:\n    enemy_count: [1, 1]\n",
        encoding="utf-8",
    )
    settings = Settings.load(user)
    assert settings.map.width == 30
    assert settings.map.height == 10
    hard = settings.profile(Difficulty.HARD)
    assert hard.enemy_count == (1, 1)
    assert hard.enemy_hp == (6, 12)


def test_inverted_range_rejected(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("difficulties:\n  easy:\n    enemy_hp: [5, 2]\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(user)


def test_tiny_map_rejected():
    with pytest.raises(ConfigError):
        Settings.from_dict({"map": {"width": 2, "height": 10}})


def test_missing_user_file_rejected(tmp_path: Path):
    with pytest.raises(ConfigError):
        Settings.load(tmp_path / "nope.yaml")


def test_invalid_yaml_rejected(tmp_path: Path):
    user = tmp_path / "broken.yaml"
    user.write_text("map: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(user)


def test_unconfigured_difficulty_rejected():
    settings = Settings.from_dict({})
    with pytest.raises(ConfigError):
        settings.profile(Difficulty.NORMAL)


def test_difficulty_parsing():
    assert Difficulty.parse("HARD") is Difficulty.HARD
    assert Difficulty.parse(" easy ") is Difficulty.EASY
    assert Difficulty.NORMAL.label == "Normal"
    with pytest.raises(ConfigError):
        Difficulty.parse("nightmare")


def test_menu_choice_defaults_to_normal():
    assert Difficulty.from_menu_choice("1") is Difficulty.EASY
    assert Difficulty.from_menu_choice("3\n") is Difficulty.HARD
    assert Difficulty.from_menu_choice("2") is Difficulty.NORMAL
    assert Difficulty.from_menu_choice("9") is Difficulty.NORMAL


@pytest.mark.parametrize("bad", ["36", [3], [1, 2, 3], {"min": 1, "max": 2}, 5])
def test_range_must_be_a_pair(bad):
    with pytest.raises(ConfigError):
        Settings.from_dict({"map": {"room_count": bad}})
