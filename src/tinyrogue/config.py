from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

Range = Tuple[int, int]


class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown difficulty: {name!r}") from None

    @classmethod
    def from_menu_choice(cls, choice: str) -> "Difficulty":
        """Map the start-up prompt answer; anything other than 1 or 3 is Normal."""
        choice = choice.strip()
        if choice == "1":
            return cls.EASY
        if choice == "3":
            return cls.HARD
        return cls.NORMAL


@dataclass(frozen=True)
class DifficultyProfile:
    """Inclusive ranges rolled at map generation and on every enemy attack."""

    enemy_count: Range
    enemy_hp: Range
    enemy_attack: Range
    potion_count: Range


@dataclass(frozen=True)
class MapSettings:
    width: int = 20
    height: int = 10
    room_count: Range = (3, 6)
    room_width: Range = (3, 8)
    room_height: Range = (3, 5)


@dataclass(frozen=True)
class PlayerSettings:
    max_hp: int = 20
    attack: int = 4


@dataclass(frozen=True)
class Settings:
    map: MapSettings = field(default_factory=MapSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    difficulties: Dict[Difficulty, DifficultyProfile] = field(default_factory=dict)

    def profile(self, difficulty: Difficulty) -> DifficultyProfile:
        try:
            return self.difficulties[difficulty]
        except KeyError:
            raise ConfigError(f"No preset configured for difficulty {difficulty.label}") from None

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from a dict, validating every range."""
        raw_map = data.get("map") or {}
        raw_player = data.get("player") or {}
        try:
            map_settings = MapSettings(
                width=int(raw_map.get("width", 20)),
                height=int(raw_map.get("height", 10)),
                room_count=_range(raw_map.get("room_count", (3, 6)), "map.room_count"),
                room_width=_range(raw_map.get("room_width", (3, 8)), "map.room_width"),
                room_height=_range(raw_map.get("room_height", (3, 5)), "map.room_height"),
            )
            player = PlayerSettings(
                max_hp=int(raw_player.get("max_hp", 20)),
                attack=int(raw_player.get("attack", 4)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid settings value: {exc}") from exc

        if map_settings.width < 3 or map_settings.height < 3:
            raise ConfigError("Map must be at least 3x3")
        if player.max_hp <= 0 or player.attack < 0:
            raise ConfigError("Player max_hp must be positive and attack non-negative")

        difficulties: Dict[Difficulty, DifficultyProfile] = {}
        for name, raw in (data.get("difficulties") or {}).items():
            difficulty = Difficulty.parse(name)
            raw = raw or {}
            prefix = f"difficulties.{difficulty.value}"
            difficulties[difficulty] = DifficultyProfile(
                enemy_count=_range(raw.get("enemy_count"), f"{prefix}.enemy_count"),
                enemy_hp=_range(raw.get("enemy_hp"), f"{prefix}.enemy_hp"),
                enemy_attack=_range(raw.get("enemy_attack"), f"{prefix}.enemy_attack"),
                potion_count=_range(raw.get("potion_count"), f"{prefix}.potion_count"),
            )
        return cls(map=map_settings, player=player, difficulties=difficulties)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided, its values are overlaid onto the defaults.
        A missing user file is an error since it was asked for explicitly.
        """
        with resources.files("tinyrogue.data").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
            default_data = yaml.safe_load(f) or {}

        user_data: dict = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)

        settings = cls.from_dict(cls._deep_merge(default_data, user_data))
        logger.debug("Settings merged: %s", settings)
        return settings


def _range(value: Any, name: str) -> Range:
    if value is None:
        raise ConfigError(f"Missing range for {name}")
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{name} must be a [min, max] pair, got {value!r}")
    try:
        lo, hi = (int(v) for v in value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a [min, max] pair, got {value!r}") from None
    if lo < 0 or lo > hi:
        raise ConfigError(f"{name} must satisfy 0 <= min <= max, got [{lo}, {hi}]")
    return (lo, hi)
