from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..dungeon.tiles import Position


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session handed to the presentation layer."""

    width: int
    height: int
    rows: Tuple[str, ...]  # '#' wall, '.' floor
    enemies: Tuple[Position, ...]  # live enemies only
    items: Tuple[Position, ...]
    player: Position
    hp: int
    max_hp: int
    attack: int
    score: int
    turns: int
    high_score: int
    difficulty: str
    ended: bool
