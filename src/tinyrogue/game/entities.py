from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Enemy:
    """A hostile agent. Dead enemies stay in the registry with ``alive`` False."""

    x: int
    y: int
    hp: int
    alive: bool = True

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


@dataclass
class Item:
    """A health potion lying on the floor."""

    x: int
    y: int

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Player:
    x: int
    y: int
    hp: int = 20
    max_hp: int = 20
    attack: int = 4

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def heal(self, amount: int) -> int:
        """Heal by ``amount`` capped at max_hp; returns the HP actually restored."""
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before

    def take_damage(self, amount: int) -> None:
        # No floor clamp; death is checked at the end of the turn
        self.hp -= amount

    def __repr__(self) -> str:
        return f"Player(@{self.x},{self.y} hp={self.hp}/{self.max_hp} atk={self.attack})"
