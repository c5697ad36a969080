from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Set, Tuple

from ..dungeon.tiles import Position
from .entities import Enemy, Item

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Owns enemies and potions and answers occupancy queries.

    Enemies are never removed: a kill flips ``alive`` so indices stay stable
    for the whole turn. Items are removed on pickup and the list compacts, so
    item indices are only meaningful inside the operation that looked them up.
    """

    def __init__(self) -> None:
        self.enemies: List[Enemy] = []
        self.items: List[Item] = []

    def clear(self) -> None:
        self.enemies.clear()
        self.items.clear()

    def add_enemy(self, enemy: Enemy) -> int:
        self.enemies.append(enemy)
        return len(self.enemies) - 1

    def add_item(self, item: Item) -> int:
        self.items.append(item)
        return len(self.items) - 1

    # Queries
    def enemy_at(self, x: int, y: int) -> Optional[int]:
        for idx, e in enumerate(self.enemies):
            if e.alive and e.x == x and e.y == y:
                return idx
        return None

    def item_at(self, x: int, y: int) -> Optional[int]:
        for idx, it in enumerate(self.items):
            if it.x == x and it.y == y:
                return idx
        return None

    def live_enemies(self) -> Iterator[Tuple[int, Enemy]]:
        for idx, e in enumerate(self.enemies):
            if e.alive:
                yield idx, e

    def enemy_positions(self, exclude: Optional[int] = None) -> Set[Position]:
        return {e.pos for idx, e in self.live_enemies() if idx != exclude}

    def item_positions(self) -> List[Position]:
        return [it.pos for it in self.items]

    @property
    def live_count(self) -> int:
        return sum(1 for _ in self.live_enemies())

    # Mutations
    def damage_enemy(self, index: int, amount: int) -> bool:
        """Apply damage; True only when this call flips the enemy from alive to dead."""
        enemy = self.enemies[index]
        if not enemy.alive:
            return False
        enemy.hp -= amount
        if enemy.hp <= 0:
            enemy.alive = False
            logger.debug("Enemy %d died at %s", index, enemy.pos)
            return True
        return False

    def remove_item(self, index: int) -> Item:
        return self.items.pop(index)
