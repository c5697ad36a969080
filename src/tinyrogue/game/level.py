from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Set

from ..config import DifficultyProfile, MapSettings
from ..dungeon.generator import FALLBACK_SPAWN, RoomGenerator
from ..dungeon.tiles import Grid, Position
from ..rng import RandomSource
from .entities import Enemy, Item
from .registry import EntityRegistry

logger = logging.getLogger(__name__)

# Rejection-sampling budget per entity to place
PLACEMENT_ATTEMPTS_PER_ENTITY = 100


@dataclass
class Level:
    grid: Grid
    spawn: Position
    registry: EntityRegistry


def random_floor_tile(grid: Grid, rng: RandomSource) -> Position:
    floors = grid.floor_tiles()
    if not floors:
        return FALLBACK_SPAWN
    return floors[rng.randint(0, len(floors) - 1)]


def build_level(map_settings: MapSettings, profile: DifficultyProfile, rng: RandomSource) -> Level:
    """Generate a map and populate it with enemies and potions for a difficulty."""
    generator = RoomGenerator(rng, width=map_settings.width, height=map_settings.height)
    grid, spawn = generator.generate(map_settings.room_count, map_settings.room_width, map_settings.room_height)
    registry = EntityRegistry()

    taken: Set[Position] = {spawn}
    enemy_target = rng.randint(*profile.enemy_count)
    attempts = 0
    while len(registry.enemies) < enemy_target and attempts < enemy_target * PLACEMENT_ATTEMPTS_PER_ENTITY:
        attempts += 1
        pos = random_floor_tile(grid, rng)
        if pos in taken:
            continue
        taken.add(pos)
        registry.add_enemy(Enemy(pos[0], pos[1], hp=rng.randint(*profile.enemy_hp)))

    potion_target = rng.randint(*profile.potion_count)
    attempts = 0
    while len(registry.items) < potion_target and attempts < potion_target * PLACEMENT_ATTEMPTS_PER_ENTITY:
        attempts += 1
        pos = random_floor_tile(grid, rng)
        if pos in taken:
            continue
        taken.add(pos)
        registry.add_item(Item(pos[0], pos[1]))

    if len(registry.enemies) < enemy_target or len(registry.items) < potion_target:
        logger.info(
            "Map too crowded: placed %d/%d enemies and %d/%d potions",
            len(registry.enemies), enemy_target, len(registry.items), potion_target,
        )
    logger.debug("Built level: spawn=%s enemies=%d potions=%d", spawn, len(registry.enemies), len(registry.items))
    return Level(grid=grid, spawn=spawn, registry=registry)
