from .entities import Enemy, Item, Player
from .registry import EntityRegistry
from .level import Level, build_level

__all__ = ["Enemy", "Item", "Player", "EntityRegistry", "Level", "build_level"]
