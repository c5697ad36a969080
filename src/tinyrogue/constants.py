from typing import Tuple

# Score awarded when an enemy transitions from alive to dead
KILL_SCORE: int = 10

# Potions heal a random amount in this inclusive range, capped at max health
POTION_HEAL: Tuple[int, int] = (6, 10)

# Applied to player health after every turn, independent of max health
HEALTH_CEILING: int = 999

# Cardinal directions as (dx, dy); y grows down
UP: Tuple[int, int] = (0, -1)
DOWN: Tuple[int, int] = (0, 1)
LEFT: Tuple[int, int] = (-1, 0)
RIGHT: Tuple[int, int] = (1, 0)

