from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from ..constants import DOWN, LEFT, RIGHT, UP


class Command(Enum):
    """Everything the shell can hand to the resolver for one turn."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    UNKNOWN = "unknown"

    @property
    def delta(self) -> Optional[Tuple[int, int]]:
        """(dx, dy) for the four directions, None otherwise."""
        return _DELTAS.get(self)

    @property
    def is_direction(self) -> bool:
        return self in _DELTAS


_DELTAS = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
}
