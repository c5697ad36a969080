from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..rng import RandomSource
from .tiles import Grid, Position

logger = logging.getLogger(__name__)

Range = Tuple[int, int]

# Spawn used when no room could be placed and the interior was opened instead
FALLBACK_SPAWN: Position = (1, 1)


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def center(self) -> Position:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def intersects(self, other: "Room") -> bool:
        # Rooms sharing an edge do not intersect
        return not (
            self.x + self.w <= other.x
            or other.x + other.w <= self.x
            or self.y + self.h <= other.y
            or other.y + other.h <= self.y
        )


class RoomGenerator:
    """Rooms-and-corridors generator.

    Rooms are sampled inside a 1-tile margin and rejected when they overlap an
    already placed room. Every room after the first is joined to the previous
    one by an L-shaped corridor, so all floor is connected to the first room,
    whose center is the spawn point.
    """

    def __init__(
        self,
        rng: RandomSource,
        width: int = 20,
        height: int = 10,
        max_attempts: int = 500,
    ) -> None:
        self.rng = rng
        self.width = width
        self.height = height
        self.max_attempts = max_attempts

    def generate(
        self,
        room_count: Range = (3, 6),
        room_width: Range = (3, 8),
        room_height: Range = (3, 5),
    ) -> Tuple[Grid, Position]:
        grid = Grid.filled(self.width, self.height)
        target = self.rng.randint(*room_count)
        rooms: List[Room] = []

        attempts = 0
        while len(rooms) < target and attempts < self.max_attempts:
            attempts += 1
            candidate = self._sample_room(room_width, room_height)
            if candidate is None:
                continue
            if any(candidate.intersects(r) for r in rooms):
                continue
            grid.carve_rect(candidate.x, candidate.y, candidate.w, candidate.h)
            if rooms:
                self._connect(grid, rooms[-1].center(), candidate.center())
            rooms.append(candidate)

        if len(rooms) < target:
            logger.info("Placed %d of %d rooms after %d attempts", len(rooms), target, attempts)

        if not grid.has_floor():
            logger.warning("Generation produced no floor; opening the interior")
            grid.open_interior()

        spawn = rooms[0].center() if rooms else FALLBACK_SPAWN
        logger.debug("Generated %dx%d map with %d rooms, spawn=%s", self.width, self.height, len(rooms), spawn)
        return grid, spawn

    def _sample_room(self, room_width: Range, room_height: Range) -> Optional[Room]:
        w = self.rng.randint(*room_width)
        h = self.rng.randint(*room_height)
        # Keep a margin of 1 tile on every side
        max_x = self.width - w - 1
        max_y = self.height - h - 1
        if max_x < 1 or max_y < 1:
            return None
        x = self.rng.randint(1, max_x)
        y = self.rng.randint(1, max_y)
        return Room(x, y, w, h)

    def _connect(self, grid: Grid, a: Position, b: Position) -> None:
        ax, ay = a
        bx, by = b
        if self.rng.randint(0, 1) == 0:
            # Horizontal first, then vertical
            grid.carve_horizontal(ax, bx, ay)
            grid.carve_vertical(ay, by, bx)
        else:
            grid.carve_vertical(ay, by, ax)
            grid.carve_horizontal(ax, bx, by)
