from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Sequence, Tuple

Position = Tuple[int, int]


class Tile(IntEnum):
    WALL = 0
    FLOOR = 1


_GLYPHS = {Tile.WALL: "#", Tile.FLOOR: "."}
_FROM_GLYPH = {v: k for k, v in _GLYPHS.items()}


@dataclass
class Grid:
    """A fixed-size tile matrix with bounds-checked helpers.

    Coordinates are (x, y) with (0,0) at top-left; x grows to the right, y grows down.
    """

    width: int
    height: int
    tiles: List[List[Tile]]  # tiles[y][x]

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile = Tile.WALL) -> "Grid":
        if width <= 0 or height <= 0:
            raise ValueError("Invalid grid size")
        return cls(width, height, [[tile for _ in range(width)] for _ in range(height)])

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from rows of '#' (wall) and '.' (floor)."""
        if not lines:
            raise ValueError("from_lines requires at least one row")
        width = len(lines[0])
        tiles: List[List[Tile]] = []
        for row in lines:
            if len(row) != width:
                raise ValueError("All rows must have the same width")
            tiles.append([_FROM_GLYPH[ch] for ch in row])
        return cls(width, len(lines), tiles)

    def to_lines(self) -> List[str]:
        return ["".join(_GLYPHS[t] for t in row) for row in self.tiles]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Position out of bounds: ({x}, {y})")
        return self.tiles[y][x]

    def is_floor(self, x: int, y: int) -> bool:
        # Out of bounds acts as wall
        return self.in_bounds(x, y) and self.tiles[y][x] == Tile.FLOOR

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Position out of bounds: ({x}, {y})")
        self.tiles[y][x] = tile

    def carve(self, x: int, y: int) -> None:
        """Set a tile to floor; silently clipped to the grid."""
        if self.in_bounds(x, y):
            self.tiles[y][x] = Tile.FLOOR

    def carve_rect(self, x: int, y: int, w: int, h: int) -> None:
        for yy in range(y, y + h):
            for xx in range(x, x + w):
                self.carve(xx, yy)

    def carve_horizontal(self, x1: int, x2: int, y: int) -> None:
        if x2 < x1:
            x1, x2 = x2, x1
        for x in range(x1, x2 + 1):
            self.carve(x, y)

    def carve_vertical(self, y1: int, y2: int, x: int) -> None:
        if y2 < y1:
            y1, y2 = y2, y1
        for y in range(y1, y2 + 1):
            self.carve(x, y)

    def open_interior(self) -> None:
        """Turn every tile except the outer border into floor."""
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                self.tiles[y][x] = Tile.FLOOR

    def floor_tiles(self) -> List[Position]:
        """All floor positions in row-major order."""
        return [(x, y) for y in range(self.height) for x in range(self.width) if self.tiles[y][x] == Tile.FLOOR]

    def has_floor(self) -> bool:
        return any(t == Tile.FLOOR for row in self.tiles for t in row)

    def neighbors4(self, x: int, y: int) -> Iterator[Position]:
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, [row[:] for row in self.tiles])
