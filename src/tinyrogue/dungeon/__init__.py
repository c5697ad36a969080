from .tiles import Tile, Grid, Position
from .generator import Room, RoomGenerator
from .pathfinding import next_step

__all__ = ["Tile", "Grid", "Position", "Room", "RoomGenerator", "next_step"]
