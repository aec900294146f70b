from enum import Enum


class Tile(Enum):
    """Cell classification. WALL is the initial state; DOOR never changes once set."""

    WALL = "#"
    FLOOR = "."
    DOOR = "+"


WALL = Tile.WALL
FLOOR = Tile.FLOOR
DOOR = Tile.DOOR

__all__ = ["Tile", "WALL", "FLOOR", "DOOR"]
