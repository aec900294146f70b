"""Public dungeon package interface."""

from .config import DungeonConfig
from .dungeon import Dungeon
from .geometry import DIRECTIONS, Direction, Rect, Vec2D
from .grid import TileGrid
from .rng import RandomSource, SeededRandom
from .tiles import DOOR, FLOOR, WALL, Tile  # noqa: F401

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "TileGrid",
    "Tile",
    "WALL",
    "FLOOR",
    "DOOR",
    "Vec2D",
    "Direction",
    "DIRECTIONS",
    "Rect",
    "RandomSource",
    "SeededRandom",
]
