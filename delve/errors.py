"""Error taxonomy for dungeon generation.

Every failure raised by the generator derives from ``DungeonError`` so callers
(CLI, HTTP routes) can catch the whole family in one place. Nothing here is
retried: a raised error means the run produced no usable dungeon.
"""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for all generation failures."""


class ConfigurationError(DungeonError, ValueError):
    """Invalid generation parameters, detected before the pipeline starts."""


class UnreachableRoomError(DungeonError):
    """A room has no available connector, so it cannot be linked to the maze."""

    def __init__(self, room, index: int):
        self.room = room
        self.index = index
        super().__init__(f"room #{index} {room!r} has no available connector")


class GridBoundsError(DungeonError, IndexError):
    """A tile write landed outside the grid."""


class RasterBoundsError(DungeonError, IndexError):
    """A pixel write landed outside the image buffer."""


__all__ = [
    "DungeonError",
    "ConfigurationError",
    "UnreachableRoomError",
    "GridBoundsError",
    "RasterBoundsError",
]
