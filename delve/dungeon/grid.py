from __future__ import annotations

from typing import Iterator, List, Set

from ..errors import GridBoundsError
from .geometry import DIRECTIONS, Rect, Vec2D
from .tiles import FLOOR, WALL, Tile


class TileGrid:
    """Dense row-major tile store plus the ordered list of accepted rooms.

    Coordinates outside ``bounds`` read as WALL so neighbor scans along the
    border never need their own bounds checks; writing there is an error.
    """

    def __init__(self, width: int, height: int):
        self.bounds = Rect(0, 0, width, height)
        self.cells: List[Tile] = [WALL] * (width * height)
        self.rooms: List[Rect] = []

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def _index(self, v) -> int:
        return v[1] * self.bounds.width + v[0]

    def get(self, v) -> Tile:
        if not self.bounds.contains(v):
            return WALL
        return self.cells[self._index(v)]

    def set(self, v, tile: Tile) -> None:
        if not self.bounds.contains(v):
            raise GridBoundsError(f"cell {tuple(v)} outside grid {self.width}x{self.height}")
        self.cells[self._index(v)] = tile

    def __iter__(self) -> Iterator[Vec2D]:
        return iter(self.bounds)

    def positions(self, tile: Tile) -> Iterator[Vec2D]:
        """Yield every position holding ``tile`` in row-major order."""
        w = self.bounds.width
        for i, t in enumerate(self.cells):
            if t is tile:
                yield Vec2D(i % w, i // w)

    def count(self, tile: Tile) -> int:
        return sum(1 for t in self.cells if t is tile)

    def room_cells(self) -> Set[Vec2D]:
        return {p for room in self.rooms for p in room}

    def floor_neighbors(self, v) -> List[Vec2D]:
        v = Vec2D(*v)
        return [v + d.offset for d in DIRECTIONS if self.get(v + d.offset) is FLOOR]

    def has_neighbor(self, v, tile: Tile) -> bool:
        v = Vec2D(*v)
        return any(self.get(v + d.offset) is tile for d in DIRECTIONS)

    def to_ascii(self) -> str:
        w = self.bounds.width
        rows = (self.cells[r * w:(r + 1) * w] for r in range(self.bounds.height))
        return "\n".join("".join(t.value for t in row) for row in rows)


__all__ = ["TileGrid"]
