"""Growing-tree maze carving on the odd lattice.

Corridors advance two cells at a time, from one odd lattice cell to the next,
carving the cell in between. Every even row/column cell that is not such an
in-between cell stays wall, which keeps separate corridors and rooms from
touching and makes each carved component a tree.
"""

from __future__ import annotations

from typing import List, Optional

from .geometry import DIRECTIONS, Direction, Vec2D
from .tiles import WALL


def carvable_directions(dungeon, cell: Vec2D) -> List[Direction]:
    """Directions whose two-step target is still wall, with one cell of margin inside bounds."""
    bounds = dungeon.bounds
    return [
        d
        for d in DIRECTIONS
        if bounds.contains(cell + d.offset * 3) and dungeon.get_tile(cell + d.offset * 2) is WALL
    ]


def grow_maze(dungeon, start: Vec2D) -> int:
    """Grow one maze component from ``start``; returns the number of cells carved."""
    winding_percent = dungeon.config.winding_percent
    rng = dungeon.rng
    cells: List[Vec2D] = [start]
    last_dir: Optional[Direction] = None

    dungeon.carve_floor(start)
    dungeon.snapshot()
    carved = 1

    while cells:
        cell = cells[-1]
        unmade = carvable_directions(dungeon, cell)

        if not unmade:
            cells.pop()
            last_dir = None
            continue

        if last_dir is not None and last_dir in unmade and rng.randrange(0, 100) > winding_percent:
            d = last_dir
        else:
            d = rng.choice(unmade)
        last_dir = d

        dungeon.carve_floor(cell + d.offset)
        dungeon.carve_floor(cell + d.offset * 2)
        cells.append(cell + d.offset * 2)
        carved += 2
        dungeon.snapshot()

    return carved


def fill_maze(dungeon) -> int:
    """Carve a maze through every still-walled odd cell; returns the number of components."""
    bounds = dungeon.bounds
    regions = 0
    for y in range(1, bounds.height, 2):
        for x in range(1, bounds.width, 2):
            cell = Vec2D(x, y)
            if dungeon.get_tile(cell) is WALL:
                dungeon.metrics["corridor_cells_carved"] += grow_maze(dungeon, cell)
                regions += 1
    dungeon.metrics["maze_regions"] += regions
    return regions


__all__ = ["carvable_directions", "grow_maze", "fill_maze"]
