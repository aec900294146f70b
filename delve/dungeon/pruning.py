"""Dead-end pruning.

Walls up corridor cells that lead nowhere. Room cells are never touched and a
corridor cell next to a door is kept, since it is the door's only approach.
Pruning cascades backwards along a corridor until it reaches a junction, a
room or a door.
"""

from __future__ import annotations

from typing import List, Optional, Set

from .geometry import Vec2D
from .tiles import DOOR, FLOOR


def find_dead_ends(dungeon, room_cells: Optional[Set[Vec2D]] = None) -> List[Vec2D]:
    """Non-room floor cells with at most one floor neighbor, row-major.

    Door cells are never listed; a cell with no floor neighbor at all is an
    isolated stub and is listed too.
    """
    grid = dungeon.grid
    if room_cells is None:
        room_cells = grid.room_cells()
    return [
        cell
        for cell in grid.positions(FLOOR)
        if cell not in room_cells and len(grid.floor_neighbors(cell)) <= 1
    ]


def remove_dead_ends(dungeon) -> int:
    """Prune unprotected dead ends in place; returns the number of cells walled."""
    grid = dungeon.grid
    room_cells = grid.room_cells()
    dead_ends = find_dead_ends(dungeon, room_cells)
    pruned = 0

    while dead_ends:
        cell = dead_ends.pop()

        # Already walled through another path, or protected
        if grid.get(cell) is not FLOOR or cell in room_cells:
            continue
        # If we have a door as a neighbor, just skip filling this in
        if grid.has_neighbor(cell, DOOR):
            continue

        dungeon.fill_cell(cell)
        pruned += 1
        dungeon.snapshot()

        remaining = grid.floor_neighbors(cell)
        if remaining:
            next_cell = remaining[0]
            # Still in a single, long corridor: keep removing
            if len(grid.floor_neighbors(next_cell)) == 1:
                dead_ends.append(next_cell)

    dungeon.metrics["dead_ends_pruned"] += pruned
    return pruned


__all__ = ["find_dead_ends", "remove_dead_ends"]
