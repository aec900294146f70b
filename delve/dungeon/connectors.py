"""Connector discovery and door selection.

A connector is the wall cell between a room edge and a floor cell two steps
out. Rooms are processed in placement order; each one takes a single primary
door among its connectors that no earlier room has already considered, and
may open a few extra doors to braid loops into the maze.
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from ..errors import UnreachableRoomError
from ..rendering.palette import LIGHT_COLOR
from .geometry import Direction, Rect, Vec2D
from .tiles import FLOOR


def edge_direction(room: Rect, v: Vec2D) -> Optional[Direction]:
    """Outward direction of ``v`` if it lies on an edge of ``room``, corners excluded."""
    i, j = v
    right = room.x + room.width - 1
    bottom = room.y + room.height - 1
    if room.x < i < right:
        if j == room.y:
            return Direction.N
        if j == bottom:
            return Direction.S
    if room.y < j < bottom:
        if i == room.x:
            return Direction.W
        if i == right:
            return Direction.E
    return None


def room_connectors(dungeon, room: Rect) -> List[Vec2D]:
    """Connector cells around ``room`` in the room's point order."""
    bounds = dungeon.bounds
    found = []
    for v in room:
        d = edge_direction(room, v)
        if d is None:
            continue
        step = d.offset
        if bounds.contains(v + step * 3) and dungeon.get_tile(v + step * 2) is FLOOR:
            found.append(v + step)
    return found


def find_connectors(dungeon) -> List[Tuple[Rect, List[Vec2D]]]:
    return [(room, room_connectors(dungeon, room)) for room in dungeon.rooms]


def connect_rooms(dungeon) -> int:
    """Open one primary door per room plus random extra doors; returns doors carved.

    Raises UnreachableRoomError when a room has no connector left to claim.
    """
    rng = dungeon.rng
    extra_chance = dungeon.config.extra_door_chance
    connectors = find_connectors(dungeon)
    available: Set[Vec2D] = {c for _, cs in connectors for c in cs}
    dungeon.metrics["connectors_found"] += len(available)
    doors = 0

    for index, (room, cs) in enumerate(connectors):
        choices = [c for c in cs if c in available]
        if not choices:
            raise UnreachableRoomError(room, index)

        door = rng.choice(choices)
        dungeon.carve_door(door)
        dungeon.draw_room(room, LIGHT_COLOR)
        doors += 1

        for c in choices:
            # Occasionally open another passage; the pruner keeps door-adjacent corridor
            if c != door and rng.chance(extra_chance):
                dungeon.carve_door(c)
                doors += 1
                dungeon.metrics["extra_doors"] += 1
            # Claimed even when unused so later rooms never reconsider it
            available.discard(c)

        dungeon.snapshot()

    dungeon.metrics["doors_created"] += doors
    return doors


__all__ = ["edge_direction", "room_connectors", "find_connectors", "connect_rooms"]
