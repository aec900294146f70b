from __future__ import annotations

from typing import List, Optional

from .geometry import Rect


def random_room_rect(bounds: Rect, rng) -> Optional[Rect]:
    """Sample one odd-aligned room candidate, or None when it cannot fit in ``bounds``.

    Base size is 5 or 7; one axis may be stretched by an even amount up to the
    base size so rooms range from square to roughly 2:1.
    """
    size = rng.randrange(2, 4) * 2 + 1
    rectangularity = rng.randrange(0, 1 + size // 2) * 2

    if rng.chance(0.5):
        width, height = size + rectangularity, size
    else:
        width, height = size, size + rectangularity

    x_slots = (bounds.width - width) // 2
    y_slots = (bounds.height - height) // 2
    if x_slots <= 0 or y_slots <= 0:
        return None

    x = rng.randrange(0, x_slots) * 2 + 1
    y = rng.randrange(0, y_slots) * 2 + 1
    return Rect(x, y, width, height)


def _is_separated(room: Rect, existing: List[Rect]) -> bool:
    return all(room.is_outside_of(r) for r in existing)


def place_rooms(dungeon) -> List[Rect]:
    """Run the room placement budget against ``dungeon``; returns the accepted rooms.

    Rejected candidates are dropped without retry, so the attempt budget is a
    soft cap on room count rather than a target.
    """
    attempts = dungeon.config.attempts
    rooms = dungeon.grid.rooms
    placed = 0
    for _ in range(attempts):
        room = random_room_rect(dungeon.bounds, dungeon.rng)
        if room is None or not _is_separated(room, rooms):
            continue
        dungeon.room_colors.append(dungeon.draw_room(room))
        rooms.append(room)
        placed += 1
        dungeon.snapshot()
    dungeon.metrics["room_attempts"] += attempts
    dungeon.metrics["rooms_placed"] += placed
    return rooms


__all__ = ["random_room_rect", "place_rooms"]
