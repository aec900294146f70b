"""Full-pipeline checks.

A scripted source makes an 11x9 run fully predictable: one 5x5 room, a single
maze region, a door on the room's east wall and every corridor pruned except
the cell in front of that door.
"""

import io

from delve.dungeon import Dungeon, DungeonConfig
from delve.dungeon.tiles import DOOR, FLOOR, WALL
from delve.errors import UnreachableRoomError
from delve.rendering.canvas import Canvas
from delve.rendering.palette import DARK_COLOR, DOOR_COLOR, LIGHT_COLOR
from delve.rendering.ppm import Color

from dungeon_test_utils import (
    FirstChoiceRandom,
    bfs_reachable,
    corridor_cells,
    generate_many,
    iter_doors,
    neighbors,
)

SCRIPTED_11x9 = [
    "###########",
    "#.....#####",
    "#.....+.###",
    "#.....#####",
    "#.....#####",
    "#.....#####",
    "###########",
    "###########",
    "###########",
]


def _scripted(canvas=None):
    cfg = DungeonConfig(width=11, height=9, attempts=50)
    return Dungeon(cfg, rng=FirstChoiceRandom(), canvas=canvas).generate()


def test_scripted_layout():
    d = _scripted()
    assert d.to_ascii().splitlines() == SCRIPTED_11x9
    assert d.metrics["rooms_placed"] == 1
    assert d.metrics["connectors_found"] == 6
    assert d.metrics["doors_created"] == 1
    assert d.metrics["dead_ends_pruned"] == 20
    assert set(d.metrics["phase_ms"]) == {"place_rooms", "fill_maze", "connect_rooms", "remove_dead_ends"}


def test_scripted_raster():
    canvas = Canvas(11, 9)
    _scripted(canvas)
    img = canvas.image
    assert (img.width, img.height) == (78, 64)
    assert img.get((0, 0)) == DARK_COLOR
    # Door cell (6, 2): darker border, door color inside
    assert img.get((42, 14)) == Color(161, 70, 0)
    assert img.get((43, 15)) == DOOR_COLOR
    # Room cell (3, 3) repainted light once the room is connected
    assert img.get((22, 22)) == LIGHT_COLOR
    assert img.get((21, 21)) == LIGHT_COLOR.darker(0.70)
    # Pruned corridor (7, 7) is dark again
    assert img.get((50, 50)) == DARK_COLOR
    assert canvas.frames == 1


def test_border_is_wall_and_tiles_are_known():
    for d in generate_many(range(4)):
        w, h = d.bounds.width, d.bounds.height
        for p in d.bounds:
            tile = d.get_tile(p)
            assert tile in (WALL, FLOOR, DOOR)
            if p.x in (0, w - 1) or p.y in (0, h - 1):
                assert tile is WALL, f"border cell {p} carved"


def test_every_room_opens_onto_a_corridor_or_room():
    for d in generate_many(range(4, 10)):
        for room in d.rooms:
            inside = set(room)
            seen = bfs_reachable(d, (room.x, room.y))
            outside = [p for p in seen if p not in inside and d.get_tile(p) is not DOOR]
            assert outside, f"room {room} is sealed (seed {d.seed})"


def test_doors_sit_between_room_and_floor():
    for d in generate_many(range(10, 14)):
        rooms = d.grid.room_cells()
        for door in iter_doors(d):
            around = neighbors(door)
            assert any(n in rooms for n in around), f"door {door} not on a room wall"
            assert sum(1 for n in around if d.get_tile(n) is not WALL) >= 2


def test_corridors_are_open_to_something():
    for d in generate_many(range(14, 18)):
        for c in corridor_cells(d):
            assert any(d.get_tile(n) is not WALL for n in neighbors(c))


def _outcome(seed):
    d = Dungeon(DungeonConfig(width=31, height=21, attempts=40, seed=seed))
    try:
        return d.generate().to_ascii()
    except UnreachableRoomError as e:
        return str(e)


def test_same_seed_same_dungeon():
    for seed in (0, 1234, 99999):
        assert _outcome(seed) == _outcome(seed)


def test_animate_emits_one_frame_per_mutation_plus_final():
    out = io.StringIO()
    cfg = DungeonConfig(width=11, height=9, attempts=50, animate=True)
    canvas = Canvas(11, 9, out)
    d = Dungeon(cfg, rng=FirstChoiceRandom(), canvas=canvas).generate()
    text = out.getvalue()
    # room, maze start + 10 steps, connected room, 20 pruned cells, final frame
    assert canvas.frames == d.metrics["snapshots_emitted"] == 34
    assert text.count("P3 78 64\n") == canvas.frames
    assert text.endswith(canvas.to_ppm())
