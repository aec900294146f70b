import pytest

from delve.dungeon.geometry import Rect, Vec2D
from delve.dungeon.grid import TileGrid
from delve.dungeon.tiles import DOOR, FLOOR, WALL, Tile
from delve.errors import GridBoundsError


def test_new_grid_is_all_wall():
    g = TileGrid(5, 3)
    assert g.bounds == Rect(0, 0, 5, 3)
    assert g.count(WALL) == 15
    assert g.rooms == []


def test_out_of_bounds_reads_as_wall_and_writes_fail():
    g = TileGrid(3, 3)
    assert g.get((-1, 0)) is WALL
    assert g.get((3, 1)) is WALL
    with pytest.raises(GridBoundsError):
        g.set((3, 0), FLOOR)
    with pytest.raises(IndexError):
        g.set((0, -1), FLOOR)


def test_neighbor_helpers():
    g = TileGrid(5, 5)
    g.set((2, 2), FLOOR)
    g.set((2, 1), FLOOR)
    g.set((3, 2), DOOR)
    assert g.floor_neighbors((2, 2)) == [Vec2D(2, 1)]
    assert g.has_neighbor((2, 2), DOOR)
    assert not g.has_neighbor((2, 1), DOOR)
    assert list(g.positions(FLOOR)) == [Vec2D(2, 1), Vec2D(2, 2)]


def test_room_cells_and_ascii():
    g = TileGrid(5, 3)
    room = Rect(1, 1, 2, 1)
    g.rooms.append(room)
    for p in room:
        g.set(p, FLOOR)
    g.set((3, 1), DOOR)
    assert g.room_cells() == {Vec2D(1, 1), Vec2D(2, 1)}
    assert g.to_ascii() == "#####\n#..+#\n#####"


def test_tile_enum_is_closed():
    assert [t.value for t in Tile] == ["#", ".", "+"]
    assert (WALL, FLOOR, DOOR) == (Tile.WALL, Tile.FLOOR, Tile.DOOR)
