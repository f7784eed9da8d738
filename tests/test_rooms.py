from fastmaze.mapgen.placement import Direction
from fastmaze.mapgen.rooms import Room, corridor_shape

def test_corridor_shape():
    assert corridor_shape(5, 6, vertical=True) == (1, 12)
    assert corridor_shape(5, 6, vertical=False) == (10, 1)

def test_attached_east_and_west():
    r = Room.attached(10, 10, 4, 5, Direction.EAST)
    assert (r.x, r.y, r.w, r.h) == (11, 8, 4, 5)
    r = Room.attached(10, 10, 4, 5, Direction.WEST)
    assert (r.x, r.y) == (6, 8)
    assert r.x + r.w == 10

def test_attached_north_and_south():
    r = Room.attached(10, 10, 5, 4, Direction.SOUTH)
    assert (r.x, r.y) == (8, 11)
    r = Room.attached(10, 10, 5, 4, Direction.NORTH)
    assert (r.x, r.y) == (8, 6)
    assert r.y + r.h == 10

def test_attached_room_touches_connection_cell():
    for d in Direction:
        r = Room.attached(20, 20, 6, 7, d)
        cells = set(r.cells())
        assert (20, 20) not in cells
        assert (20 + d.dx, 20 + d.dy) in cells
        assert len(cells) == 42

def test_corridor_flag():
    assert Room(0, 0, 1, 8, Direction.NORTH).is_corridor
    assert Room(0, 0, 8, 1, Direction.EAST).is_corridor
    assert not Room(0, 0, 4, 4, Direction.EAST).is_corridor
