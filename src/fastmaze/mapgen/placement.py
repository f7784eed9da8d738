# src/fastmaze/mapgen/placement.py
# Read-only predicates deciding where a room or corridor may attach.

from enum import Enum
from typing import Optional

from ..grid import Grid
from ..tiles import Tile

class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def horizontal(self) -> bool:
        return self.dy == 0

def usable_connection_point(grid: Grid, x: int, y: int) -> Optional[Direction]:
    """
    A wall cell with exactly one FLOOR 4-neighbour can host a new room.
    Returns the direction pointing away from that neighbour, or None when
    the cell is out of bounds, not a wall, isolated, or touches 2+ floors.
    """
    if not grid.in_bounds(x, y) or grid.get(x, y) != Tile.WALL:
        return None

    found = None
    free_paths = 0
    for d in Direction:
        nx, ny = x - d.dx, y - d.dy   # the neighbour behind direction d
        if grid.in_bounds(nx, ny) and grid.get(nx, ny) == Tile.FLOOR:
            found = d
            free_paths += 1

    if free_paths != 1:
        return None
    return found

def can_place_region(grid: Grid, x: int, y: int, w: int, h: int) -> bool:
    """True if [x, x+w) x [y, y+h) is inside the grid and entirely WALL."""
    if x < 0 or y < 0 or x + w > grid.width or y + h > grid.height:
        return False
    wall = Tile.WALL
    for yp in range(y, y + h):
        i = grid.idx(x, yp)
        if any(v != wall for v in grid.buf[i:i + w]):
            return False
    return True

def can_place_room(grid: Grid, room) -> bool:
    """
    One cell of wall padding keeps unrelated rooms from touching. The padded
    footprint must also stay off the last column and row, which leaves two
    wall columns on the right and two wall rows at the bottom.
    """
    x, y, w, h = room.padded()
    if x + w >= grid.width or y + h >= grid.height:
        return False
    return can_place_region(grid, x, y, w, h)
