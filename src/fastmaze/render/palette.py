from typing import Tuple

from ..tiles import Tile

RGB = Tuple[int, int, int]

TILE_COLORS = {
    Tile.FLOOR: (255, 255, 255),  # white
    Tile.WALL: (64, 64, 64),      # dark grey
    Tile.DOOR: (0, 255, 0),       # green
    Tile.START: (0, 0, 255),      # blue, stairs up
    Tile.END: (255, 0, 255),      # purple, stairs down
}

UNKNOWN_COLOR: RGB = (0, 0, 0)

def tile_color(tile: int) -> RGB:
    return TILE_COLORS.get(tile, UNKNOWN_COLOR)
