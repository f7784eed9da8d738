# Canonical tile IDs (byte values of the map buffer)

from enum import IntEnum

class Tile(IntEnum):
    FLOOR = 0
    WALL = 1
    DOOR = 2
    START = 4
    END = 5

OPEN_TILES = frozenset((Tile.FLOOR, Tile.DOOR, Tile.START, Tile.END))

_CHARS = {
    Tile.FLOOR: ".",
    Tile.WALL: "#",
    Tile.DOOR: "+",
    Tile.START: "<",
    Tile.END: ">",
}

def is_open(tile: int) -> bool:
    # Anything a walker can stand on; only WALL blocks.
    return tile in OPEN_TILES

def tile_char(tile: int) -> str:
    return _CHARS.get(tile, "?")
