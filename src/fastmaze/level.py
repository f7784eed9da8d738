# Immutable result of one generation run, handed to renderers and tools.

from dataclasses import dataclass
from typing import List, Tuple

from .grid import Grid
from .tiles import Tile, tile_char

XY = Tuple[int, int]

@dataclass(frozen=True)
class GenStats:
    attempts: int = 0
    rooms: int = 0
    corridors: int = 0
    doors: int = 0
    rejected: int = 0   # failed the padded overlap/bounds check
    abandoned: int = 0  # no connection point within the retry cap

@dataclass(frozen=True)
class Level:
    index: int
    seed: int
    width: int
    height: int
    tiles: Tuple[Tuple[Tile, ...], ...]
    start: XY
    end: XY
    stats: GenStats = GenStats()

    @classmethod
    def freeze(cls, grid: Grid, index: int, seed: int, start: XY, end: XY,
               stats: GenStats = GenStats()) -> "Level":
        tiles = tuple(tuple(Tile(v) for v in row) for row in grid.rows())
        return cls(index=index, seed=seed, width=grid.width, height=grid.height,
                   tiles=tiles, start=start, end=end, stats=stats)

    def get(self, x: int, y: int) -> Tile:
        return self.tiles[y][x]

    def rows(self) -> List[List[int]]:
        """Mutable copy as plain ints (TSV / drawing input)."""
        return [[int(t) for t in row] for row in self.tiles]

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.tiles)

    def to_text(self) -> str:
        return "\n".join("".join(tile_char(t) for t in row) for row in self.tiles)
