from dataclasses import dataclass
from typing import List

from .tiles import Tile

@dataclass
class Grid:
    width: int
    height: int
    buf: List[int]

    @classmethod
    def walls(cls, width: int, height: int) -> "Grid":
        g = cls(width=width, height=height, buf=[])
        g.reset()
        return g

    def reset(self) -> None:
        self.buf[:] = [Tile.WALL] * (self.width * self.height)

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def fill_region(self, x: int, y: int, w: int, h: int, v: int) -> None:
        # One slice per row. No bounds checks: callers validate first.
        row = [v] * w
        for yp in range(y, y + h):
            i = self.idx(x, yp)
            self.buf[i:i + w] = row

    def rows(self) -> List[List[int]]:
        return [self.buf[y * self.width:(y + 1) * self.width] for y in range(self.height)]
