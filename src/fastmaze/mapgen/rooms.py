from dataclasses import dataclass
from typing import Iterator, Tuple

from .placement import Direction

def corridor_shape(w: int, h: int, vertical: bool) -> Tuple[int, int]:
    """Collapse one axis to 1 and double the other."""
    if vertical:
        return 1, h * 2
    return w * 2, 1

@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int
    direction: Direction

    @classmethod
    def attached(cls, cx: int, cy: int, w: int, h: int, direction: Direction) -> "Room":
        # Extend away from the connection cell, centred on it across the other axis.
        if direction.horizontal:
            y = cy - h // 2
            x = cx + 1 if direction.dx > 0 else cx - w
        else:
            x = cx - w // 2
            y = cy + 1 if direction.dy > 0 else cy - h
        return cls(x, y, w, h, direction)

    @property
    def is_corridor(self) -> bool:
        return self.w == 1 or self.h == 1

    def padded(self) -> Tuple[int, int, int, int]:
        return self.x - 1, self.y - 1, self.w + 2, self.h + 2

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.y + self.h):
            for x in range(self.x, self.x + self.w):
                yield x, y
