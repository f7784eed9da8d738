# src/fastmaze/render/surface.py
from __future__ import annotations

from functools import lru_cache
from typing import Sequence, Tuple

import pygame

from ..level import Level
from .palette import tile_color


class TileSurfaces:
    """
    Solid-colour tile cache:
      - one pygame.Surface of (tile_size, tile_size) per tile id
      - colours come from the palette, unknown ids are black
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size))
        img.fill(tile_color(tile_id))
        return img


def draw_rows(screen: pygame.Surface, rows: Sequence[Sequence[int]], tiles: TileSurfaces,
              origin: Tuple[int, int] = (0, 0)) -> None:
    ox, oy = origin
    size = tiles.tile_size
    for y, row in enumerate(rows):
        for x, tid in enumerate(row):
            screen.blit(tiles.get(int(tid)), (ox + x * size, oy + y * size))


def draw_level(screen: pygame.Surface, level: Level, tiles: TileSurfaces,
               origin: Tuple[int, int] = (0, 0)) -> None:
    draw_rows(screen, level.tiles, tiles, origin)


def window_caption(level: Level, name: str) -> str:
    return f"{name} | Level {level.index} | Seed {level.seed:#010x}"
