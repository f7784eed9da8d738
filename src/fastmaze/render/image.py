# Level -> PNG with Pillow, one solid rectangle per tile.

import os
from typing import List, Sequence, Union

from PIL import Image, ImageDraw

from ..level import Level
from .palette import tile_color

Rows = Sequence[Sequence[int]]

def _rows(src: Union[Level, Rows]) -> List[List[int]]:
    if isinstance(src, Level):
        return src.rows()
    return [list(r) for r in src]

def level_image(src: Union[Level, Rows], tile_size: int = 6, margin: int = 0) -> Image.Image:
    rows = _rows(src)
    h = len(rows)
    w = len(rows[0]) if h else 0
    img = Image.new("RGB", (w * tile_size + 2 * margin, h * tile_size + 2 * margin), (0, 0, 0))
    draw = ImageDraw.Draw(img)
    for y, row in enumerate(rows):
        for x, tid in enumerate(row):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            # rectangle() is inclusive of the far corner
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=tile_color(tid))
    return img

def save_png(src: Union[Level, Rows], out_png: str, tile_size: int = 6, margin: int = 0) -> None:
    img = level_image(src, tile_size=tile_size, margin=margin)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
