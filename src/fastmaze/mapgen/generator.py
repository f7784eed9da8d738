# src/fastmaze/mapgen/generator.py
# Level generator: seed, start room, then repeated room/corridor attachment.

import logging
from typing import Callable, List, Optional

from ..config import DEFAULT_CONFIG, GenConfig
from ..grid import Grid
from ..level import GenStats, Level
from ..rng import CrtRandom, rng_for_level, seed_for_level, M
from ..tiles import Tile
from .placement import can_place_room, usable_connection_point
from .rooms import Room, corridor_shape

logger = logging.getLogger(__name__)

CarveHook = Callable[[Room, Grid], None]

def _room_size(rng: CrtRandom, lo: int, hi: int) -> int:
    return rng.below(hi - lo + 1) + lo

def find_connection_point(grid: Grid, rng: CrtRandom, w: int, h: int, tries: int):
    """
    Sample cells until one can host a w*h room.
    The sample window is inset by the room size so the room can fit around it.
    Returns (x, y, direction), or None once `tries` samples are used up.
    """
    for _ in range(tries):
        cx = rng.below(grid.width - w) + w - 1
        cy = rng.below(grid.height - h) + h - 1
        direction = usable_connection_point(grid, cx, cy)
        if direction is not None:
            return cx, cy, direction
    return None

def _farther(room: Room, origin, end) -> bool:
    # Per-axis comparison, either axis is enough. Not a true distance.
    sx, sy = origin
    ex, ey = end
    return abs(room.x - sx) >= abs(room.x - ex) or abs(room.y - sy) >= abs(room.y - ey)

def generate(
    level: int,
    config: GenConfig = DEFAULT_CONFIG,
    on_carve: Optional[CarveHook] = None,
) -> Level:
    """
    Build the map for `level`. Same level and config always give the same map.
    `on_carve(room, grid)` is called for every accepted room just before it
    is carved, while the grid still shows the pre-carve state.
    """
    index = level % M
    seed = seed_for_level(level, config.seed_base)
    rng = rng_for_level(level, config.seed_base)

    grid = Grid.walls(config.width, config.height)
    x_lo, x_hi = config.size_bounds(grid.width)
    y_lo, y_hi = config.size_bounds(grid.height)

    # Start room, kept clear of the edges by its own size. Its origin is the
    # reference point for the exit search and the first exit candidate.
    w = _room_size(rng, x_lo, x_hi)
    h = _room_size(rng, y_lo, y_hi)
    x = rng.below(grid.width - w - w) + w
    y = rng.below(grid.height - h - h) + h
    grid.fill_region(x, y, w, h, Tile.FLOOR)
    origin = end = (x, y)

    sx = x + rng.below(w)
    sy = y + rng.below(h)
    grid.set(sx, sy, Tile.START)
    start = (sx, sy)

    rooms = corridors = doors = rejected = abandoned = 0
    for _ in range(config.attempts):
        w = _room_size(rng, x_lo, x_hi)
        h = _room_size(rng, y_lo, y_hi)

        con = find_connection_point(grid, rng, w, h, config.connection_tries)
        if con is None:
            abandoned += 1
            continue
        cx, cy, direction = con

        corridor = rng.below(config.hall_chance) == 0
        if corridor:
            w, h = corridor_shape(w, h, vertical=rng.below(2) == 0)

        room = Room.attached(cx, cy, w, h, direction)
        if not can_place_room(grid, room):
            rejected += 1
            continue

        door = rng.below(config.door_chance) == 0
        if on_carve is not None:
            on_carve(room, grid)
        grid.set(cx, cy, Tile.DOOR if door else Tile.FLOOR)
        grid.fill_region(room.x, room.y, room.w, room.h, Tile.FLOOR)

        rooms += 1
        corridors += corridor
        doors += door

        # Exit candidate: open room, not behind a door, farther than the last one
        if not door and room.w > 1 and room.h > 1 and _farther(room, origin, end):
            end = (room.x + rng.below(room.w), room.y + rng.below(room.h))

    # Stamped last: when no room qualified the exit sits on the start room
    # origin, which may be the START cell itself.
    grid.set(end[0], end[1], Tile.END)

    stats = GenStats(attempts=config.attempts, rooms=rooms, corridors=corridors,
                     doors=doors, rejected=rejected, abandoned=abandoned)
    logger.debug(
        "level %d (seed %#010x): %d rooms, %d corridors, %d doors, %d rejected, %d abandoned",
        index, seed, rooms, corridors, doors, rejected, abandoned,
    )
    return Level.freeze(grid, index=index, seed=seed, start=start, end=end, stats=stats)

def generate_grid(level: int, config: GenConfig = DEFAULT_CONFIG) -> List[List[int]]:
    return generate(level, config).rows()
