import argparse
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

MAP_SEED = 9578768

@dataclass(frozen=True)
class GenConfig:
    # Grid size in tiles
    width: int = 90
    height: int = 90
    # None means one attempt per tile (width * height)
    room_attempts: Optional[int] = None
    # Inclusive room side range; the default mirrors "x to x*2"
    room_min: int = 4
    room_max: int = 7
    # 1/N chances
    hall_chance: int = 4
    door_chance: int = 2
    seed_base: int = MAP_SEED
    # Samples per attempt before the connection search gives up
    connection_tries: int = 4096
    # Pixels per tile for the renderers
    tile_size: int = 6

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            if getattr(self, name) < 3:
                raise ValueError(f"{name} must be at least 3")
        for name in ("room_min", "hall_chance", "door_chance", "connection_tries", "tile_size"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if self.room_max < self.room_min:
            raise ValueError("room_max must not be smaller than room_min")
        if self.room_attempts is not None and self.room_attempts < 0:
            raise ValueError("room_attempts must not be negative")

    @property
    def attempts(self) -> int:
        if self.room_attempts is None:
            return self.width * self.height
        return self.room_attempts

    def size_bounds(self, extent: int) -> Tuple[int, int]:
        """
        Room side range along an axis of `extent` tiles.
        The start room needs a margin of its own size on both sides, so the
        upper bound is clamped to (extent - 1) // 2 on small grids.
        """
        hi = min(self.room_max, (extent - 1) // 2)
        lo = min(self.room_min, hi)
        return lo, hi

DEFAULT_CONFIG = GenConfig()

# (flag, field, help)
_FLAGS = (
    ("--width", "width", "Grid width in tiles"),
    ("--height", "height", "Grid height in tiles"),
    ("--attempts", "room_attempts", "Room placement attempts (default: width*height)"),
    ("--room-min", "room_min", "Smallest room side"),
    ("--room-max", "room_max", "Largest room side"),
    ("--hall-chance", "hall_chance", "1/N chance a room becomes a corridor"),
    ("--door-chance", "door_chance", "1/N chance a connection becomes a door"),
    ("--seed-base", "seed_base", "Seed combined with the level index"),
    ("--tries", "connection_tries", "Connection point samples per attempt"),
    ("--tile", "tile_size", "Tile size in pixels"),
)

def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    defaults = {f.name: f.default for f in fields(GenConfig)}
    group = parser.add_argument_group("generation")
    for flag, name, text in _FLAGS:
        default = defaults[name]
        if default is not None:
            text = f"{text} (default: {default})"
        group.add_argument(flag, dest=name, type=int, default=None, help=text)

def config_from_args(args: argparse.Namespace, base: GenConfig = DEFAULT_CONFIG) -> GenConfig:
    """Overlay any flags the user passed on top of `base`."""
    changes = {}
    for _, name, _ in _FLAGS:
        value = getattr(args, name, None)
        if value is not None:
            changes[name] = value
    return replace(base, **changes)
