# Level switching for interactive hosts (viewer): holds the current level
# index and its map, regenerating from scratch on every change.

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, GenConfig
from .level import Level
from .mapgen.generator import generate
from .rng import M

logger = logging.getLogger(__name__)


class LevelSession:
    """
    The level index is an unsigned 32-bit counter: stepping left from 0
    lands on 4294967295, which is a perfectly good level.
    """

    def __init__(self, config: GenConfig = DEFAULT_CONFIG, level: int = 0):
        self.config = config
        self._level = level % M
        self.current: Level = self._build()

    @property
    def level(self) -> int:
        return self._level

    def _build(self) -> Level:
        lvl = generate(self._level, self.config)
        logger.info("level %d ready: %d rooms, exit at %s", lvl.index, lvl.stats.rooms, lvl.end)
        return lvl

    def goto(self, level: int) -> Level:
        self._level = level % M
        self.current = self._build()
        return self.current

    def step(self, delta: int) -> Level:
        return self.goto(self._level + delta)
