#!/usr/bin/env python3
# Interactive map viewer (no gameplay).
# - RIGHT/LEFT: next/previous level (unsigned wraparound)
# - PAGEUP/PAGEDOWN: jump 10 levels
# - ESC or closing the window quits

import argparse
import logging

import pygame

from fastmaze.config import add_config_arguments, config_from_args
from fastmaze.render.surface import TileSurfaces, draw_level, window_caption
from fastmaze.session import LevelSession

WIN_NAME = "Fast dungeon/maze generator"

KEY_STEPS = {
    pygame.K_RIGHT: 1,
    pygame.K_LEFT: -1,
    pygame.K_PAGEUP: 10,
    pygame.K_PAGEDOWN: -10,
}

def main():
    ap = argparse.ArgumentParser(description=WIN_NAME)
    ap.add_argument("--level", type=int, default=0, help="Starting level index")
    ap.add_argument("--verbose", action="store_true", help="Log generation details")
    add_config_arguments(ap)
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = config_from_args(args)
    session = LevelSession(cfg, args.level)

    pygame.init()
    screen = pygame.display.set_mode((cfg.width * cfg.tile_size, cfg.height * cfg.tile_size))
    clock = pygame.time.Clock()
    tiles = TileSurfaces(cfg.tile_size)

    dirty = True
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in KEY_STEPS:
                    session.step(KEY_STEPS[ev.key])
                    dirty = True

        if dirty:
            lvl = session.current
            draw_level(screen, lvl, tiles)
            pygame.display.set_caption(window_caption(lvl, WIN_NAME))
            pygame.display.flip()
            dirty = False
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
