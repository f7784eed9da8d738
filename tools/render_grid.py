#!/usr/bin/env python3
# Render generated levels (or TSV grids) to PNGs using Pillow.

import argparse
import os

from fastmaze.config import add_config_arguments, config_from_args
from fastmaze.mapgen.generator import generate
from fastmaze.render.image import save_png
from fastmaze.tiles import Tile
from fastmaze.tsv import read_tsv

_KNOWN = {int(t) for t in Tile}

def load_tsv(path):
    rows = read_tsv(path)
    if not rows or any(len(r) != len(rows[0]) for r in rows):
        raise SystemExit(f"{path}: expected a rectangular grid.")
    bad = {v for r in rows for v in r} - _KNOWN
    if bad:
        raise SystemExit(f"{path}: unknown tile ids {sorted(bad)}")
    return rows

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--first", type=int, default=0, help="First level index")
    ap.add_argument("--count", type=int, default=1, help="Number of consecutive levels")
    ap.add_argument("--tsv", nargs="*", default=[], help="Render these TSV files instead of generating")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    add_config_arguments(ap)
    args = ap.parse_args()
    cfg = config_from_args(args)

    if args.tsv:
        for path in args.tsv:
            name = os.path.splitext(os.path.basename(path))[0]
            save_png(load_tsv(path), os.path.join(args.outdir, f"{name}.png"), tile_size=cfg.tile_size)
    else:
        for lvl in range(args.first, args.first + args.count):
            level = generate(lvl, cfg)
            save_png(level, os.path.join(args.outdir, f"{level.index:010d}.png"), tile_size=cfg.tile_size)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
