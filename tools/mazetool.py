#!/usr/bin/env python3
import argparse
import logging
import os

from fastmaze.config import add_config_arguments, config_from_args
from fastmaze.mapgen.generator import generate
from fastmaze.tsv import write_tsv

def cmd_emit(args, cfg):
    level = generate(args.level, cfg)
    write_tsv(level.rows(), args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args, cfg):
    base = os.path.join(args.outdir, f"{cfg.width}x{cfg.height}")
    os.makedirs(base, exist_ok=True)
    for lvl in args.levels:
        level = generate(lvl, cfg)
        write_tsv(level.rows(), os.path.join(base, f"{level.index:010d}.tsv"))
    print(f"Wrote golden pack to {base}")

def cmd_show(args, cfg):
    level = generate(args.level, cfg)
    print(level.to_text())
    s = level.stats
    print(f"level={level.index} seed={level.seed:#010x} start={level.start} end={level.end}")
    print(f"rooms={s.rooms} corridors={s.corridors} doors={s.doors} "
          f"rejected={s.rejected} abandoned={s.abandoned} attempts={s.attempts}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    add_config_arguments(p)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--levels', type=int, nargs='+', default=[0, 1, -1])
    p2.add_argument('--outdir', type=str, default=os.path.join('data', 'golden_levels'))
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('show')
    p3.add_argument('--level', type=int, default=0)
    p3.set_defaults(func=cmd_show)
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    args.func(args, config_from_args(args))

if __name__ == '__main__':
    main()
