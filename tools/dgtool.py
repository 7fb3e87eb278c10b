#!/usr/bin/env python3
import argparse
import logging

from tombcrawl.config import DEFAULT_CONFIG
from tombcrawl.engine.state import GameState
from tombcrawl.render.snapshot import save_png

logger = logging.getLogger("dgtool")


def _config(args):
    return DEFAULT_CONFIG.with_overrides(max_rooms=args.rooms)


def cmd_ascii(args):
    state = GameState(_config(args), seed=args.seed)
    marks = [(e.x, e.y, e.glyph) for e in state.entities[1:]] + [(state.player.x, state.player.y, "@")]
    print(state.grid.to_ascii(marks))
    print(f"rooms={state.room_count} entities={len(state.entities)}")


def cmd_png(args):
    state = GameState(_config(args), seed=args.seed)
    if not args.unlit:
        state.tick()
    path = save_png(state, args.out, cell=args.cell)
    print(f"Wrote {path}")


def cmd_stats(args):
    counts, floors = [], []
    for seed in range(args.first, args.first + args.count):
        state = GameState(_config(args), seed=seed)
        counts.append(state.room_count)
        floors.append(state.grid.floor_count())
        logger.debug("seed %d: %d rooms, %d floor tiles", seed, state.room_count, floors[-1])
    empty = sum(1 for c in counts if c == 0)
    print(f"seeds={len(counts)} min={min(counts)} max={max(counts)} "
          f"mean={sum(counts) / len(counts):.2f} empty={empty} "
          f"floor_mean={sum(floors) / len(floors):.1f}")


def main():
    p = argparse.ArgumentParser()
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("--rooms", type=int, default=DEFAULT_CONFIG.max_rooms, help="Room attempt budget")
    sub = p.add_subparsers(dest="cmd", required=True)
    p1 = sub.add_parser("ascii")
    p1.add_argument("--seed", type=int, required=True)
    p1.set_defaults(func=cmd_ascii)
    p2 = sub.add_parser("png")
    p2.add_argument("--seed", type=int, required=True)
    p2.add_argument("--out", type=str, required=True)
    p2.add_argument("--cell", type=int, default=8)
    p2.add_argument("--unlit", action="store_true", help="Skip the first FOV tick (all black)")
    p2.set_defaults(func=cmd_png)
    p3 = sub.add_parser("stats")
    p3.add_argument("--first", type=int, default=0)
    p3.add_argument("--count", type=int, default=100)
    p3.set_defaults(func=cmd_stats)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == '__main__':
    main()
