"""Command line entry point: ``python -m warren``.

Prints a generated dungeon as ASCII art or as the JSON document consumed by
renderers.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from warren import config
from warren.environment.ascii import render_ascii
from warren.environment.generators import DungeonConfigError, DungeonGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warren", description="Generate a seeded rooms-and-corridors dungeon"
    )
    parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT)
    parser.add_argument("--min-rooms", type=int, default=config.DEFAULT_MIN_ROOMS)
    parser.add_argument("--max-rooms", type=int, default=config.DEFAULT_MAX_ROOMS)
    parser.add_argument(
        "--min-room-size", type=int, default=config.DEFAULT_MIN_ROOM_SIZE
    )
    parser.add_argument(
        "--max-room-size", type=int, default=config.DEFAULT_MAX_ROOM_SIZE
    )
    parser.add_argument(
        "--complexity",
        type=float,
        default=config.DEFAULT_COMPLEXITY_LEVEL,
        help="0-1: extra corridors and merge likelihood",
    )
    parser.add_argument(
        "--corridor-width", type=int, default=config.DEFAULT_CORRIDOR_WIDTH
    )
    parser.add_argument(
        "--overlap-chance",
        type=float,
        default=config.DEFAULT_OVERLAP_CHANCE,
        help="0-1: probability factor for merging overlapping rooms",
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for reproducible output (default: random)"
    )
    parser.add_argument(
        "--rng",
        choices=("mersenne", "lcg"),
        default=config.DEFAULT_RNG_ALGORITHM,
        help="Random number backend (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=("ascii", "json"),
        default="ascii",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log generation progress"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        generator = DungeonGenerator(
            width=args.width,
            height=args.height,
            min_rooms=args.min_rooms,
            max_rooms=args.max_rooms,
            min_room_size=args.min_room_size,
            max_room_size=args.max_room_size,
            complexity_level=args.complexity,
            corridor_width=args.corridor_width,
            overlap_chance=args.overlap_chance,
            seed=args.seed,
            rng_algorithm=args.rng,
        )
    except DungeonConfigError as e:
        print(f"warren: {e}", file=sys.stderr)
        return 2

    dungeon = generator.generate()
    logger.debug("Layer timings:\n%s", generator.timings.report())

    if args.format == "json":
        print(json.dumps(dungeon.to_dict()))
    else:
        print(render_ascii(dungeon))
        logger.info(
            "seed=%d rooms=%d doors=%d",
            dungeon.metadata.seed,
            dungeon.metadata.room_count,
            len(dungeon.doors),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
