"""Command-line tools for running and inspecting snake levels."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from snake_engine.errors import LevelError
from snake_engine.snake import Direction

logger = logging.getLogger(__name__)

_MOVE_CODES = {"U": "UP", "D": "DOWN", "L": "LEFT", "R": "RIGHT"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-engine",
        description="Run, inspect, and benchmark snake levels headlessly.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- levels ---
    sub.add_parser("levels", help="List the built-in levels.")

    # --- show ---
    show_p = sub.add_parser("show", help="Describe a level's initial layout.")
    show_p.add_argument("level", help="Built-in level name or level file.")

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Tick a level with scripted moves, printing snapshots.",
    )
    run_p.add_argument("level", help="Built-in level name or level file.")
    run_p.add_argument(
        "--moves", type=str, default="",
        help="Directions to tick, one letter each from U, D, L, R.",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON engine config (--seed overrides its seed).",
    )
    run_p.add_argument(
        "--keep-going", action="store_true",
        help="Keep ticking after a wall hit or self-bite.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser("benchmark", help="Measure tick throughput.")
    bench_p.add_argument("--level", type=str, default="snake1")
    bench_p.add_argument("--ticks", type=int, default=10_000)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _parse_moves(moves: str) -> list[Direction]:
    directions = []
    for code in moves.upper():
        if code not in _MOVE_CODES:
            raise ValueError(f"Unknown move {code!r}; use U, D, L or R.")
        directions.append(Direction[_MOVE_CODES[code]])
    return directions


def _run_levels(args: argparse.Namespace) -> int:
    from snake_engine.level import LEVELS, parse_level

    for name, text in LEVELS.items():
        level = parse_level(text)
        print(f"{name}\t{level.width}x{level.height}")  # noqa: T201
    return 0


def _run_show(args: argparse.Namespace) -> int:
    from snake_engine.level import load_level

    level = load_level(args.level)
    print(json.dumps({  # noqa: T201
        "dim": [level.width, level.height],
        "walls": len(level.walls),
        "head": list(level.head),
        "body": [list(p) for p in level.body],
        "food": list(level.food),
    }))
    return 0


def _run_run(args: argparse.Namespace) -> int:
    from snake_engine.config import EngineConfig
    from snake_engine.engine import Game
    from snake_engine.level import load_level

    try:
        directions = _parse_moves(args.moves)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    config = EngineConfig.load(args.config) if args.config else EngineConfig()
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)

    game = Game(load_level(args.level), config=config)
    for direction in directions:
        game.tick(direction)
        snapshot = game.last_snapshot()
        print(json.dumps(snapshot.to_dict()))  # noqa: T201
        reason = snapshot.game_over_reason
        if reason is not None and not args.keep_going:
            logger.info(
                "Game over (%s) with score %d.", reason.value, snapshot.score,
            )
            break
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_engine.benchmark import benchmark_throughput

    result = benchmark_throughput(
        level=args.level, ticks=args.ticks, seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-engine`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "levels": _run_levels,
        "show": _run_show,
        "run": _run_run,
        "benchmark": _run_benchmark,
    }
    try:
        return handlers[args.command](args)
    except (LevelError, OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot load input: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
