"""Command-line tools for running the snake simulation headless."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless grid snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run movement and food ticks with random input.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--ticks", type=int, default=200)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument(
        "--turn-chance", type=float, default=0.2,
        help="Probability of requesting a random heading before each tick.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config to a JSON file.",
    )
    init_p.add_argument("path", help="Destination JSON path.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig
    from grid_snake.engine import GameEngine
    from grid_snake.snake import Direction

    config = GameConfig.load(args.config) if args.config else GameConfig()
    config = config.with_overrides(
        seed=args.seed, width=args.width, height=args.height,
    )
    engine = GameEngine(config)
    input_rng = np.random.default_rng(config.seed)
    directions = list(Direction)

    for i in range(args.ticks):
        if i % config.food_every == 0:
            engine.spawn_food()
        if input_rng.random() < args.turn_chance:
            engine.set_direction(directions[int(input_rng.integers(len(directions)))])
        engine.step()

    print(  # noqa: T201
        f"ticks={engine.tick} rounds={engine.rounds} "
        f"longest={engine.longest} length={engine.snake.length} "
        f"food={len(engine.food_positions)}"
    )
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig

    GameConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
