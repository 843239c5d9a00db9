"""Headless ASCII demo for the engine.

Run with: `python -m blockfall`

Plays a game with gravity only (no commands) for a number of ticks and prints
the final frame, useful as a smoke test that pieces fall, land and stack.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import CELL_EDGE, GameConfig
from .loop import GameLoop
from .render import format_grid, render_grid


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ticks", type=int, default=200, help="Number of gravity ticks to run.")
    parser.add_argument("--width", type=int, default=200, help="Surface width in pixels.")
    parser.add_argument("--height", type=int, default=400, help="Surface height in pixels.")
    parser.add_argument("--cell-edge", type=int, default=CELL_EDGE, help="Cell edge in pixels.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawning.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = GameConfig(
        surface_width=args.width,
        surface_height=args.height,
        cell_edge=args.cell_edge,
        random_seed=args.seed,
    )
    loop = GameLoop(config)
    for _ in range(args.ticks):
        if loop.step().is_game_over:
            break
    print(format_grid(render_grid(loop.state)))


if __name__ == "__main__":
    main()
