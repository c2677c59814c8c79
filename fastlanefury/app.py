"""Command-line entry point: open the window, load assets and run the tasks."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

import pygame

from .assets import VehicleSprites
from .display import close_display, init_display
from .ptask import TaskScheduler
from .stat_file import StatisticsStore
from .tasks_core import create_context, create_graphic_task, create_user_task

DEFAULT_ASSETS = Path("../Assets")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="fastlanefury", description="Highway traffic simulation with autonomous vehicles."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=DEFAULT_ASSETS,
        help="directory holding Bitmap/ and Data/ (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    return parser.parse_args(argv)


def _fail(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the game until the user quits; return the exit status."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    rng = random.Random(args.seed)

    try:
        init_display()
    except RuntimeError:
        return _fail("failed to initialize display!")

    try:
        try:
            sprites = VehicleSprites.load(args.assets / "Bitmap" / "VeicleBitmap")
        except (FileNotFoundError, pygame.error):
            return _fail("failed to load graphics assets!")
        try:
            statistics = StatisticsStore.load(args.assets / "Data")
        except (FileNotFoundError, ValueError):
            return _fail("failed to load statistic file!")

        scheduler = TaskScheduler()
        ctx = create_context(scheduler, sprites, statistics, rng)
        try:
            create_user_task(ctx)
        except RuntimeError:
            return _fail("can not create user task")
        try:
            create_graphic_task(ctx)
        except RuntimeError:
            return _fail("can not create graphics task")

        scheduler.wait_for_end(0)
        return 0
    finally:
        close_display()


if __name__ == "__main__":
    sys.exit(main())