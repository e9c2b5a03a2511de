"""Command line entry point choosing between the game and the simulation."""

from __future__ import annotations

import argparse
from typing import Sequence

from pyrohex.game import Game
from pyrohex.plot import plot_results
from pyrohex.simulation import Simulation

DEFAULT_WIDTH = 25
DEFAULT_HEIGHT = 50


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _parse_dimension(text: str, fallback: int) -> int:
    try:
        value = int(text)
    except ValueError:
        return fallback
    return value if value >= 0 else fallback


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command line options."""
    parser = argparse.ArgumentParser(
        prog="pyrohex",
        description="Forest fire simulation and game on a hexagonal grid.",
    )
    parser.add_argument("-V", "--version", action="version", version="PyroHex 1.0")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-g", "--game", action="store_true", help="start the interactive game"
    )
    mode.add_argument(
        "-s",
        "--simulation",
        action="store_true",
        help="run the simulation and plot the results",
    )
    parser.add_argument(
        "--steps",
        type=_non_negative_int,
        metavar="STEPS",
        help="number of trials per density (requires --simulation)",
    )
    parser.add_argument(
        "--grid",
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=[str(DEFAULT_WIDTH), str(DEFAULT_HEIGHT)],
        help="grid size: width and height",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program with the given arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.steps is not None and not args.simulation:
        parser.error("--steps requires --simulation")

    width = _parse_dimension(args.grid[0], DEFAULT_WIDTH)
    height = _parse_dimension(args.grid[1], DEFAULT_HEIGHT)
    print(f"Grid size: {width} x {height}")
    print(f"game flag present: {str(args.game).lower()}")
    print(f"simulation flag present: {str(args.simulation).lower()}")

    if args.game:
        print("Starting game mode...")
        Game(height, width).run()
    else:
        if args.steps is None:
            parser.error("--steps is required with --simulation")
        print(f"Running the simulation for {args.steps} steps...")
        results = Simulation(width, height, args.steps).run()
        plot_results(results)
    return 0