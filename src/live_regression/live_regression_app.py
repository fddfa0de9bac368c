#  Copyright (c) Michele De Stefano - 2026.

import argparse
import dataclasses

import pygame as pg

from . import __version__
from .config import FitConfig
from .session import DEFAULT_RESOURCE, start_session


def build_config(args: argparse.Namespace) -> FitConfig:
    """
    Builds the session configuration from the parsed command line.

    A custom amplification rescales the default slope learning rate, unless
    the slope learning rate is given explicitly.
    """
    config = FitConfig()
    if args.amplification is not None:
        config = config.with_amplification(args.amplification)
    overrides = {
        "margin": args.margin,
        "point_radius": args.point_radius,
        "slope_learning_rate": args.slope_learning_rate,
        "intercept_learning_rate": args.intercept_learning_rate,
        "min_tick_delay_ms": args.min_tick_delay_ms,
        "fps": args.fps,
        "window_size": tuple(args.window_size) if args.window_size else None,
    }
    return dataclasses.replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Animated gradient descent fit of a linear regression "
        "line on a two-column CSV dataset"
    )
    parser.add_argument(
        "data",
        nargs="?",
        type=str,
        default=DEFAULT_RESOURCE,
        help="Path or URL of the CSV dataset. Default: %(default)s.",
    )
    parser.add_argument(
        "--seed",
        dest="seed",
        type=int,
        default=None,
        help="Seed for the initial regression parameters.",
    )
    parser.add_argument(
        "--margin",
        dest="margin",
        type=float,
        default=None,
        help=f"Border margin in pixels. Default: {FitConfig.margin}.",
    )
    parser.add_argument(
        "--amplification",
        dest="amplification",
        type=float,
        default=None,
        help="Display amplification of the normalized values. "
        f"Default: {FitConfig.amplification}.",
    )
    parser.add_argument(
        "--point-radius",
        dest="point_radius",
        type=int,
        default=None,
        help=f"Radius of the data points. Default: {FitConfig.point_radius}.",
    )
    parser.add_argument(
        "--slope-learning-rate",
        dest="slope_learning_rate",
        type=float,
        default=None,
        help=f"Default: {FitConfig.slope_learning_rate}.",
    )
    parser.add_argument(
        "--intercept-learning-rate",
        dest="intercept_learning_rate",
        type=float,
        default=None,
        help=f"Default: {FitConfig.intercept_learning_rate}.",
    )
    parser.add_argument(
        "--min-tick-delay",
        dest="min_tick_delay_ms",
        type=int,
        default=None,
        help="Minimum delay between two frames, in milliseconds. "
        f"Default: {FitConfig.min_tick_delay_ms}.",
    )
    parser.add_argument(
        "--fps",
        dest="fps",
        type=int,
        default=None,
        help=f"Maximum frame rate. Default: {FitConfig.fps}.",
    )
    parser.add_argument(
        "--window-size",
        dest="window_size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="Initial window size. Default: 800 600.",
    )
    parser.add_argument(
        "--log",
        dest="log",
        action="store_true",
        help="Print regression parameters at every frame. "
        "Default: %(default)s.",
    )
    parser.add_argument(
        "-v",
        "--version",
        dest="version_requested",
        action="store_true",
        help="Print the version and exit.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.version_requested:
        print(f"Version: {__version__}")
        return 0

    config = build_config(args)

    pg.init()
    try:
        session = start_session(
            args.data, config=config, seed=args.seed, log=args.log
        )
    finally:
        pg.quit()

    return 0 if session is not None else 1
