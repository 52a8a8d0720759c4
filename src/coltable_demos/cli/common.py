from __future__ import annotations

import argparse

from coltable import set_colors_enabled


def add_color_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_mutually_exclusive_group()
    g.add_argument("--color", dest="color", action="store_true", default=None, help="Force ANSI colours on")
    g.add_argument("--no-color", dest="color", action="store_false", default=None, help="Force ANSI colours off")


def apply_color_args(args: argparse.Namespace) -> None:
    # None leaves terminal auto-detection in place
    if args.color is not None:
        set_colors_enabled(args.color)
