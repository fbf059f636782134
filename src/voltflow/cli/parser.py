"""Argument parser construction for Voltflow CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from voltflow.models import Screen


def screen_route(value: str) -> Screen:
    """argparse type for a screen route such as ``pay`` or ``edit_profile``."""
    try:
        return Screen.from_route(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        description="Voltflow - utility bill payments in your terminal"
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory for logs (default: current directory)",
    )
    parser.add_argument(
        "--screen",
        "-s",
        type=screen_route,
        help="Route of the screen to start on (default: settings or home)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "screens",
        help="List screen routes, tabs and back targets",
    )

    pay_parser = subparsers.add_parser(
        "pay",
        help="Run a simulated payment without the TUI",
    )
    pay_parser.add_argument(
        "--delay-ms",
        type=positive_int,
        help="Simulated latency in milliseconds (default: from settings)",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    return build_parser().parse_args(argv)
