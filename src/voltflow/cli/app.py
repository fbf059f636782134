"""CLI orchestration and command routing."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from voltflow.cli.commands import cmd_pay, cmd_screens, cmd_tui
from voltflow.cli.parser import parse_args
from voltflow.config.paths import reset_paths

logger = logging.getLogger(__name__)


def dispatch(args: argparse.Namespace) -> int:
    """Route parsed args to the correct command handler."""
    command_handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "screens": cmd_screens,
        "pay": cmd_pay,
    }

    if args.command is None:
        return cmd_tui(args)

    handler = command_handlers.get(args.command)
    if handler is None:
        return cmd_tui(args)

    return handler(args)


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[], None] | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and execute command."""
    args = parse_args(argv)

    if args.workdir:
        workdir = args.workdir.resolve()
        workdir.mkdir(parents=True, exist_ok=True)
        os.chdir(workdir)
        # Paths were cached for the old cwd when settings were imported
        reset_paths()

    if configure_logging is not None:
        configure_logging()

    logger.info("Working directory: %s", Path.cwd())
    return dispatch(args)
