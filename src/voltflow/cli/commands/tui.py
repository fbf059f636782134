"""TUI launch command."""

from __future__ import annotations

import argparse

from voltflow.tui.app import VoltflowApp


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the TUI application."""
    app = VoltflowApp(initial_screen=getattr(args, "screen", None))
    app.run()
    return 0
