"""List the screens the app can show."""

from __future__ import annotations

import argparse

from voltflow.models import Screen


def cmd_screens(args: argparse.Namespace) -> int:
    """Print every route with its tab flag and back-button target."""
    del args
    width = max(len(screen.route) for screen in Screen)
    print(f"{'ROUTE':<{width}}  TAB  BACK")
    for screen in Screen:
        tab = "yes" if screen.is_top_level else "-"
        back = screen.back_target.route if screen.back_target else "-"
        print(f"{screen.route:<{width}}  {tab:<3}  {back}")
    return 0
