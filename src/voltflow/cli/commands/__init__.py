"""CLI command handlers."""

from voltflow.cli.commands.pay import cmd_pay
from voltflow.cli.commands.screens import cmd_screens
from voltflow.cli.commands.tui import cmd_tui

__all__ = ["cmd_pay", "cmd_screens", "cmd_tui"]
