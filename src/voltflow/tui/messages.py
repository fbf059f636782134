"""Custom Textual messages for inter-widget communication."""
from __future__ import annotations

from textual.message import Message

from voltflow.models import Screen


class NavigateTo(Message):
    """Request to make a different screen current."""

    def __init__(self, target: Screen) -> None:
        self.target = target
        super().__init__()
