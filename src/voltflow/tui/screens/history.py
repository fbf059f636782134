"""History tab."""

from textual.app import ComposeResult

from voltflow.models import Screen
from voltflow.models.fixtures import HISTORY
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.widgets import ActivityItem


class HistoryScreen(VoltflowScreen):
    """Payment records, newest first."""

    screen_id = Screen.HISTORY
    heading = "History"
    subheading = "Your payment records"

    def compose_body(self) -> ComposeResult:
        for activity in HISTORY:
            yield ActivityItem(activity)
