"""Usage detail sub-screen."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from voltflow.models import Screen
from voltflow.models.fixtures import USAGE
from voltflow.tui.screens.base import VoltflowScreen


class UsageDetailScreen(VoltflowScreen):
    DEFAULT_CSS = """
    UsageDetailScreen .usage-figure {
        text-style: bold;
        color: $primary;
    }

    UsageDetailScreen .usage-trend {
        color: $success;
    }
    """

    screen_id = Screen.USAGE_DETAIL
    heading = "Usage"
    subheading = "Electricity consumption"

    def compose_body(self) -> ComposeResult:
        with Vertical(classes="card"):
            yield Static("This Month", classes="muted")
            yield Static(f"{USAGE.this_month_kwh} kWh", classes="usage-figure")
            yield Static(USAGE.trend, classes="usage-trend")
            yield Static(USAGE.summary)
