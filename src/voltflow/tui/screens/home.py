"""Home dashboard screen."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, ProgressBar, Static

from voltflow.models import Screen
from voltflow.models.fixtures import (
    ACCOUNT,
    BILL,
    GREETING,
    QUICK_ACTIONS,
    RECENT_ACTIVITY,
)
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.utils import format_amount, format_percent
from voltflow.tui.widgets import ActivityItem


def quick_action_id(label: str) -> str:
    """Button id for a quick action label, e.g. "action-usage-graph"."""
    return "action-" + label.lower().replace(" ", "-")


class HomeScreen(VoltflowScreen):
    """Greeting, bill summary, quick actions and recent activity."""

    DEFAULT_CSS = """
    HomeScreen .greeting-row {
        height: auto;
    }

    HomeScreen .greeting-row > Vertical {
        width: 1fr;
        height: auto;
    }

    HomeScreen .user-name {
        text-style: bold;
    }

    HomeScreen #btn-notifications {
        width: auto;
        border: none;
    }

    HomeScreen .balance {
        text-style: bold;
        color: $primary;
    }

    HomeScreen ProgressBar {
        padding: 1 0 0 0;
    }
    """

    screen_id = Screen.HOME
    heading = GREETING
    subheading = None
    button_targets = {
        "btn-notifications": Screen.NOTIFICATIONS,
        "btn-usage": Screen.USAGE_DETAIL,
        "btn-pay-now": Screen.PAY,
        "btn-view-all": Screen.HISTORY,
        **{
            quick_action_id(action.label): action.target
            for action in QUICK_ACTIONS
            if action.target is not None
        },
    }

    def compose_body(self) -> ComposeResult:
        with Horizontal(classes="greeting-row"):
            with Vertical():
                yield Static(ACCOUNT.first_name, classes="user-name")
            yield Button("Alerts", id="btn-notifications")

        with Vertical(classes="card", id="bill-summary"):
            yield Static(f"ϟ {BILL.biller}  [{BILL.meter_id}]", markup=False)
            yield Static(BILL.masked_account, classes="muted")
            yield Static("Current Balance", classes="muted")
            yield Static(format_amount(BILL.balance), classes="balance")
            yield Static(f"Due {BILL.due_date}", classes="muted")
            yield ProgressBar(total=100, show_eta=False, id="usage-progress")
            yield Static(f"Usage this cycle: {format_percent(BILL.usage_ratio)}")
            with Horizontal(classes="button-row"):
                yield Button("Pay Now →", id="btn-pay-now", variant="primary")
                yield Button("Usage details", id="btn-usage")

        yield Static("Quick Actions", classes="section-title")
        with Horizontal(classes="button-row"):
            for action in QUICK_ACTIONS:
                yield Button(action.label, id=quick_action_id(action.label))

        with Horizontal(classes="button-row"):
            yield Static("Recent Activity", classes="section-title")
            yield Button("View all >", id="btn-view-all")
        for activity in RECENT_ACTIVITY:
            yield ActivityItem(activity)

    def on_mount(self) -> None:
        """Fill the usage bar."""
        self.query_one("#usage-progress", ProgressBar).update(
            progress=round(BILL.usage_ratio * 100)
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == quick_action_id("Support"):
            event.stop()
            self.notify("Support is not available in this preview")
