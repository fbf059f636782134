"""Auto-pay sub-screen."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static, Switch

from voltflow.models import Screen
from voltflow.models.fixtures import AUTO_PAY_DAY, PAYMENT_METHODS
from voltflow.tui.screens.base import VoltflowScreen


class AutoPayScreen(VoltflowScreen):
    """Auto-pay toggle and payment settings (display only)."""

    DEFAULT_CSS = """
    AutoPayScreen .toggle-row {
        height: auto;
        align: left middle;
    }

    AutoPayScreen .toggle-row Vertical {
        width: 1fr;
        height: auto;
    }

    AutoPayScreen .setting-label {
        text-style: bold;
    }
    """

    screen_id = Screen.AUTO_PAY
    heading = "Auto-Pay"
    subheading = "Automatic bill payments"

    def compose_body(self) -> ComposeResult:
        with Horizontal(classes="card toggle-row"):
            with Vertical():
                yield Label("Auto-Pay", classes="setting-label")
                yield Static("Not enabled", classes="muted")
            yield Switch(value=False, id="autopay-switch", disabled=True)

        default_method = next(m for m in PAYMENT_METHODS if m.is_default)
        yield Static("Payment Settings", classes="section-title")
        with Vertical(classes="card"):
            yield Label("Payment Day", classes="setting-label")
            yield Static(f"Day of month to pay: {AUTO_PAY_DAY}", classes="muted")
            yield Label("Payment Method", classes="setting-label")
            yield Static(
                f"{default_method.name} {default_method.details}", classes="muted"
            )
