"""Payment success (receipt) screen."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from voltflow.models import Screen
from voltflow.models.fixtures import BILL, TRANSACTION_TOKEN
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.utils import format_amount


class PaymentSuccessScreen(VoltflowScreen):
    """Confirmation with the transaction token; Done returns Home."""

    DEFAULT_CSS = """
    PaymentSuccessScreen .check {
        color: $success;
        text-style: bold;
    }

    PaymentSuccessScreen .token {
        text-style: bold;
    }

    PaymentSuccessScreen #btn-done {
        width: 100%;
    }
    """

    screen_id = Screen.PAYMENT_SUCCESS
    heading = "Payment Successful"
    subheading = f"Your payment of {format_amount(BILL.balance)} has been processed."
    button_targets = {"btn-done": Screen.HOME}

    def compose_body(self) -> ComposeResult:
        yield Static("✓", classes="check")
        with Vertical(classes="card"):
            yield Static("Transaction Token", classes="muted")
            yield Static(TRANSACTION_TOKEN, classes="token")
        yield Button("Done", id="btn-done", variant="primary")
