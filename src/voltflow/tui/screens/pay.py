"""Pay screen - submits the simulated payment."""

import logging
from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Button, LoadingIndicator, Static

from voltflow.models import PaymentSession, Screen
from voltflow.models.fixtures import BILL, PAY_SCREEN_METHODS, QUICK_PAY_AMOUNTS
from voltflow.orchestration import PaymentFlow
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.utils import format_amount
from voltflow.tui.widgets import PaymentMethodItem, PaymentStatusIndicator

logger = logging.getLogger(__name__)


class PayScreen(VoltflowScreen):
    """
    Amount, quick amounts and payment method, with a Pay button.

    While the session is processing the Pay button is replaced by a
    loading indicator. A completed payment is consumed by the attached
    PaymentFlow, which moves on to the success screen.
    """

    DEFAULT_CSS = """
    PayScreen .amount-card {
        align-horizontal: center;
    }

    PayScreen .amount {
        text-style: bold;
        color: $primary;
    }

    PayScreen #pay-actions {
        dock: bottom;
        height: 5;
        padding: 0 2;
        background: $background;
    }

    PayScreen #pay-status {
        width: auto;
        margin: 1 2 0 0;
    }

    PayScreen #btn-pay {
        width: 1fr;
    }

    PayScreen #pay-spinner {
        width: 1fr;
        height: 3;
    }
    """

    screen_id = Screen.PAY
    heading = "Make Payment"
    subheading = BILL.biller

    def __init__(self, flow: PaymentFlow, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.flow = flow
        self._unsubscribe_view: Callable[[], None] | None = None

    @property
    def session(self) -> PaymentSession:
        return self.flow.session

    def compose_body(self) -> ComposeResult:
        with Vertical(classes="card amount-card"):
            yield Static("Amount to pay", classes="muted")
            yield Static(format_amount(BILL.balance), classes="amount")
            yield Static(
                f"Current balance: {format_amount(BILL.balance)} • Due {BILL.due_short}",
                classes="muted",
            )
        with Horizontal(classes="button-row"):
            for amount in QUICK_PAY_AMOUNTS:
                yield Button(
                    format_amount(amount, cents=False),
                    classes="quick-amount",
                )
        yield Static("Payment Method", classes="section-title")
        for index, method in enumerate(PAY_SCREEN_METHODS):
            yield PaymentMethodItem(method, selected=index == 0)

    def compose_actions(self) -> ComposeResult:
        with Horizontal(id="pay-actions"):
            yield PaymentStatusIndicator(id="pay-status")
            yield LoadingIndicator(id="pay-spinner")
            yield Button(
                f"Pay {format_amount(BILL.balance)}", id="btn-pay", variant="primary"
            )

    def on_mount(self) -> None:
        """Mirror the session and start consuming success events."""
        self._unsubscribe_view = self.session.subscribe(self._on_session_changed)
        self._render_session(self.session)
        self.flow.attach(consume=False)
        # Consuming a latched success navigates away; let mounting finish first
        self.call_after_refresh(self._consume_latched_success)

    def _consume_latched_success(self) -> None:
        # Skipped if the view was already unmounted and detached
        if self.flow.attached:
            self.flow.consume_success()

    def on_unmount(self) -> None:
        """Stop observing; a pending completion still latches success."""
        self.flow.detach()
        if self._unsubscribe_view is not None:
            self._unsubscribe_view()
            self._unsubscribe_view = None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-pay":
            event.stop()
            self.action_pay()
        elif event.button.has_class("quick-amount"):
            event.stop()
            self.notify("Custom amounts are not available in this preview")

    def action_pay(self) -> None:
        """Submit the payment; a repeat press while processing is ignored."""
        logger.info("Pay pressed for %s", format_amount(BILL.balance))
        self.flow.submit()

    def _on_session_changed(self, session: PaymentSession) -> None:
        self._render_session(session)

    def _render_session(self, session: PaymentSession) -> None:
        """Show the spinner while processing, the Pay button otherwise."""
        processing = session.is_processing
        try:
            spinner = self.query_one("#pay-spinner", LoadingIndicator)
            pay_button = self.query_one("#btn-pay", Button)
            status = self.query_one("#pay-status", PaymentStatusIndicator)
        except NoMatches:
            # Screen is being torn down after navigating away
            return
        spinner.display = processing
        pay_button.display = not processing
        status.set_status(session.status)
