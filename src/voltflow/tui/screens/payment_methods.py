"""Payment methods sub-screen."""

from textual.app import ComposeResult
from textual.widgets import Button

from voltflow.models import Screen
from voltflow.models.fixtures import PAYMENT_METHODS
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.widgets import PaymentMethodItem


class PaymentMethodsScreen(VoltflowScreen):
    DEFAULT_CSS = """
    PaymentMethodsScreen #btn-add-method {
        width: 100%;
    }
    """

    screen_id = Screen.PAYMENT_METHODS
    heading = "Payment Methods"
    subheading = "Manage your payment options"

    def compose_body(self) -> ComposeResult:
        for method in PAYMENT_METHODS:
            yield PaymentMethodItem(method, show_default=True)
        yield Button("+ Add Payment Method", id="btn-add-method")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-add-method":
            event.stop()
            self.notify("Adding payment methods is not available in this preview")
