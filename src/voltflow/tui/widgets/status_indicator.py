"""Payment status indicator widget."""

from textual.reactive import reactive
from textual.widgets import Static

from voltflow.models import PaymentStatus


class PaymentStatusIndicator(Static):
    """
    Dot plus label mirroring the payment session phase.

    - Steady dot: idle
    - Blinking dot: processing
    - Green dot: succeeded
    """

    DEFAULT_CSS = """
    PaymentStatusIndicator {
        width: auto;
        height: 1;
        background: transparent;
    }

    PaymentStatusIndicator.idle {
        color: $text-muted;
    }

    PaymentStatusIndicator.processing {
        color: $warning;
    }

    PaymentStatusIndicator.succeeded {
        color: $success;
    }
    """

    LABELS = {
        PaymentStatus.IDLE: "Ready",
        PaymentStatus.PROCESSING: "Processing…",
        PaymentStatus.SUCCEEDED: "Paid",
    }

    status: reactive[PaymentStatus] = reactive(PaymentStatus.IDLE)
    _blink_visible: reactive[bool] = reactive(True)
    _blink_timer: object = None

    def __init__(self, **kwargs: object) -> None:
        super().__init__("● Ready", **kwargs)
        self.add_class("idle")

    def on_mount(self) -> None:
        """Start the blink timer."""
        self._blink_timer = self.set_interval(0.5, self._toggle_blink)

    def _label(self, dot_visible: bool) -> str:
        dot = "●" if dot_visible else " "
        return f"{dot} {self.LABELS[self.status]}"

    def watch_status(self, status: PaymentStatus) -> None:
        """Update appearance when the payment phase changes."""
        self.remove_class("idle", "processing", "succeeded")
        self.add_class(status.value)
        self._blink_visible = True
        self.update(self._label(True))

    def _toggle_blink(self) -> None:
        """Toggle visibility for blink effect."""
        if self.status is PaymentStatus.PROCESSING:
            self._blink_visible = not self._blink_visible
            self.update(self._label(self._blink_visible))

    def set_status(self, status: PaymentStatus) -> None:
        self.status = status
