"""Payment flow - reacts to payment success independent of the UI.

The Pay view attaches a PaymentFlow while it is mounted. Each success event
is consumed exactly once: the flag is cleared before navigating, so the next
notification or render pass sees nothing to react to.
"""

import logging
from collections.abc import Callable

from voltflow.models import Navigator, PaymentSession, Screen

logger = logging.getLogger(__name__)


class PaymentFlow:
    """Couples a PaymentSession to the Navigator for the pay screen."""

    def __init__(self, navigator: Navigator, session: PaymentSession) -> None:
        self.navigator = navigator
        self.session = session
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def submit(self) -> None:
        """User pressed Pay."""
        self.session.start_payment()

    def consume_success(self) -> bool:
        """Clear a latched success and move to the success screen.

        Returns:
            True if a success was consumed.
        """
        if not self.session.succeeded:
            return False
        self.session.clear_success()
        logger.info("Payment success consumed, showing receipt")
        self.navigator.navigate(Screen.PAYMENT_SUCCESS)
        return True

    def attach(self, *, consume: bool = True) -> None:
        """Start reacting to session changes.

        Args:
            consume: Also consume a success that completed while the pay
                view was not shown. Views that cannot navigate yet pass
                False and call consume_success() once they can.
        """
        if self._unsubscribe is None:
            self._unsubscribe = self.session.subscribe(self._on_session_changed)
        if consume:
            self.consume_success()

    def detach(self) -> None:
        """Stop reacting. Any pending completion still fires and latches."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_session_changed(self, session: PaymentSession) -> None:
        if session.succeeded:
            self.consume_success()
