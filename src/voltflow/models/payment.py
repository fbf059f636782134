"""Simulated payment session.

The session walks IDLE -> PROCESSING -> SUCCEEDED. Completion is a one-shot
callback scheduled on the same loop that owns the session, so no locking is
needed. There is no failure outcome and no cancellation; once started, the
completion always fires.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)

# Fixed simulated round-trip latency
PAYMENT_DELAY_MS = 1500

Scheduler = Callable[[float, Callable[[], None]], object]
SessionObserver = Callable[["PaymentSession"], None]


class PaymentStatus(Enum):
    """Phase of a payment session, derived from its flags."""

    IDLE = "idle"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"


def call_later_on_running_loop(delay: float, callback: Callable[[], None]) -> object:
    """Default scheduler: run callback after delay seconds on the running loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class PaymentSession:
    """Processing/success flags for a single simulated payment at a time.

    Args:
        scheduler: Schedules a zero-arg callback after a delay in seconds.
            Defaults to the running asyncio loop's call_later.
        delay_ms: Simulated latency in milliseconds.
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        delay_ms: int = PAYMENT_DELAY_MS,
    ) -> None:
        self._scheduler: Scheduler = scheduler or call_later_on_running_loop
        self.delay_ms = delay_ms
        self._is_processing = False
        self._succeeded = False
        self._observers: list[SessionObserver] = []

    @property
    def is_processing(self) -> bool:
        return self._is_processing

    @property
    def succeeded(self) -> bool:
        return self._succeeded

    @property
    def status(self) -> PaymentStatus:
        if self._is_processing:
            return PaymentStatus.PROCESSING
        if self._succeeded:
            return PaymentStatus.SUCCEEDED
        return PaymentStatus.IDLE

    def start_payment(self) -> None:
        """Begin a simulated payment.

        A second call while processing is ignored: the pending completion
        is neither reset nor extended.
        """
        if self._is_processing:
            logger.debug("Payment already processing, ignoring start")
            return
        self._is_processing = True
        self._succeeded = False
        logger.info("Payment started (completes in %d ms)", self.delay_ms)
        self._notify()
        self._scheduler(self.delay_ms / 1000, self._complete)

    def clear_success(self) -> None:
        """Consume the success flag. Does not touch is_processing."""
        if not self._succeeded:
            return
        self._succeeded = False
        logger.info("Payment success cleared")
        self._notify()

    def subscribe(self, observer: SessionObserver) -> Callable[[], None]:
        """Register an observer; returns a callable that removes it."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _complete(self) -> None:
        self._is_processing = False
        self._succeeded = True
        logger.info("Payment succeeded")
        self._notify()

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
