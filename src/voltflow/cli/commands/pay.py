"""Headless simulated payment."""

from __future__ import annotations

import argparse
import asyncio
import logging

from voltflow.config import settings
from voltflow.models import PaymentSession, PaymentStatus
from voltflow.models.fixtures import BILL, TRANSACTION_TOKEN
from voltflow.tui.utils import format_amount

logger = logging.getLogger(__name__)


async def _run_payment(delay_ms: int) -> list[PaymentStatus]:
    """Start one payment and wait for it to succeed."""
    session = PaymentSession(delay_ms=delay_ms)
    done = asyncio.Event()
    transitions: list[PaymentStatus] = []

    def _on_change(changed: PaymentSession) -> None:
        transitions.append(changed.status)
        print(f"  status: {changed.status.value}")
        if changed.succeeded:
            done.set()

    unsubscribe = session.subscribe(_on_change)
    try:
        session.start_payment()
        await done.wait()
    finally:
        unsubscribe()
    return transitions


def cmd_pay(args: argparse.Namespace) -> int:
    """Run the payment session on an asyncio loop and print transitions."""
    delay_ms = args.delay_ms or settings.payment_delay_ms
    print(f"Paying {format_amount(BILL.balance)} to {BILL.biller} ({delay_ms} ms)")
    transitions = asyncio.run(_run_payment(delay_ms))
    logger.info("Headless payment transitions: %s", transitions)
    print(f"Payment successful. Transaction token: {TRANSACTION_TOKEN}")
    return 0
