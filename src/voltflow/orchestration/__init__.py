"""Orchestration layer for Voltflow.

Holds the logic that ties the navigator and payment session together,
kept out of the TUI so it can be driven headlessly.

Usage:
    from voltflow.orchestration import PaymentFlow

    flow = PaymentFlow(navigator, session)
    flow.attach()
    flow.submit()
"""

from voltflow.orchestration.payment_flow import PaymentFlow

__all__ = ["PaymentFlow"]
