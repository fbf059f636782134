"""Data models for Voltflow."""

from .navigator import Navigator
from .payment import PAYMENT_DELAY_MS, PaymentSession, PaymentStatus
from .screen import BACK_TARGETS, TAB_SCREENS, TOP_LEVEL_SCREENS, Screen

__all__ = [
    "BACK_TARGETS",
    "Navigator",
    "PAYMENT_DELAY_MS",
    "PaymentSession",
    "PaymentStatus",
    "Screen",
    "TAB_SCREENS",
    "TOP_LEVEL_SCREENS",
]
