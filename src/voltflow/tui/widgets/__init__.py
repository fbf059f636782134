"""TUI widgets for Voltflow."""

from .cards import (
    ActivityItem,
    NotificationItem,
    PaymentMethodItem,
    SpendingChart,
    StatCard,
)
from .nav_bar import NavBar
from .screen_header import ScreenHeader
from .status_indicator import PaymentStatusIndicator

__all__ = [
    "ActivityItem",
    "NavBar",
    "NotificationItem",
    "PaymentMethodItem",
    "PaymentStatusIndicator",
    "ScreenHeader",
    "SpendingChart",
    "StatCard",
]
