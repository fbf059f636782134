"""TUI screens for Voltflow, one per Screen value."""
from __future__ import annotations

from voltflow.models import Screen

from .analytics import AnalyticsScreen
from .auto_pay import AutoPayScreen
from .base import VoltflowScreen
from .edit_profile import EditProfileScreen
from .history import HistoryScreen
from .home import HomeScreen
from .notifications import NotificationsScreen
from .pay import PayScreen
from .payment_methods import PaymentMethodsScreen
from .payment_success import PaymentSuccessScreen
from .profile import ProfileScreen
from .usage_detail import UsageDetailScreen

# Screens that take no constructor arguments. PayScreen needs a PaymentFlow.
STATIC_SCREENS: dict[Screen, type[VoltflowScreen]] = {
    Screen.HOME: HomeScreen,
    Screen.HISTORY: HistoryScreen,
    Screen.PROFILE: ProfileScreen,
    Screen.NOTIFICATIONS: NotificationsScreen,
    Screen.ANALYTICS: AnalyticsScreen,
    Screen.AUTO_PAY: AutoPayScreen,
    Screen.PAYMENT_METHODS: PaymentMethodsScreen,
    Screen.EDIT_PROFILE: EditProfileScreen,
    Screen.USAGE_DETAIL: UsageDetailScreen,
    Screen.PAYMENT_SUCCESS: PaymentSuccessScreen,
}

__all__ = [
    "AnalyticsScreen",
    "AutoPayScreen",
    "EditProfileScreen",
    "HistoryScreen",
    "HomeScreen",
    "NotificationsScreen",
    "PayScreen",
    "PaymentMethodsScreen",
    "PaymentSuccessScreen",
    "ProfileScreen",
    "STATIC_SCREENS",
    "UsageDetailScreen",
    "VoltflowScreen",
]
