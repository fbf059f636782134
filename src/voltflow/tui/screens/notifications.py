"""Notifications sub-screen."""

from textual.app import ComposeResult

from voltflow.models import Screen
from voltflow.models.fixtures import NOTIFICATIONS
from voltflow.tui.screens.base import VoltflowScreen
from voltflow.tui.widgets import NotificationItem


class NotificationsScreen(VoltflowScreen):
    screen_id = Screen.NOTIFICATIONS
    heading = "Notifications"
    subheading = "Stay updated on your account"

    def compose_body(self) -> ComposeResult:
        for notification in NOTIFICATIONS:
            yield NotificationItem(notification)
