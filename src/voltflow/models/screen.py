"""Screen identities for the Voltflow app.

Each screen is a closed, immutable value used as the navigation target and as
the selector for which view to render.
"""

from dataclasses import dataclass
from enum import Enum


class Screen(Enum):
    """All screens the app can show, keyed by route."""

    # Top-level tabs
    HOME = "home"
    PAY = "pay"
    HISTORY = "history"
    PROFILE = "profile"

    # Sub-screens
    NOTIFICATIONS = "notifications"
    ANALYTICS = "analytics"
    AUTO_PAY = "autopay"
    PAYMENT_METHODS = "payment_methods"
    EDIT_PROFILE = "edit_profile"
    USAGE_DETAIL = "usage_detail"
    PAYMENT_SUCCESS = "payment_success"

    @property
    def route(self) -> str:
        """Stable route string for this screen."""
        return self.value

    @property
    def is_top_level(self) -> bool:
        """Whether this screen is one of the nav bar tabs."""
        return self in TOP_LEVEL_SCREENS

    @property
    def back_target(self) -> "Screen | None":
        """Target of the on-screen back button, or None for tabs."""
        return BACK_TARGETS.get(self)

    @classmethod
    def from_route(cls, route: str) -> "Screen":
        """Look up a screen by route.

        Raises:
            ValueError: If no screen has the given route.
        """
        normalized = route.strip().lower()
        for screen in cls:
            if screen.value == normalized:
                return screen
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown screen route '{route}' (expected one of: {valid})")


TOP_LEVEL_SCREENS: frozenset[Screen] = frozenset(
    {Screen.HOME, Screen.PAY, Screen.HISTORY, Screen.PROFILE}
)


# Where each sub-screen's back (or Done) button leads
BACK_TARGETS: dict[Screen, Screen] = {
    Screen.NOTIFICATIONS: Screen.HOME,
    Screen.ANALYTICS: Screen.HOME,
    Screen.AUTO_PAY: Screen.HOME,
    Screen.PAYMENT_METHODS: Screen.PROFILE,
    Screen.EDIT_PROFILE: Screen.PROFILE,
    Screen.USAGE_DETAIL: Screen.HOME,
    Screen.PAYMENT_SUCCESS: Screen.HOME,
}


@dataclass(frozen=True)
class TabDestination:
    """A nav bar entry."""

    screen: Screen
    label: str
    glyph: str
    key: str


TAB_SCREENS: tuple[TabDestination, ...] = (
    TabDestination(Screen.HOME, "Home", "⌂", "1"),
    TabDestination(Screen.PAY, "Pay", "$", "2"),
    TabDestination(Screen.HISTORY, "History", "↺", "3"),
    TabDestination(Screen.PROFILE, "Profile", "☺", "4"),
)
