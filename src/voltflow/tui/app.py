"""Main Voltflow TUI application."""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from textual.app import App
from textual.binding import Binding
from textual.command import DiscoveryHit, Hit, Hits, Provider
from textual.timer import Timer

from voltflow.config import DARK_THEME, LIGHT_THEME, settings
from voltflow.models import TAB_SCREENS, Navigator, PaymentSession, Screen
from voltflow.orchestration import PaymentFlow
from voltflow.tui.messages import NavigateTo
from voltflow.tui.screens import STATIC_SCREENS, PayScreen, VoltflowScreen
from voltflow.tui.theme import THEMES

logger = logging.getLogger(__name__)


def screen_label(screen: Screen) -> str:
    """Human label for a screen, e.g. "Payment Methods"."""
    return screen.name.replace("_", " ").title()


class VoltflowCommands(Provider):
    """Command palette entries for jumping to any screen."""

    @property
    def _app(self) -> "VoltflowApp":
        return self.app  # type: ignore[return-value]

    async def discover(self) -> Hits:
        """Return default commands shown before user input."""
        for screen in Screen:
            yield DiscoveryHit(
                f"Go to {screen_label(screen)}",
                partial(self._app.navigator.navigate, screen),
                help=f"Show the {screen.route} screen",
            )

    async def search(self, query: str) -> Hits:
        """Search screen commands."""
        matcher = self.matcher(query)
        for screen in Screen:
            command = f"Go to {screen_label(screen)}"
            match = matcher.match(command)
            if match > 0:
                yield Hit(
                    match,
                    matcher.highlight(command),
                    partial(self._app.navigator.navigate, screen),
                    help=f"Show the {screen.route} screen",
                )


class VoltflowApp(App[None]):
    """Main Voltflow TUI application.

    Owns the Navigator and the PaymentSession. Every navigation swaps in a
    freshly built screen for the new current value.
    """

    TITLE = "Voltflow"
    SUB_TITLE = "Utility bill payments"

    COMMANDS = App.COMMANDS | {VoltflowCommands}

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+d", "toggle_dark", "Toggle Dark Mode"),
        Binding("escape", "back", "Back"),
        *(
            Binding(tab.key, f"tab('{tab.screen.route}')", tab.label, show=False)
            for tab in TAB_SCREENS
        ),
    ]

    CSS = """
    Screen {
        background: $background;
    }
    """

    def __init__(
        self,
        initial_screen: Screen | None = None,
        payment_delay_ms: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.navigator = Navigator(initial_screen or settings.initial_screen)
        self.payment_session = PaymentSession(
            scheduler=self._schedule,
            delay_ms=payment_delay_ms or settings.payment_delay_ms,
        )
        self._unsubscribe_navigator: Callable[[], None] | None = None
        # Track theme before toggling so we can restore it
        self._previous_theme: str | None = None

    def _schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        """Run callback once on the app's event loop after delay seconds."""
        return self.set_timer(delay, callback, name="payment-completion")

    def build_screen(self, target: Screen) -> VoltflowScreen:
        """Create a fresh view for the given screen."""
        if target == Screen.PAY:
            return PayScreen(flow=PaymentFlow(self.navigator, self.payment_session))
        return STATIC_SCREENS[target]()

    def on_mount(self) -> None:
        """Register themes and show the navigator's current screen."""
        for theme in THEMES:
            self.register_theme(theme)

        saved_theme = settings.theme
        if saved_theme not in self.available_themes:
            logger.warning("Unknown saved theme %s, using %s", saved_theme, DARK_THEME)
            saved_theme = DARK_THEME
        logger.info("Loading saved theme: %s", saved_theme)
        self.theme = saved_theme

        self._unsubscribe_navigator = self.navigator.subscribe(self._show_screen)
        logger.info("Starting on screen: %s", self.navigator.current_screen.route)
        self.push_screen(self.build_screen(self.navigator.current_screen))

    def on_unmount(self) -> None:
        if self._unsubscribe_navigator is not None:
            self._unsubscribe_navigator()
            self._unsubscribe_navigator = None

    def _show_screen(self, target: Screen) -> None:
        """Navigator observer: replace the visible screen."""
        self.switch_screen(self.build_screen(target))

    def on_navigate_to(self, message: NavigateTo) -> None:
        """Handle navigation requests bubbling up from screens and widgets."""
        self.navigator.navigate(message.target)

    def action_back(self) -> None:
        """Platform back: sub-screens return Home; tabs ignore it."""
        if not self.navigator.handle_back():
            logger.debug("Back ignored on %s", self.navigator.current_screen.route)

    def action_tab(self, route: str) -> None:
        """Jump to a top-level tab."""
        self.navigator.navigate(Screen.from_route(route))

    def watch_theme(self, new_theme: str) -> None:
        """Save theme whenever it changes (from any source)."""
        logger.info("Theme changed to: %s, saving...", new_theme)
        settings.theme = new_theme

    def action_toggle_dark(self) -> None:
        """Toggle dark mode (saving handled by watch_theme).

        If toggling back, restores the previous theme instead of defaulting
        to the Voltflow light/dark pair.
        """
        if self._previous_theme is not None:
            restored = self._previous_theme
            self._previous_theme = None
            self.theme = restored
        else:
            self._previous_theme = self.theme
            self.theme = LIGHT_THEME if self.theme == DARK_THEME else DARK_THEME
