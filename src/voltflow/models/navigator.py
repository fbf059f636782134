"""Navigator holding the currently visible screen."""

import logging
from collections.abc import Callable

from voltflow.models.screen import Screen

logger = logging.getLogger(__name__)

ScreenObserver = Callable[[Screen], None]


class Navigator:
    """Single owner of "which screen is current".

    There is no back stack. Every screen can move to every other screen
    through navigate(); the platform back action always lands on Home
    when leaving a sub-screen.
    """

    def __init__(self, initial: Screen = Screen.HOME) -> None:
        self._current = initial
        self._observers: list[ScreenObserver] = []

    @property
    def current_screen(self) -> Screen:
        """The screen that should be rendered."""
        return self._current

    def navigate(self, target: Screen) -> None:
        """Make target the current screen.

        Navigating to the current screen is allowed and leaves state as is;
        observers only hear about actual changes.
        """
        if target == self._current:
            return
        previous = self._current
        self._current = target
        logger.info("Navigate %s -> %s", previous.route, target.route)
        for observer in list(self._observers):
            observer(target)

    def handle_back(self) -> bool:
        """Apply the platform back policy.

        Returns:
            True if the back action was consumed (sub-screen -> Home),
            False on a top-level tab, where the host keeps its default.
        """
        if self._current.is_top_level:
            return False
        self.navigate(Screen.HOME)
        return True

    def subscribe(self, observer: ScreenObserver) -> Callable[[], None]:
        """Register an observer; returns a callable that removes it."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe
