"""Base screen shared by every Voltflow page."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen as TextualScreen
from textual.widgets import Button, Footer, Header

from voltflow.models import Screen
from voltflow.tui.messages import NavigateTo
from voltflow.tui.widgets import NavBar, ScreenHeader


class VoltflowScreen(TextualScreen):
    """
    Base screen: header, scrollable body, nav bar on tabs, footer.

    Subclasses set:
    - screen_id: which Screen this view renders
    - heading / subheading: title block text
    - button_targets: button id -> Screen for plain navigation buttons
    and override compose_body() to yield their content.
    """

    DEFAULT_CSS = """
    VoltflowScreen {
        background: $background;
    }

    VoltflowScreen .content {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }

    VoltflowScreen .section-title {
        text-style: bold;
        padding: 1 0 0 0;
    }

    VoltflowScreen .muted {
        color: $text-muted;
    }

    VoltflowScreen .card {
        height: auto;
        border: round $panel;
        background: $surface;
        padding: 0 1;
        margin: 0 0 1 0;
    }

    VoltflowScreen .button-row {
        height: auto;
    }

    VoltflowScreen .button-row Button {
        width: 1fr;
        margin: 0 1 0 0;
    }
    """

    screen_id: ClassVar[Screen] = Screen.HOME
    heading: ClassVar[str] = ""
    subheading: ClassVar[str | None] = None
    button_targets: ClassVar[dict[str, Screen]] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(classes="content"):
            yield ScreenHeader(
                self.heading,
                self.subheading,
                back_target=self.screen_id.back_target,
                id="screen-header",
            )
            yield from self.compose_body()
        yield from self.compose_actions()
        if self.screen_id.is_top_level:
            yield NavBar(self.screen_id, id="nav-bar")
        yield Footer()

    def compose_body(self) -> ComposeResult:
        """Yield the page content."""
        raise NotImplementedError("Subclasses must implement compose_body()")

    def compose_actions(self) -> ComposeResult:
        """Yield widgets docked below the scrolling body."""
        yield from ()

    def on_screen_resume(self) -> None:
        """Show the page title in the header."""
        self.app.sub_title = self.heading

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route plain navigation buttons through the navigator."""
        target = self.button_targets.get(event.button.id or "")
        if target is not None:
            event.stop()
            self.post_message(NavigateTo(target))
