"""Bottom navigation bar for the top-level tabs."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button

from voltflow.models import TAB_SCREENS, Screen
from voltflow.tui.messages import NavigateTo


class NavBar(Horizontal):
    """One button per tab; the current tab is highlighted."""

    DEFAULT_CSS = """
    NavBar {
        dock: bottom;
        height: 3;
        background: $surface;
        align: center middle;
    }

    NavBar Button {
        width: 1fr;
        min-width: 8;
        border: none;
        background: $surface;
        color: $text-muted;
    }

    NavBar Button.-selected {
        color: $primary;
        text-style: bold;
    }
    """

    def __init__(self, current: Screen, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.current = current

    def compose(self) -> ComposeResult:
        for tab in TAB_SCREENS:
            button = Button(f"{tab.glyph} {tab.label}", id=f"tab-{tab.screen.route}")
            if tab.screen == self.current:
                button.add_class("-selected")
            yield button

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("tab-"):
            return
        event.stop()
        self.post_message(NavigateTo(Screen.from_route(button_id.removeprefix("tab-"))))
