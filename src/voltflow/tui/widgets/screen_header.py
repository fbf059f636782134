"""Title block shared by all screens, with an optional back button."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from voltflow.models import Screen
from voltflow.tui.messages import NavigateTo


class ScreenHeader(Horizontal):
    """Title, subtitle and (for sub-screens) a back button."""

    DEFAULT_CSS = """
    ScreenHeader {
        height: auto;
        padding: 0 0 1 0;
    }

    ScreenHeader #btn-back {
        min-width: 5;
        width: 5;
        margin-right: 2;
        border: none;
    }

    ScreenHeader .screen-title {
        text-style: bold;
    }

    ScreenHeader .screen-subtitle {
        color: $text-muted;
    }

    ScreenHeader > Vertical {
        height: auto;
    }
    """

    def __init__(
        self,
        title: str,
        subtitle: str | None = None,
        back_target: Screen | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)
        self.heading = title
        self.subheading = subtitle
        self.back_target = back_target

    def compose(self) -> ComposeResult:
        if self.back_target is not None:
            yield Button("‹", id="btn-back")
        with Vertical():
            yield Static(self.heading, classes="screen-title")
            if self.subheading:
                yield Static(self.subheading, classes="screen-subtitle")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-back" and self.back_target is not None:
            event.stop()
            self.post_message(NavigateTo(self.back_target))
