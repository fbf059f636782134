"""Profile tab."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from voltflow.models import Screen
from voltflow.models.fixtures import ACCOUNT, PROFILE_SECTIONS
from voltflow.tui.screens.base import VoltflowScreen


def profile_item_id(label: str) -> str:
    return "item-" + label.lower().replace(" ", "-")


class ProfileScreen(VoltflowScreen):
    """Account card, settings sections and log out."""

    DEFAULT_CSS = """
    ProfileScreen .profile-name {
        text-style: bold;
    }

    ProfileScreen .verified {
        color: $success;
    }

    ProfileScreen .section-label {
        color: $text-muted;
        padding: 1 0 0 0;
    }

    ProfileScreen .profile-item {
        width: 100%;
        margin: 0 0 1 0;
    }

    ProfileScreen #btn-log-out {
        width: 100%;
    }
    """

    screen_id = Screen.PROFILE
    heading = "Profile"
    subheading = "Manage your account"
    button_targets = {
        "btn-edit-profile": Screen.EDIT_PROFILE,
        **{
            profile_item_id(item): section.target
            for section in PROFILE_SECTIONS
            if section.target is not None
            for item in section.items
        },
    }

    def compose_body(self) -> ComposeResult:
        with Vertical(classes="card", id="account-card"):
            yield Static(
                f"({ACCOUNT.initial})  {ACCOUNT.full_name}", classes="profile-name"
            )
            yield Static(ACCOUNT.email, classes="muted")
            if ACCOUNT.verified:
                yield Static("Verified", classes="verified")
            yield Button("Edit profile ›", id="btn-edit-profile")

        for section in PROFILE_SECTIONS:
            yield Static(section.title, classes="section-label")
            for item in section.items:
                yield Button(
                    f"{item} ›", id=profile_item_id(item), classes="profile-item"
                )

        yield Button("Log Out", id="btn-log-out", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id in self.button_targets:
            return
        if button_id == "btn-log-out" or button_id.startswith("item-"):
            event.stop()
            self.notify(f"{event.button.label} is not available in this preview")
