"""Edit profile sub-screen."""

from textual.app import ComposeResult
from textual.widgets import Button, Input, Label, Static

from voltflow.models import Screen
from voltflow.models.fixtures import ACCOUNT
from voltflow.tui.screens.base import VoltflowScreen


class EditProfileScreen(VoltflowScreen):
    """Profile form. Nothing is persisted; saving just goes back."""

    DEFAULT_CSS = """
    EditProfileScreen .avatar {
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
    }

    EditProfileScreen Input {
        margin: 0 0 1 0;
    }

    EditProfileScreen #btn-save-profile {
        width: 100%;
    }
    """

    screen_id = Screen.EDIT_PROFILE
    heading = "Edit Profile"
    subheading = "Update your information"
    button_targets = {"btn-save-profile": Screen.PROFILE}

    def compose_body(self) -> ComposeResult:
        yield Static(f"( {ACCOUNT.initial} )", classes="avatar")
        yield Label("First Name")
        yield Input(value=ACCOUNT.first_name, id="first-name-input")
        yield Label("Last Name")
        yield Input(value=ACCOUNT.last_name, id="last-name-input")
        yield Label("Email Address")
        yield Input(value=ACCOUNT.email, id="email-input")
        yield Button("Save Changes", id="btn-save-profile", variant="primary")
