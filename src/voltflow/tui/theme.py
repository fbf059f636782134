"""Voltflow color themes."""

from textual.theme import Theme

from voltflow.config import DARK_THEME, LIGHT_THEME

VOLTFLOW_LIGHT = Theme(
    name=LIGHT_THEME,
    primary="#007AFF",
    secondary="#5AC8FA",
    accent="#FF9500",
    foreground="#0C0C0C",
    background="#F2F2F7",
    surface="#FFFFFF",
    panel="#E5E5EA",
    success="#34C759",
    warning="#FF9500",
    error="#FF3B30",
    dark=False,
)

VOLTFLOW_DARK = Theme(
    name=DARK_THEME,
    primary="#007AFF",
    secondary="#5AC8FA",
    accent="#FF9500",
    foreground="#FFFFFF",
    background="#0C0C0C",
    surface="#1A1A1A",
    panel="#2C2C2E",
    success="#34C759",
    warning="#FF9500",
    error="#FF3B30",
    dark=True,
)

THEMES: tuple[Theme, ...] = (VOLTFLOW_LIGHT, VOLTFLOW_DARK)
