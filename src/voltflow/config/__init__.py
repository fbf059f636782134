"""Configuration management for Voltflow."""
from __future__ import annotations

from voltflow.config.paths import VoltflowPaths, get_paths, reset_paths
from voltflow.config.settings import (
    DARK_THEME,
    LIGHT_THEME,
    Settings,
    get_settings_path,
    settings,
)

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "Settings",
    "VoltflowPaths",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
