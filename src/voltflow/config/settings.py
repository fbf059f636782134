"""Configuration and settings persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from voltflow.config.paths import get_paths
from voltflow.models.payment import PAYMENT_DELAY_MS
from voltflow.models.screen import Screen

logger = logging.getLogger(__name__)

LIGHT_THEME = "voltflow-light"
DARK_THEME = "voltflow-dark"


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


def detect_terminal_theme() -> str:
    """Detect terminal light/dark preference."""
    # Check COLORFGBG env var (format: "fg;bg" where bg < 7 means dark)
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        try:
            parts = colorfgbg.split(";")
            if len(parts) >= 2:
                bg = int(parts[-1])
                # Background color index: 0-6 typically dark, 7+ typically light
                return LIGHT_THEME if bg >= 7 else DARK_THEME
        except (ValueError, IndexError):
            pass

    # Most modern terminals default to dark
    return DARK_THEME


class Settings:
    """Persistent settings for Voltflow."""

    _defaults: dict[str, Any] = {
        # theme intentionally not in defaults - we detect it
        "initial_screen": Screen.HOME.route,
        "payment_delay_ms": PAYMENT_DELAY_MS,
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Failed to load settings from %s: %s", path, e)
                data = {}
            if not isinstance(data, dict):
                logger.warning("Ignoring settings in %s: not a JSON object", path)
                data = {}
            self._data = data
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    @property
    def theme(self) -> str:
        """Get the current theme, detecting from terminal if not set."""
        saved = self._data.get("theme")
        if saved:
            return str(saved)
        return detect_terminal_theme()

    @theme.setter
    def theme(self, value: str) -> None:
        self.set("theme", value)

    @property
    def initial_screen(self) -> Screen:
        """Screen shown when the app starts; unknown routes mean Home."""
        raw = self._data.get("initial_screen")
        if not raw:
            return Screen.HOME
        try:
            return Screen.from_route(str(raw))
        except ValueError:
            logger.warning("Ignoring invalid initial_screen setting: %r", raw)
            return Screen.HOME

    @initial_screen.setter
    def initial_screen(self, value: Screen) -> None:
        self.set("initial_screen", value.route)

    @property
    def payment_delay_ms(self) -> int:
        """Simulated payment latency. Non-positive or junk values fall back."""
        raw = self._data.get("payment_delay_ms")
        if raw in (None, ""):
            return PAYMENT_DELAY_MS
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return PAYMENT_DELAY_MS
        if value <= 0:
            return PAYMENT_DELAY_MS
        return value

    @payment_delay_ms.setter
    def payment_delay_ms(self, value: int | None) -> None:
        """Set the simulated latency; None or non-positive restores default."""
        if value is None or value <= 0:
            self._data.pop("payment_delay_ms", None)
            self._save()
        else:
            self.set("payment_delay_ms", int(value))


# Global settings instance
settings = Settings()
