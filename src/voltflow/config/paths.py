"""Centralized path management for Voltflow.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/voltflow (default: ~/.config/voltflow)
- State: $XDG_STATE_HOME/voltflow (default: ~/.local/state/voltflow)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class VoltflowPaths:
    """Centralized path management following XDG spec."""

    workspace: Path  # Current working directory

    # XDG directories (computed once at init)
    _config_home: Path = field(default_factory=_xdg_config_home)
    _state_home: Path = field(default_factory=_xdg_state_home)

    # === WORKSPACE PATHS ===

    @property
    def workspace_config(self) -> Path:
        """Workspace .voltflow/ directory."""
        return self.workspace / ".voltflow"

    @property
    def debug_log(self) -> Path:
        """Debug log: .voltflow/debug.log"""
        return self.workspace_config / "debug.log"

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/voltflow/"""
        return self._config_home / "voltflow"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/voltflow/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/voltflow/"""
        return self._state_home / "voltflow"

    def ensure_global_dirs(self) -> None:
        """Create global XDG directories."""
        self.global_config_dir.mkdir(parents=True, exist_ok=True)
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: VoltflowPaths | None = None


def get_paths(workspace: Path | None = None) -> VoltflowPaths:
    """Get the paths singleton.

    On first call, optionally set the workspace directory.
    Subsequent calls return the same instance.
    """
    global _paths
    if _paths is None:
        _paths = VoltflowPaths(workspace=workspace or Path.cwd())
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
