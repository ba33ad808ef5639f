"""XDG path helpers for exported settings and persisted editor state."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "moksu"
APP_AUTHOR = "moksu"


def dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=False)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_root() -> Path:
    return ensure_dir(Path(dirs().user_config_path))


def state_root() -> Path:
    return ensure_dir(Path(dirs().user_state_path))


def settings_path() -> Path:
    """Default target for an exported settings document."""
    return config_root() / "settings.json"


def state_path() -> Path:
    override = os.getenv("MOKSU_STATE_FILE")
    if override:
        return Path(override).expanduser().resolve()
    return state_root() / "editor-state.json"
