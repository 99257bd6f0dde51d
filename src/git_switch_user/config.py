"""Locations of git-switch-user's own files."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "git-switch-user"
STORE_FILENAME = "profiles.json"
STORE_ENV_VAR = "GIT_SWITCH_USER_STORE"


def config_dir() -> Path:
    """Per-user config directory, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def default_store_path() -> Path:
    return config_dir() / STORE_FILENAME
