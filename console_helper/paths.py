"""Configuration path helpers for console_helper."""

import os
from pathlib import Path

CONFIG_ENV_VAR = "CONSOLE_HELPER_CONFIG"


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/console-helper"""
    return Path.home() / ".config" / "console-helper"


def get_config_path() -> Path:
    """Return path to the user settings file.

    Priority:
    1. CONSOLE_HELPER_CONFIG environment variable (if set)
    2. ~/.config/console-helper/config.yaml (default XDG location)

    Returns:
        Path to config file (which may not exist)
    """
    if CONFIG_ENV_VAR in os.environ:
        return Path(os.environ[CONFIG_ENV_VAR])

    return get_config_dir() / "config.yaml"
