"""Platform-specific paths for Feedsmith files."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "feedsmith"


def get_config_dir() -> Path:
    """Get the configuration directory (XDG on Linux)."""
    return Path(user_config_dir(APP_NAME))
