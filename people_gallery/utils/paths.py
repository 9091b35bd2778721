"""Path helpers used across the application."""

from __future__ import annotations

import os
from pathlib import Path

APP_DIRECTORY_NAME = "people_gallery"

IMAGE_EXTENSIONS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".webp",
    ".bmp",
    ".tiff",
    ".tif",
    ".gif",
}


def default_config_directory() -> Path:
    if os.name == "nt":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base.expanduser() / APP_DIRECTORY_NAME


def default_data_directory() -> Path:
    """Per-user directory for imported images and the saved people list.

    This plays the role of an app's private documents folder: images are
    copied here on import so the gallery keeps working if the originals move.
    """
    if os.name == "nt":
        base = Path(os.getenv("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    else:
        base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base.expanduser() / APP_DIRECTORY_NAME
