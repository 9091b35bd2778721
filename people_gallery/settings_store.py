"""Persistence helpers for user configuration."""

from __future__ import annotations

from pathlib import Path

from .config import GalleryConfig
from .utils.paths import default_config_directory


class SettingsStore:
    """Load and save application settings to a well-known path."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> GalleryConfig:
        if not self._path.exists():
            return GalleryConfig()
        return GalleryConfig.load(self._path)

    def save(self, config: GalleryConfig) -> None:
        config.save(self._path)


def default_settings_path() -> Path:
    return default_config_directory() / "settings.yaml"
