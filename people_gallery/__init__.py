"""Top-level package for the People Gallery application."""

from .config import GalleryConfig
from .models.person import Person
from .services.gallery import Gallery
from .services.record_store import PersonStore
from .settings_store import SettingsStore

__all__ = ["Gallery", "GalleryConfig", "Person", "PersonStore", "SettingsStore"]
