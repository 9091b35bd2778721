"""I/O helpers for persisting people and their images."""

from .image_library import ImageImportError, ImageLibrary
from .key_value import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "ImageImportError",
    "ImageLibrary",
    "KeyValueStore",
    "MemoryKeyValueStore",
]
