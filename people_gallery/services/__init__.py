"""Service layer for the People Gallery application."""

from .gallery import Gallery
from .record_store import (
    DeserializeFailure,
    LoadResult,
    PersonStore,
    SaveResult,
    SerializeFailure,
    StoreFailure,
)

__all__ = [
    "DeserializeFailure",
    "Gallery",
    "LoadResult",
    "PersonStore",
    "SaveResult",
    "SerializeFailure",
    "StoreFailure",
]
