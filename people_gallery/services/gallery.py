"""UI-independent gallery workflow: import, rename, persist."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import GalleryConfig
from ..io.image_library import ImageLibrary, ImageSource
from ..io.key_value import FileKeyValueStore
from ..models.person import DEFAULT_NAME, Person
from .record_store import PersonStore, SaveResult

logger = logging.getLogger(__name__)


class Gallery:
    """Holds the in-memory people list and flushes it after every change."""

    def __init__(
        self,
        store: PersonStore,
        library: ImageLibrary,
        *,
        default_name: str = DEFAULT_NAME,
    ) -> None:
        self.store = store
        self.library = library
        self.default_name = default_name
        self._people: list[Person] = []
        self.last_save: SaveResult | None = None

    @classmethod
    def from_config(cls, config: GalleryConfig) -> Gallery:
        """Build a gallery backed by files in the configured data directory."""
        directory = config.resolved_data_directory()
        store = PersonStore(FileKeyValueStore(directory), key=config.storage_key)
        library = ImageLibrary(directory / "images", quality=config.jpeg_quality)
        return cls(store, library, default_name=config.default_name)

    @property
    def people(self) -> tuple[Person, ...]:
        return tuple(self._people)

    def __len__(self) -> int:
        return len(self._people)

    def __getitem__(self, index: int) -> Person:
        return self._people[index]

    def load(self) -> list[Person]:
        self._people = self.store.load()
        logger.info("Gallery loaded with %d people", len(self._people))
        return list(self._people)

    def add_image(self, source: ImageSource) -> Person:
        """Import ``source`` and append a placeholder-named person for it."""
        reference = self.library.import_image(source)
        person = Person(display_name=self.default_name, image_reference=reference)
        self._people.append(person)
        self._flush()
        return person

    def rename(self, index: int, new_name: str | None) -> Person:
        """Rename the person at ``index``; ``None`` means the prompt was cancelled."""
        if index < 0:
            raise IndexError(f"No person at index {index}.")
        person = self._people[index]
        if new_name is None:
            return person
        person.display_name = new_name
        self._flush()
        return person

    def image_path(self, person: Person) -> Path:
        return self.library.path_for(person.image_reference)

    def _flush(self) -> SaveResult:
        self.last_save = self.store.save(self._people)
        return self.last_save
