"""Load and flush the people collection through a key-value slot."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..io.key_value import KeyValueStore
from ..models.person import PEOPLE_ADAPTER, Person

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "people"


class StoreFailure(RuntimeError):
    """Base class for recoverable persistence failures."""


class DeserializeFailure(StoreFailure):
    """The slot held bytes that do not decode to a people list."""


class SerializeFailure(StoreFailure):
    """The people list could not be encoded or written to the slot."""


@dataclass(slots=True)
class LoadResult:
    """Outcome of reading the slot; ``people`` is empty on failure."""

    people: list[Person] = field(default_factory=list)
    error: DeserializeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class SaveResult:
    """Outcome of flushing the collection to the slot."""

    error: SerializeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PersonStore:
    """Serialize the whole people collection under a single fixed key.

    Failures never propagate: they are logged and handed back inside
    :class:`LoadResult` / :class:`SaveResult` so callers may surface or ignore
    them.
    """

    def __init__(self, slots: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.slots = slots
        self.key = key

    def load(self) -> list[Person]:
        """Return the saved collection, or an empty one if missing or unreadable."""
        return self.load_result().people

    def load_result(self) -> LoadResult:
        try:
            raw = self.slots.get(self.key)
        except (OSError, ValueError) as exc:
            return self._load_failed(f"Could not read slot '{self.key}': {exc}", exc)

        if raw is None:
            return LoadResult()

        try:
            people = PEOPLE_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            return self._load_failed(f"Failed to load people from slot '{self.key}'.", exc)
        logger.debug("Loaded %d people from slot '%s'", len(people), self.key)
        return LoadResult(people=people)

    def save(self, people: Sequence[Person]) -> SaveResult:
        """Overwrite the slot with ``people``; the old blob survives any failure."""
        try:
            validated = PEOPLE_ADAPTER.validate_python(list(people))
            payload = PEOPLE_ADAPTER.dump_json(validated, by_alias=True)
        except (ValidationError, PydanticSerializationError) as exc:
            return self._save_failed("Failed to save people.", exc)

        try:
            self.slots.set(self.key, payload)
        except (OSError, ValueError) as exc:
            return self._save_failed(f"Failed to save people to slot '{self.key}': {exc}", exc)

        logger.debug("Saved %d people to slot '%s'", len(validated), self.key)
        return SaveResult()

    @staticmethod
    def _load_failed(message: str, cause: Exception) -> LoadResult:
        logger.warning("%s", message)
        failure = DeserializeFailure(message)
        failure.__cause__ = cause
        return LoadResult(error=failure)

    @staticmethod
    def _save_failed(message: str, cause: Exception) -> SaveResult:
        logger.warning("%s", message)
        failure = SerializeFailure(message)
        failure.__cause__ = cause
        return SaveResult(error=failure)
