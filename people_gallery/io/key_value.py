"""Key-value slots used to persist serialized blobs."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from ..utils.text import slugify_filename

logger = logging.getLogger(__name__)


def validate_slot_key(key: str) -> str:
    """Return ``key`` if it is already a filename slug, else raise ``ValueError``.

    Only slug keys are accepted so that distinct keys never share a file.
    """
    if slugify_filename(key, default="") != key:
        raise ValueError(
            f"Slot key {key!r} must use lowercase letters, digits and single dashes."
        )
    return key


class KeyValueStore(Protocol):
    """Interface for a persistent mapping of string keys to byte blobs."""

    def get(self, key: str) -> bytes | None:
        """Return the stored blob or ``None`` when the key was never written."""

    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous blob."""


class MemoryKeyValueStore:
    """Dictionary-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)


class FileKeyValueStore:
    """Keep each key in its own file below ``directory``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a failed write never leaves a truncated blob behind.
    """

    suffix = ".json"

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, key: str) -> Path:
        return self.directory / f"{validate_slot_key(key)}{self.suffix}"

    def get(self, key: str) -> bytes | None:
        path = self.path_for(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}-", dir=self.directory)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)
