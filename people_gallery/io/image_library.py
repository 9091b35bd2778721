"""Copy imported pictures into the application's private image directory."""

from __future__ import annotations

import io
import logging
import uuid
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

ImageSource = Union[Path, str, bytes, Image.Image]


class ImageImportError(RuntimeError):
    """Raised when an import source cannot be decoded as an image."""


class ImageLibrary:
    """Owns the directory of imported JPEG copies.

    Every import is written exactly once under a freshly generated name; the
    returned name is what records store as their image reference.
    """

    extension = ".jpg"

    def __init__(self, directory: Path, *, quality: int = 80) -> None:
        self.directory = directory
        self.quality = quality

    def path_for(self, reference: str) -> Path:
        return self.directory / reference

    def exists(self, reference: str) -> bool:
        return self.path_for(reference).is_file()

    def import_image(self, source: ImageSource) -> str:
        """Write ``source`` as a JPEG copy and return its new filename.

        A failed disk write is logged but the reference is still returned, so
        the caller can keep the record and show a placeholder thumbnail.
        """
        payload = self._encode_jpeg(source)
        reference = self._new_reference()
        target = self.path_for(reference)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as exc:
            logger.warning("Failed to write imported image to %s: %s", target, exc)
        else:
            logger.info("Imported image as %s (%d bytes)", reference, len(payload))
        return reference

    def _new_reference(self) -> str:
        while True:
            reference = f"{uuid.uuid4().hex.upper()}{self.extension}"
            if not self.exists(reference):
                return reference

    def _encode_jpeg(self, source: ImageSource) -> bytes:
        if isinstance(source, Image.Image):
            return self._compress(source)

        if isinstance(source, (bytes, bytearray)):
            opener = io.BytesIO(bytes(source))
            label = "<bytes>"
        else:
            opener = Path(source)
            label = str(source)

        try:
            with Image.open(opener) as image:
                return self._compress(image)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            raise ImageImportError(f"Cannot import {label}: {exc}") from exc

    def _compress(self, image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        converted = ImageOps.exif_transpose(image).convert("RGB")
        converted.save(buffer, format="JPEG", quality=self.quality, optimize=True)
        return buffer.getvalue()
