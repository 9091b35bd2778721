"""Application-wide configuration models and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .io.key_value import validate_slot_key
from .utils.paths import default_data_directory


class GalleryConfig(BaseModel):
    """Validates and stores runtime settings for the gallery."""

    data_directory: Path | None = Field(
        default=None,
        description="Directory holding imported images and the people slot.",
    )
    storage_key: str = Field(
        default="people",
        description="Key of the slot the people list is persisted under.",
    )
    default_name: str = Field(
        default="Unknown",
        description="Placeholder name given to newly imported people.",
    )
    jpeg_quality: int = Field(
        default=80,
        ge=1,
        le=100,
        description="JPEG quality used when copying imported images.",
    )
    thumbnail_size: int = Field(
        default=140,
        ge=32,
        le=512,
        description="Edge length in pixels of grid thumbnails.",
    )

    @model_validator(mode="after")
    def _normalise_storage_key(self) -> GalleryConfig:
        key = self.storage_key.strip()
        if not key:
            raise ValueError("A storage key must be configured.")
        self.storage_key = validate_slot_key(key)
        return self

    def resolved_data_directory(self) -> Path:
        """Return the configured data directory or the per-user default."""
        if self.data_directory is not None:
            return self.data_directory.expanduser()
        return default_data_directory()

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        payload = self.model_dump(mode="json")
        if self.data_directory is not None:
            payload["data_directory"] = str(self.data_directory)
        return payload

    @classmethod
    def load(cls, path: Path) -> GalleryConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:  # pragma: no cover - pass through details
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML file."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        yaml_text = yaml.safe_dump(
            data,
            allow_unicode=False,
            sort_keys=False,
        )
        path.write_text(yaml_text, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
