"""String helpers for filename sanitisation."""

from __future__ import annotations

import re
import unicodedata

_SEP_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify_filename(
    text: str,
    *,
    max_length: int = 64,
    default: str = "slot",
) -> str | None:
    """Return a lowercase, ASCII-safe slug for use as a filename stem."""
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    replaced = _SEP_PATTERN.sub("-", normalized.lower())
    collapsed = re.sub(r"-{2,}", "-", replaced).strip("-")
    if not collapsed:
        collapsed = default.strip("-")
    if not collapsed:
        return None
    slug = collapsed[:max_length].strip("-")
    return slug or None
