"""Utility helpers for the People Gallery application."""

from .paths import IMAGE_EXTENSIONS, default_data_directory
from .text import slugify_filename

__all__ = ["IMAGE_EXTENSIONS", "default_data_directory", "slugify_filename"]
