"""Qt user interface for the People Gallery application."""

from .app import run_app

__all__ = ["run_app"]
