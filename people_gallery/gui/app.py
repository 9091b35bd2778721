"""Application bootstrap for the Qt-based GUI."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from ..config import GalleryConfig
from .main_window import MainWindow


def run_app(config: GalleryConfig | None = None) -> None:
    """Launch the GUI application."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(config)
    window.show()
    app.exec()
