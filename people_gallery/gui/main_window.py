"""Main Qt window showing the people grid."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QAction, QIcon, QPixmap
from PySide6.QtWidgets import (
    QFileDialog,
    QInputDialog,
    QLineEdit,
    QListView,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QToolBar,
)

from ..config import GalleryConfig
from ..io.image_library import ImageImportError
from ..models.person import Person
from ..services.gallery import Gallery
from ..settings_store import SettingsStore
from ..utils.paths import IMAGE_EXTENSIONS

_IMAGE_FILTER = "Images (" + " ".join(f"*{ext}" for ext in sorted(IMAGE_EXTENSIONS)) + ")"


class MainWindow(QMainWindow):
    """Primary application window."""

    def __init__(
        self,
        config: GalleryConfig | None = None,
        gallery: Gallery | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("People Gallery")
        self.resize(720, 560)

        self.config = config or SettingsStore().load()
        self.gallery = gallery or Gallery.from_config(self.config)

        self._build_ui()
        self.gallery.load()
        self._render_people()

    def _build_ui(self) -> None:
        toolbar = QToolBar("Gallery")
        toolbar.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, toolbar)

        self.add_action = QAction("Add Person…", self)
        self.add_action.setToolTip("Import a picture as a new person.")
        self.add_action.triggered.connect(self._add_person)
        toolbar.addAction(self.add_action)

        size = self.config.thumbnail_size
        self.grid = QListWidget()
        self.grid.setViewMode(QListView.ViewMode.IconMode)
        self.grid.setResizeMode(QListView.ResizeMode.Adjust)
        self.grid.setMovement(QListView.Movement.Static)
        self.grid.setIconSize(QSize(size, size))
        self.grid.setGridSize(QSize(size + 20, size + 40))
        self.grid.setSpacing(10)
        self.grid.setWordWrap(True)
        self.grid.itemActivated.connect(self._rename_person)
        self.setCentralWidget(self.grid)

        self.setStatusBar(QStatusBar())

    # --- Rendering ------------------------------------------------------

    def _render_people(self) -> None:
        self.grid.clear()
        for index, person in enumerate(self.gallery.people):
            item = QListWidgetItem(self._icon_for(person), person.display_name)
            item.setData(Qt.ItemDataRole.UserRole, index)
            item.setToolTip(person.image_reference)
            self.grid.addItem(item)
        self.statusBar().showMessage(f"{len(self.gallery)} people")

    def _icon_for(self, person: Person) -> QIcon:
        pixmap = QPixmap(str(self.gallery.image_path(person)))
        if pixmap.isNull():
            return QIcon()
        size = self.config.thumbnail_size
        scaled = pixmap.scaled(
            size,
            size,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        return QIcon(scaled)

    def _report_save(self) -> None:
        result = self.gallery.last_save
        if result is not None and result.error is not None:
            self.statusBar().showMessage(str(result.error), 5000)

    # --- Event handlers -------------------------------------------------

    def _add_person(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Choose a picture",
            "",
            _IMAGE_FILTER,
        )
        if not path:
            return
        try:
            self.gallery.add_image(Path(path))
        except ImageImportError as exc:
            QMessageBox.warning(self, "Import failed", str(exc))
            return
        self._render_people()
        self._report_save()

    def _rename_person(self, item: QListWidgetItem) -> None:
        index = item.data(Qt.ItemDataRole.UserRole)
        person = self.gallery[index]
        text, accepted = QInputDialog.getText(
            self,
            "Rename person",
            "Name:",
            QLineEdit.EchoMode.Normal,
            person.display_name,
        )
        self.gallery.rename(index, text if accepted else None)
        if accepted:
            self._render_people()
            self._report_save()
