"""
Main Application Window for ComposeDoc
"""

from PyQt6.QtWidgets import (
    QMainWindow, QToolBar, QLabel, QLineEdit, QFileDialog, QStatusBar
)
from PyQt6.QtGui import QAction
from typing import Optional
import logging

from ..config import EditorSettings
from ..core.document import Document
from ..core.elements import Element, TextElement
from ..core.errors import CompositionError
from ..core.geometry import Point
from ..core.session import EditorSession
from ..io.image_importer import ImageImporter
from .canvas import DocumentCanvas

logger = logging.getLogger(__name__)


def create_sample_document(settings: EditorSettings) -> Document:
    """Document shown when the editor starts."""
    document = Document(name="Untitled", width=settings.canvas_width,
                        height=settings.canvas_height)
    document.add_element(TextElement(50, 50, "Click to edit", 24))
    document.add_element(TextElement(50, 100, "Composite Pattern Demo", 18))
    return document


class MainWindow(QMainWindow):
    """Editor window: a toolbar for text editing above the document canvas."""

    def __init__(self, settings: Optional[EditorSettings] = None,
                 document: Optional[Document] = None):
        super().__init__()
        self.settings = settings or EditorSettings()
        self.document = document or create_sample_document(self.settings)
        self.session = EditorSession(self.document.root, self.settings)
        self.importer = ImageImporter(max_size=(400, 400))

        self.setWindowTitle(self.settings.window_title)
        self.resize(self.settings.canvas_width, self.settings.canvas_height)

        self.canvas = DocumentCanvas(self.document, self.session, self.settings.font_family)
        self.setCentralWidget(self.canvas)
        self.setStatusBar(QStatusBar())

        self._create_actions()
        self._create_toolbars()
        self.session.add_listener(self._on_selection_changed)

    def _create_actions(self):
        self.action_add_text = QAction("Add Text", self)
        self.action_add_text.triggered.connect(self._add_text)

        self.action_apply_text = QAction("Apply Text", self)
        self.action_apply_text.triggered.connect(self._apply_text)

        self.action_remove = QAction("Remove", self)
        self.action_remove.triggered.connect(self._remove_selected)

        self.action_add_image = QAction("Add Image...", self)
        self.action_add_image.triggered.connect(self._add_image)

    def _create_toolbars(self):
        toolbar = QToolBar("Edit")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.new_text_field = QLineEdit()
        self.new_text_field.setMaximumWidth(180)
        self.edit_field = QLineEdit()
        self.edit_field.setMaximumWidth(180)

        toolbar.addWidget(QLabel("New Text:"))
        toolbar.addWidget(self.new_text_field)
        toolbar.addAction(self.action_add_text)
        toolbar.addSeparator()
        toolbar.addWidget(QLabel("Selected Text:"))
        toolbar.addWidget(self.edit_field)
        toolbar.addAction(self.action_apply_text)
        toolbar.addAction(self.action_remove)
        toolbar.addSeparator()
        toolbar.addAction(self.action_add_image)

    def _on_selection_changed(self, element: Optional[Element]):
        text = self.session.selected_text()
        self.edit_field.setText(text if text is not None else "")
        if element is None:
            self.statusBar().showMessage("Nothing selected")
        else:
            self.statusBar().showMessage(f"Selected {element.kind}")

    def _add_text(self):
        element = self.session.add_text(self.new_text_field.text())
        if element is None:
            return
        self.new_text_field.clear()
        self.canvas.update()

    def _apply_text(self):
        if self.session.apply_text(self.edit_field.text()):
            self.canvas.update()

    def _remove_selected(self):
        if self.session.remove_selected() is not None:
            self.canvas.update()

    def _add_image(self):
        filepath, _ = QFileDialog.getOpenFileName(
            self, "Add Image", "", "Images (*.png *.jpg *.jpeg *.bmp *.gif)"
        )
        if not filepath:
            return
        at = self.session.last_pointer or Point.coerce(self.settings.default_insert_point)
        try:
            element = self.importer.import_image(filepath, at.x, at.y)
            self.document.add_element(element)
            self.session.select(element)
        except (OSError, CompositionError) as e:
            logger.error(f"Failed to add image {filepath}: {e}")
            self.statusBar().showMessage(f"Could not add image: {e}")
            return
        self.canvas.update()
