"""
Document Canvas for ComposeDoc

Paints the document tree and turns mouse presses into session clicks.
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QPainter, QPen, QColor, QMouseEvent, QPaintEvent
from typing import Optional

from ..core.document import Document
from ..core.elements import Element
from ..core.geometry import Point
from ..core.session import EditorSession
from ..graphics.painter_surface import QPainterSurface, to_qrectf


class DocumentCanvas(QWidget):
    """
    Widget showing a document.

    Widget coordinates are used directly as document coordinates.
    """

    def __init__(self, document: Document, session: EditorSession,
                 font_family: str = "Arial", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.document = document
        self.session = session
        self.font_family = font_family
        self._pixmap_cache = {}

        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), QColor(255, 255, 255))
        self.setPalette(palette)

        self.session.add_listener(self._on_selection_changed)

    def sizeHint(self) -> QSize:
        return QSize(self.document.width, self.document.height)

    def _on_selection_changed(self, element: Optional[Element]):
        self.update()

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        surface = QPainterSurface(painter, self.font_family, self._pixmap_cache)
        self.document.root.draw(surface)

        selected = self.session.selected
        bounds = selected.bounds() if selected is not None else None
        if bounds is not None:
            # Highlight the selection
            pen = QPen(QColor(0, 120, 215), 1, Qt.PenStyle.DashLine)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(to_qrectf(bounds).adjusted(-2, -2, 2, 2))
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.session.click(Point(int(pos.x()), int(pos.y())))
        self.update()
