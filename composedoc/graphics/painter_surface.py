"""
QPainter Render Surface for ComposeDoc

Paints element draw requests onto any QPaintDevice through a QPainter.
"""

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QPixmap
from typing import Dict, Optional
import logging

from ..core.geometry import Point, BoundingBox
from ..core.render import RenderSurface
from .font_metrics import QtTextMeasurer

logger = logging.getLogger(__name__)


def to_qrectf(bounds: BoundingBox) -> QRectF:
    return QRectF(bounds.min_x, bounds.min_y, bounds.width, bounds.height)


class QPainterSurface(RenderSurface):
    """
    RenderSurface drawing with an active QPainter.

    Images are loaded from their source path on first use and cached;
    sources that cannot be loaded are drawn as a labelled placeholder.
    """

    def __init__(self, painter: QPainter, font_family: str = "Arial",
                 pixmap_cache: Optional[Dict[str, QPixmap]] = None):
        """
        Create a surface.

        Args:
            painter: Painter already begun on the target device
            font_family: Family used for text and chart titles
            pixmap_cache: Shared cache of loaded images, keyed by source
        """
        self.painter = painter
        self._fonts = QtTextMeasurer(font_family)
        self._pixmaps = pixmap_cache if pixmap_cache is not None else {}
        self._pen = QPen(QColor(0, 0, 0), 1)

    def _pixmap(self, source: str) -> QPixmap:
        if source not in self._pixmaps:
            pixmap = QPixmap(source)
            if pixmap.isNull():
                logger.warning(f"Could not load image from {source}")
            self._pixmaps[source] = pixmap
        return self._pixmaps[source]

    def draw_text(self, position: Point, text: str, size: float) -> None:
        self.painter.setPen(self._pen)
        self.painter.setFont(self._fonts.font_for(size))
        self.painter.drawText(QPointF(position.x, position.y), text)

    def draw_image(self, bounds: BoundingBox, source: str) -> None:
        rect = to_qrectf(bounds)
        pixmap = self._pixmap(source)
        if not pixmap.isNull():
            self.painter.drawPixmap(rect, pixmap, QRectF(pixmap.rect()))
            return
        # Placeholder frame for missing images
        self.painter.setPen(QPen(QColor(150, 150, 150), 1, Qt.PenStyle.DashLine))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawRect(rect)
        self.painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, source)

    def draw_chart(self, bounds: BoundingBox, title: str) -> None:
        rect = to_qrectf(bounds)
        self.painter.setPen(self._pen)
        self.painter.setBrush(QBrush(QColor(245, 245, 245)))
        self.painter.drawRect(rect)
        self.painter.setFont(self._fonts.font_for(12))
        self.painter.drawText(
            rect.adjusted(4, 4, -4, -4),
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            title
        )
