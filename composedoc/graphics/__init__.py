"""
ComposeDoc Graphics Module

Qt-backed implementations of the core's external services:
- QtTextMeasurer: Text measurement with QFontMetricsF
- QPainterSurface: Rendering onto a QPainter
"""

from .font_metrics import QtTextMeasurer
from .painter_surface import QPainterSurface

__all__ = [
    'QtTextMeasurer',
    'QPainterSurface',
]
