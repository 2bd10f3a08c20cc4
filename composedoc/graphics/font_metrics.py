"""
Qt Font Metrics for ComposeDoc

Measures text with the same font engine the canvas paints with, so
hit-testing of text elements matches what is on screen.
"""

from functools import lru_cache

from PyQt6.QtGui import QFont, QFontMetricsF

from ..core.measure import TextMeasurer, TextMetrics

# Distinct point sizes whose metrics are kept per measurer
METRICS_CACHE_SIZE = 64


class QtTextMeasurer(TextMeasurer):
    """
    TextMeasurer backed by QFontMetricsF.

    A QGuiApplication must exist before measuring. Metrics are cached per
    point size, least recently used sizes are dropped first.
    """

    def __init__(self, font_family: str = "Arial", cache_size: int = METRICS_CACHE_SIZE):
        self.font_family = font_family
        self._metrics = lru_cache(maxsize=cache_size)(self._create_metrics)

    def font_for(self, size: float) -> QFont:
        """Font of this measurer's family at the given point size."""
        font = QFont(self.font_family)
        font.setPointSizeF(size)
        return font

    def _create_metrics(self, size: float) -> QFontMetricsF:
        return QFontMetricsF(self.font_for(size))

    def cache_info(self):
        """Hit/miss statistics and current size of the metrics cache."""
        return self._metrics.cache_info()

    def measure(self, text: str, size: float) -> TextMetrics:
        fm = self._metrics(size)
        return TextMetrics(
            width=fm.horizontalAdvance(text),
            height=fm.height(),
            ascent=fm.ascent()
        )
