"""
ComposeDoc Text Measurement

Text elements compute their hit-test bounds from the measured size of
their content. Measurement is an external service: the GUI installs a
Qt-backed measurer, while headless code falls back to an approximation
based on average glyph proportions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class TextMetrics:
    """Measured extent of a run of text."""
    width: float
    height: float
    ascent: float  # Distance from the baseline to the top of the line


class TextMeasurer(ABC):
    """Measures rendered text for a given size."""

    @abstractmethod
    def measure(self, text: str, size: float) -> TextMetrics:
        """Return width, line height and ascent of `text` drawn at `size`."""
        pass


class ApproximateTextMeasurer(TextMeasurer):
    """
    Deterministic measurer that needs no font engine.

    Every character advances by `advance_ratio * size`; the line is
    `ascent_ratio * size` above the baseline and `descent_ratio * size`
    below it.
    """

    def __init__(self, advance_ratio: float = 0.6,
                 ascent_ratio: float = 0.8, descent_ratio: float = 0.2):
        self.advance_ratio = advance_ratio
        self.ascent_ratio = ascent_ratio
        self.descent_ratio = descent_ratio

    def measure(self, text: str, size: float) -> TextMetrics:
        ascent = self.ascent_ratio * size
        return TextMetrics(
            width=len(text) * self.advance_ratio * size,
            height=ascent + self.descent_ratio * size,
            ascent=ascent
        )


# Global measurer instance
_text_measurer: Optional[TextMeasurer] = None


def get_text_measurer() -> TextMeasurer:
    """
    Get the measurer used by text elements without their own override.

    Returns:
        The installed TextMeasurer, or an ApproximateTextMeasurer if none was set
    """
    global _text_measurer
    if _text_measurer is None:
        _text_measurer = ApproximateTextMeasurer()
    return _text_measurer


def set_text_measurer(measurer: Optional[TextMeasurer]) -> None:
    """
    Install the environment-wide text measurer.

    Args:
        measurer: New measurer, or None to go back to the approximate default
    """
    global _text_measurer
    _text_measurer = measurer
    logger.debug(f"Text measurer set to {type(measurer).__name__ if measurer else 'default'}")
