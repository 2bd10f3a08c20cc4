"""
ComposeDoc Rendering Surfaces

Elements never paint pixels themselves. `draw()` hands position, content
and size to a RenderSurface, which owns the actual output device.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from .geometry import Point, BoundingBox


class RenderSurface(ABC):
    """Destination for element draw requests."""

    @abstractmethod
    def draw_text(self, position: Point, text: str, size: float) -> None:
        """Draw `text` with its baseline starting at `position`."""
        pass

    @abstractmethod
    def draw_image(self, bounds: BoundingBox, source: str) -> None:
        """Draw the image referenced by `source` scaled into `bounds`."""
        pass

    @abstractmethod
    def draw_chart(self, bounds: BoundingBox, title: str) -> None:
        """Draw a chart frame with `title` into `bounds`."""
        pass


# Draw command types
@dataclass
class DrawCommand:
    pass


@dataclass
class TextCommand(DrawCommand):
    position: Point
    text: str
    size: float


@dataclass
class ImageCommand(DrawCommand):
    bounds: BoundingBox
    source: str


@dataclass
class ChartCommand(DrawCommand):
    bounds: BoundingBox
    title: str


class RecordingSurface(RenderSurface):
    """
    Surface that keeps the visual representation as a list of commands.

    Useful for tests and for anything that wants to inspect what a
    document would draw without a screen.
    """

    def __init__(self):
        self.commands: List[DrawCommand] = []

    def draw_text(self, position: Point, text: str, size: float) -> None:
        self.commands.append(TextCommand(Point(position.x, position.y), text, size))

    def draw_image(self, bounds: BoundingBox, source: str) -> None:
        self.commands.append(ImageCommand(bounds, source))

    def draw_chart(self, bounds: BoundingBox, title: str) -> None:
        self.commands.append(ChartCommand(bounds, title))
