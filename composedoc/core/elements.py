"""
ComposeDoc Core Elements

Defines the element contract shared by leaves and groups, and the leaf
element types: TextElement, ImageElement and ChartElement.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, TYPE_CHECKING
from uuid import UUID, uuid4
import logging
import math

from .errors import InvalidResizeFactorError
from .geometry import Point, BoundingBox
from .measure import TextMeasurer, get_text_measurer
from .render import RenderSurface

if TYPE_CHECKING:
    from .group import Group

logger = logging.getLogger(__name__)


def validate_resize_factor(factor: float) -> float:
    """
    Check a resize factor before any geometry is touched.

    Raises:
        InvalidResizeFactorError: if factor is not a finite positive number
    """
    if not isinstance(factor, (int, float)) or isinstance(factor, bool):
        raise InvalidResizeFactorError(factor)
    if math.isnan(factor) or math.isinf(factor) or factor <= 0:
        raise InvalidResizeFactorError(factor)
    return float(factor)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return int(math.floor(value + 0.5))


class EditableText(ABC):
    """Capability of elements whose text content can be edited."""

    @property
    @abstractmethod
    def text(self) -> str:
        pass

    @abstractmethod
    def set_text(self, text: str) -> None:
        pass


class Element(ABC):
    """
    Abstract base class for every node of a document tree.

    Every element must implement:
    - move(): Translate by integer deltas
    - resize(): Scale size-defining geometry by a positive factor
    - draw(): Emit its visual representation to a RenderSurface
    - contains(): Check if a point lies inside its current bounds
    - bounds(): Return its axis-aligned bounding box

    can_resize() reports whether a resize would be accepted, so a group
    can check all of its leaves before changing any of them.
    """

    def __init__(self, name: str = ""):
        self.id: UUID = uuid4()
        self.name: str = name
        self._owner: Optional['Group'] = None

    @property
    def owner(self) -> Optional['Group']:
        """The group holding this element, or None if it is detached."""
        return self._owner

    @property
    def kind(self) -> str:
        return type(self).__name__

    @abstractmethod
    def move(self, dx: int, dy: int) -> None:
        pass

    @abstractmethod
    def resize(self, factor: float) -> None:
        pass

    @abstractmethod
    def draw(self, surface: RenderSurface) -> None:
        pass

    @abstractmethod
    def contains(self, point: Point) -> bool:
        pass

    @abstractmethod
    def bounds(self) -> Optional[BoundingBox]:
        pass

    def can_resize(self, factor: float) -> bool:
        """Whether resize(factor) would succeed without changing anything yet."""
        try:
            validate_resize_factor(factor)
        except InvalidResizeFactorError:
            return False
        return True

    def as_editable_text(self) -> Optional[EditableText]:
        """Return this element as editable text, or None if it has no text to edit."""
        return None

    def is_descendant_of(self, ancestor: 'Element') -> bool:
        node = self.owner
        while node is not None:
            if node is ancestor:
                return True
            node = node.owner
        return False

    def __repr__(self) -> str:
        label = f" '{self.name}'" if self.name else ""
        return f"<{self.kind}{label} id={self.id.hex[:8]}>"


class TextElement(Element, EditableText):
    """
    A positioned, sized piece of text.

    The position is the left end of the baseline. The size is a unit-less
    scale passed to the text measurer and the render surface. Hit-test
    bounds come from the measured extent of the current content.
    """

    def __init__(self, x: int, y: int, text: str, size: float,
                 measurer: Optional[TextMeasurer] = None, name: str = ""):
        """
        Create a text element.

        Args:
            x: X position (left of baseline)
            y: Y position (baseline)
            text: Text content
            size: Font size, strictly positive
            measurer: Optional measurer overriding the environment one
            name: Optional display name
        """
        super().__init__(name)
        if not size > 0:
            raise ValueError(f"Text size must be positive, got {size!r}")
        self.x = x
        self.y = y
        self._text = text
        self.size = float(size)
        self.measurer = measurer

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        logger.debug(f"{self!r} text set to '{text}'")

    def as_editable_text(self) -> Optional[EditableText]:
        return self

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy
        logger.debug(f"Moved {self!r} to ({self.x}, {self.y})")

    def _scaled_size(self, factor: float) -> float:
        size = self.size * validate_resize_factor(factor)
        if not math.isfinite(size) or size <= 0:
            raise InvalidResizeFactorError(factor)
        return size

    def can_resize(self, factor: float) -> bool:
        try:
            self._scaled_size(factor)
        except InvalidResizeFactorError:
            return False
        return True

    def resize(self, factor: float) -> None:
        """
        Scale the text size.

        Raises:
            InvalidResizeFactorError: if the factor is invalid or the new size
                would underflow to zero or overflow to infinity
        """
        self.size = self._scaled_size(factor)
        logger.debug(f"Resized {self!r} by factor {factor} to size {self.size}")

    def draw(self, surface: RenderSurface) -> None:
        surface.draw_text(self.position, self._text, self.size)

    def bounds(self) -> BoundingBox:
        measurer = self.measurer or get_text_measurer()
        metrics = measurer.measure(self._text, self.size)
        return BoundingBox.from_rect(
            self.x, self.y - metrics.ascent, metrics.width, metrics.height
        )

    def contains(self, point: Point) -> bool:
        return self.bounds().contains(point)


class BoxElement(Element):
    """
    A leaf occupying the rectangle (x, y, width, height).

    Width and height stay integral: each resize rounds them to the
    nearest integer, so repeated resizes accumulate rounding.
    """

    def __init__(self, x: int, y: int, width: int, height: int, name: str = ""):
        super().__init__(name)
        if width < 0 or height < 0:
            raise ValueError(f"Width and height must not be negative, got {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy
        logger.debug(f"Moved {self!r} to ({self.x}, {self.y})")

    def _scaled_dimensions(self, factor: float) -> Tuple[int, int]:
        factor = validate_resize_factor(factor)
        width = self.width * factor
        height = self.height * factor
        if not (math.isfinite(width) and math.isfinite(height)):
            raise InvalidResizeFactorError(factor)
        return round_half_up(width), round_half_up(height)

    def can_resize(self, factor: float) -> bool:
        try:
            self._scaled_dimensions(factor)
        except InvalidResizeFactorError:
            return False
        return True

    def resize(self, factor: float) -> None:
        self.width, self.height = self._scaled_dimensions(factor)
        logger.debug(f"Resized {self!r} by factor {factor} to {self.width}x{self.height}")

    def bounds(self) -> BoundingBox:
        return BoundingBox.from_rect(self.x, self.y, self.width, self.height)

    def contains(self, point: Point) -> bool:
        return self.bounds().contains(point)


class ImageElement(BoxElement):
    """An image placed from a source path."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 source: str, name: str = ""):
        super().__init__(x, y, width, height, name)
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def draw(self, surface: RenderSurface) -> None:
        surface.draw_image(self.bounds(), self._source)


class ChartElement(BoxElement):
    """A chart frame with a title."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 title: str, name: str = ""):
        super().__init__(x, y, width, height, name)
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def draw(self, surface: RenderSurface) -> None:
        surface.draw_chart(self.bounds(), self._title)
