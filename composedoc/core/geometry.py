"""
ComposeDoc Geometry Primitives

Points and axis-aligned bounding boxes used by every element.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass
class Point:
    """A 2D point in document coordinates."""
    x: int
    y: int

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def coerce(cls, value: Union['Point', Tuple[int, int]]) -> 'Point':
        """Accept either a Point or an (x, y) tuple."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


@dataclass
class BoundingBox:
    """
    Axis-aligned bounding box.

    Containment is half-open: the left and top edges are inside,
    the right and bottom edges are outside.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_rect(cls, x: float, y: float,
                  width: float, height: float) -> 'BoundingBox':
        """Build a box from origin and size."""
        return cls(min_x=x, min_y=y, max_x=x + width, max_y=y + height)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box."""
        if self.is_empty:
            return False
        return (self.min_x <= point.x < self.max_x and
                self.min_y <= point.y < self.max_y)

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(
            min_x=min(self.min_x, other.min_x),
            min_y=min(self.min_y, other.min_y),
            max_x=max(self.max_x, other.max_x),
            max_y=max(self.max_y, other.max_y)
        )


def union_all(boxes: Iterable[Optional[BoundingBox]]) -> Optional[BoundingBox]:
    """Union of all given boxes, skipping None. Returns None if nothing is left."""
    result = None
    for box in boxes:
        if box is None:
            continue
        result = box if result is None else result.union(box)
    return result
