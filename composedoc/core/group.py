"""
ComposeDoc Group

A group owns an ordered list of elements and satisfies the element
contract by delegating to them. Insertion order is both render order
and hit-test precedence: the first child containing a point wins.
"""

from typing import Iterator, List, Optional, Tuple
from uuid import UUID
import logging

from .elements import Element, validate_resize_factor
from .errors import InvalidResizeFactorError, OwnershipError, CompositionCycleError
from .geometry import Point, BoundingBox, union_all
from .render import RenderSurface

logger = logging.getLogger(__name__)


class Group(Element):
    """
    Composite element holding children exclusively.

    A child belongs to exactly one group at a time; `add` refuses elements
    that already have an owner and refuses to create cycles.
    """

    def __init__(self, children: Optional[List[Element]] = None, name: str = ""):
        super().__init__(name)
        self._children: List[Element] = []
        for child in children or []:
            self.add(child)

    @property
    def children(self) -> Tuple[Element, ...]:
        """Snapshot of the children in insertion order."""
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._children))

    def __contains__(self, element: object) -> bool:
        return any(child is element for child in self._children)

    def index_of(self, element: Element) -> int:
        """Position of a direct child, or -1 if it is not one."""
        for idx, child in enumerate(self._children):
            if child is element:
                return idx
        return -1

    def add(self, element: Element) -> None:
        """
        Append an element to this group and take ownership of it.

        Raises:
            CompositionCycleError: if element is this group or one of its ancestors
            OwnershipError: if element already belongs to a group
        """
        if element is self or self.is_descendant_of(element):
            raise CompositionCycleError(f"Adding {element!r} to {self!r} would create a cycle")
        if element.owner is not None:
            raise OwnershipError(f"{element!r} is already owned by {element.owner!r}")
        self._children.append(element)
        element._owner = self
        logger.debug(f"Added {element!r} to {self!r}")

    def remove(self, element: Element) -> None:
        """Remove a direct child. Does nothing if the element is not a child."""
        idx = self.index_of(element)
        if idx < 0:
            logger.debug(f"{element!r} is not in {self!r}, nothing removed")
            return
        del self._children[idx]
        element._owner = None
        logger.debug(f"Removed {element!r} from {self!r}")

    def move(self, dx: int, dy: int) -> None:
        for child in self._children:
            child.move(dx, dy)
        logger.debug(f"Moved {self!r} by ({dx}, {dy})")

    def can_resize(self, factor: float) -> bool:
        return super().can_resize(factor) and all(
            child.can_resize(factor) for child in self._children
        )

    def resize(self, factor: float) -> None:
        """
        Resize every child, or none of them.

        Raises:
            InvalidResizeFactorError: if the factor is invalid or any leaf
                would overflow; no child is changed in that case
        """
        factor = validate_resize_factor(factor)
        if not self.can_resize(factor):
            raise InvalidResizeFactorError(factor)
        for child in self._children:
            child.resize(factor)
        logger.debug(f"Resized {self!r} by factor {factor}")

    def draw(self, surface: RenderSurface) -> None:
        for child in self._children:
            child.draw(surface)
        logger.debug(f"Drew {self!r} with {len(self._children)} elements")

    def contains(self, point: Point) -> bool:
        for child in self._children:
            if child.contains(point):
                return True
        return False

    def bounds(self) -> Optional[BoundingBox]:
        """Union of the children's bounds, or None for an empty group."""
        return union_all(child.bounds() for child in self._children)

    def find_element_at(self, point: Point) -> Optional[Element]:
        """
        Find the first direct child containing a point.

        A nested group is returned as the match itself; use
        find_deepest_element_at to reach the leaf inside it.

        Args:
            point: Point in document coordinates

        Returns:
            The matching child, or None if no child contains the point
        """
        for child in self._children:
            if child.contains(point):
                return child
        logger.debug(f"No element found at ({point.x}, {point.y}) in {self!r}")
        return None

    def find_deepest_element_at(self, point: Point) -> Optional[Element]:
        """Like find_element_at, but descends into matching nested groups down to a leaf."""
        found = self.find_element_at(point)
        while isinstance(found, Group):
            inner = found.find_element_at(point)
            if inner is None:
                break
            found = inner
        return found

    def walk(self) -> Iterator[Element]:
        """Yield every descendant depth-first, in render order."""
        for child in list(self._children):
            yield child
            if isinstance(child, Group):
                yield from child.walk()

    def get_element_by_id(self, element_id: UUID) -> Optional[Element]:
        """Find a descendant by its ID."""
        for element in self.walk():
            if element.id == element_id:
                return element
        return None
