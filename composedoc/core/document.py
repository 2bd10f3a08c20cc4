"""
ComposeDoc Document Model

The Document class is the root container for all design data.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID, uuid4

from .elements import Element
from .geometry import BoundingBox
from .group import Group


@dataclass
class Document:
    """
    The root document containing all design data.

    A Document owns a single root Group; every element of the page
    is a descendant of it.
    """
    id: UUID = field(default_factory=uuid4)
    name: str = "Untitled"
    width: int = 1000
    height: int = 1000
    root: Group = field(default_factory=lambda: Group(name="page"))

    def add_element(self, element: Element) -> None:
        """Add a top-level element to the page."""
        self.root.add(element)

    def remove_element(self, element: Element) -> None:
        """Remove an element from wherever it sits in the tree."""
        if element.owner is not None and element.is_descendant_of(self.root):
            element.owner.remove(element)

    def get_all_elements(self) -> List[Element]:
        """Flatten all leaf elements, depth-first in render order."""
        return [e for e in self.root.walk() if not isinstance(e, Group)]

    def get_element_by_id(self, element_id: UUID) -> Optional[Element]:
        """Find any element in the tree by its ID."""
        return self.root.get_element_by_id(element_id)

    def get_design_bounds(self) -> Optional[BoundingBox]:
        """
        Calculate the bounding box of everything on the page.

        Returns:
            BoundingBox of all elements, or None if the page is empty
        """
        return self.root.bounds()
