"""
ComposeDoc Editor Session

Holds what the user is working on: the current selection and the last
pointer location. The selection is a weak reference into the tree, not
ownership; once the selected element leaves the tree the session falls
back to having nothing selected.
"""

from enum import Enum
from typing import Callable, List, Optional, Union
import logging
import weakref

from ..config import EditorSettings
from .elements import Element, TextElement
from .errors import OwnershipError
from .geometry import Point
from .group import Group

logger = logging.getLogger(__name__)

SelectionListener = Callable[[Optional[Element]], None]


class SelectionState(Enum):
    NO_SELECTION = "no_selection"
    SELECTED = "selected"


class EditorSession:
    """
    Mediates between pointer/toolbar events and a document tree.

    Features:
    - Point-to-element resolution on click
    - Editing the text of a selected text element
    - Adding text at the last clicked location
    - Removing the selected element
    """

    def __init__(self, root: Group, settings: Optional[EditorSettings] = None):
        """
        Initialize an editing session.

        Args:
            root: Top-level group of the edited document
            settings: Editor settings, defaults if omitted
        """
        self.root = root
        self.settings = settings or EditorSettings()
        self.last_pointer: Optional[Point] = None
        self._selected: Optional[weakref.ref] = None
        self._listeners: List[SelectionListener] = []

    def add_listener(self, listener: SelectionListener) -> None:
        """Call `listener` with the new selection (or None) whenever it changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SelectionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _is_attached(self, element: Element) -> bool:
        return element.is_descendant_of(self.root)

    def _set_selected(self, element: Optional[Element]) -> None:
        previous = self._selected() if self._selected is not None else None
        self._selected = weakref.ref(element) if element is not None else None
        if previous is element:
            return
        logger.debug(f"Selection changed to {element!r}")
        for listener in list(self._listeners):
            listener(element)

    @property
    def selected(self) -> Optional[Element]:
        """The selected element, or None. Detached elements are dropped here."""
        if self._selected is None:
            return None
        element = self._selected()
        if element is None or not self._is_attached(element):
            self._set_selected(None)
            return None
        return element

    @property
    def state(self) -> SelectionState:
        if self.selected is None:
            return SelectionState.NO_SELECTION
        return SelectionState.SELECTED

    def click(self, point: Union[Point, tuple]) -> Optional[Element]:
        """
        Resolve a pointer press into a selection.

        Args:
            point: Pointer location in document coordinates

        Returns:
            The newly selected element, or None if nothing was hit
        """
        point = Point.coerce(point)
        self.last_pointer = point
        if self.settings.deep_selection:
            found = self.root.find_deepest_element_at(point)
        else:
            found = self.root.find_element_at(point)
        logger.debug(f"Clicked at ({point.x}, {point.y}), selected={found!r}")
        self._set_selected(found)
        return found

    def select(self, element: Element) -> None:
        """
        Select an element explicitly.

        Raises:
            OwnershipError: if the element is not part of this session's tree
        """
        if not self._is_attached(element):
            raise OwnershipError(f"{element!r} is not part of the edited document")
        self._set_selected(element)

    def clear_selection(self) -> None:
        self._set_selected(None)

    def selected_text(self) -> Optional[str]:
        """Text of the selection if it is editable, otherwise None."""
        element = self.selected
        editable = element.as_editable_text() if element is not None else None
        return editable.text if editable is not None else None

    def apply_text(self, text: str) -> bool:
        """
        Replace the text of the selected element.

        Returns:
            True if the text was applied, False if the selection is not editable text
        """
        element = self.selected
        editable = element.as_editable_text() if element is not None else None
        if editable is None:
            return False
        editable.set_text(text)
        return True

    def remove(self, element: Element) -> None:
        """Remove an element from its group, clearing the selection if it was inside."""
        owner = element.owner
        if owner is None or not self._is_attached(element):
            return
        owner.remove(element)
        current = self._selected() if self._selected is not None else None
        if current is not None and (current is element or current.is_descendant_of(element)):
            self._set_selected(None)

    def remove_selected(self) -> Optional[Element]:
        """
        Remove the selected element from the document.

        Returns:
            The removed element, or None if nothing was selected
        """
        element = self.selected
        if element is None:
            return None
        self.remove(element)
        return element

    def add_text(self, text: str) -> Optional[TextElement]:
        """
        Add a text element at the last pointer location and select it.

        Args:
            text: Content; surrounding whitespace is stripped

        Returns:
            The new element, or None if the text was empty
        """
        text = text.strip()
        if not text:
            return None
        at = self.last_pointer or Point.coerce(self.settings.default_insert_point)
        element = TextElement(at.x, at.y, text, self.settings.default_text_size)
        self.root.add(element)
        self._set_selected(element)
        logger.info(f"Added text '{text}' at ({at.x}, {at.y})")
        return element
