"""
ComposeDoc Core Module

Contains the core data structures:
- Geometry: Point, BoundingBox
- Elements: Element contract, TextElement, ImageElement, ChartElement
- Group: Composite element with hit-testing
- Document: Root container for all design data
- EditorSession: Selection and pointer state
"""

# Import order matters - geometry and elements first, then group, then the rest
from .geometry import Point, BoundingBox
from .errors import (
    CompositionError, InvalidResizeFactorError,
    OwnershipError, CompositionCycleError
)
from .measure import (
    TextMetrics, TextMeasurer, ApproximateTextMeasurer,
    get_text_measurer, set_text_measurer
)
from .render import RenderSurface, RecordingSurface
from .elements import (
    Element, EditableText, TextElement, BoxElement,
    ImageElement, ChartElement
)
from .group import Group
from .document import Document
from .session import EditorSession, SelectionState

__all__ = [
    'Point', 'BoundingBox',
    'CompositionError', 'InvalidResizeFactorError',
    'OwnershipError', 'CompositionCycleError',
    'TextMetrics', 'TextMeasurer', 'ApproximateTextMeasurer',
    'get_text_measurer', 'set_text_measurer',
    'RenderSurface', 'RecordingSurface',
    'Element', 'EditableText', 'TextElement', 'BoxElement',
    'ImageElement', 'ChartElement',
    'Group',
    'Document',
    'EditorSession', 'SelectionState',
]
