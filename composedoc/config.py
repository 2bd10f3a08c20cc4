"""
ComposeDoc Configuration

Editor-wide defaults shared by the session, the GUI and logging setup.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass
class EditorSettings:
    """Settings for an editing session and its window."""
    # New text elements
    default_text_size: float = 18.0
    default_insert_point: Tuple[int, int] = (50, 150)  # Used until the first click
    font_family: str = "Arial"

    # Hit-testing: False selects the top-level child, True the innermost leaf
    deep_selection: bool = False

    # Window
    canvas_width: int = 1000
    canvas_height: int = 1000
    window_title: str = "Editable Document Editor"

    # Logging: a level name ("DEBUG", "INFO", ...) or a logging constant
    log_level: Union[str, int] = "INFO"
    log_file: Optional[str] = None  # Also write the log here when set
