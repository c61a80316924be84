"""Font selection state and editor session."""

from .editor import FontEditor, PreviewStyle
from .machine import SelectionStateMachine
from .state import Selection

__all__ = [
    "FontEditor",
    "PreviewStyle",
    "Selection",
    "SelectionStateMachine",
]
