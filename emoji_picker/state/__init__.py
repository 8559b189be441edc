"""
State management module for the emoji picker.
Provides the selection state container and its reducer.
"""

from .selection_state import (
    SelectionState,
    SelectionEvent,
    SetSearch,
    SetGroup,
    SetSkinTone,
    copy_to_clipboard,
    reduce,
)

__all__ = [
    'SelectionState',
    'SelectionEvent',
    'SetSearch',
    'SetGroup',
    'SetSkinTone',
    'copy_to_clipboard',
    'reduce',
]
