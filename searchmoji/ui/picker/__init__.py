"""
Picker - live emoji search with click-to-copy.

Provides:
- PickerScreen: Search bar, record grid and copy toast
- PickerPresenter: Query, load, copy and notification wiring
"""

from .picker_presenter import PickerPresenter, PickerStateVM
from .picker_screen import PickerScreen, RecordTile

__all__ = [
    "PickerPresenter",
    "PickerScreen",
    "PickerStateVM",
    "RecordTile",
]
