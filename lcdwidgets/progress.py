"""A progress bar widget."""

from __future__ import annotations

from typing import Any, Optional

from .geometry import Rect
from .theme import current_theme
from .window import Window

__all__ = ["Progress"]

PROGRESS_TOTAL = 100


class Progress(Window):
    """Shows a percentage as a bar drawn by the current theme."""

    def __init__(self, parent: Optional[Window], rect: Rect) -> None:
        super().__init__(parent, rect)
        self.value = 0

    def set_value(self, value: int) -> None:
        if value != self.value:
            self.value = value
            self.invalidate()

    def paint(self, dc: Any) -> None:
        current_theme().draw_progress_bar(
            dc, 0, 0, self.width, self.height, self.value, PROGRESS_TOTAL
        )