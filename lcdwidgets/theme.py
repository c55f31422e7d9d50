"""The look of the standard widgets, and the theme in use."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Optional

from .geometry import Rect

__all__ = [
    "FIELD_PADDING_TOP",
    "IconState",
    "Theme",
    "install_theme",
    "current_theme",
]

FIELD_PADDING_TOP = 2


class IconState(IntEnum):
    """How an icon is shown."""

    DEFAULT = 0
    PRESSED = 1


class Theme(ABC):
    """Draws the parts of widgets whose look depends on the theme."""

    field_padding_top = FIELD_PADDING_TOP
    check_box_label_x = 22

    @abstractmethod
    def draw_progress_bar(
        self, dc: Any, x: int, y: int, w: int, h: int, value: int, total: int
    ) -> None:
        """Draw a bar filled to ``value`` out of ``total``."""

    @abstractmethod
    def draw_check_box(
        self, dc: Any, checked: bool, x: int, y: int, focus: bool = False
    ) -> None:
        """Draw a check box at (x, y)."""

    @abstractmethod
    def draw_slider(
        self, dc: Any, vmin: int, vmax: int, value: int, rect: Rect, edit: bool, focus: bool
    ) -> None:
        """Draw a slider over ``rect`` showing ``value`` between the bounds."""

    def draw_labelled_check_box(
        self, dc: Any, checked: bool, label: Optional[str] = None, focus: bool = False
    ) -> None:
        """Draw a check box field with its label to the right."""
        self.draw_check_box(dc, checked, 0, self.field_padding_top, focus)
        if label:
            dc.draw_text(self.check_box_label_x, self.field_padding_top, label)


_active_theme: Optional[Theme] = None


def install_theme(theme: Optional[Theme]) -> Optional[Theme]:
    """Make ``theme`` the one in use; returns the one it replaces."""
    global _active_theme
    previous, _active_theme = _active_theme, theme
    return previous


def current_theme() -> Theme:
    """The theme in use."""
    if _active_theme is None:
        raise LookupError("no theme installed")
    return _active_theme