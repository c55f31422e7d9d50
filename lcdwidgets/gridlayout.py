"""Row-by-row placement of windows on a page or form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .geometry import Rect
from .window import Window

__all__ = ["LayoutMetrics", "GridLayout", "FormGridLayout"]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class LayoutMetrics:
    """Line sizes and margins used when laying out pages."""

    line_height: int = 20
    line_spacing: int = 2
    indent_width: int = 10
    label_width: int = 240
    padding: int = 6


class GridLayout:
    """Hands out slots line after line across a fixed width."""

    def __init__(
        self, width: Union[int, Window], metrics: Optional[LayoutMetrics] = None
    ) -> None:
        self.width = width.width if isinstance(width, Window) else int(width)
        self.metrics = metrics if metrics is not None else LayoutMetrics()
        self.current_y = 0

    def slot(self, count: int = 1, index: int = 0) -> Rect:
        """Slot ``index`` of ``count`` equal slots on the current line."""
        if count < 1:
            raise ValueError(f"slot count must be at least 1: {count}")
        spacing = self.metrics.line_spacing
        width = _cdiv(self.width - (count - 1) * spacing, count)
        left = (width + spacing) * index
        return Rect(left, self.current_y, width, self.metrics.line_height)

    def spacer(self, height: Optional[int] = None) -> None:
        """Move down by ``height``, by default the line spacing."""
        self.current_y += self.metrics.line_spacing if height is None else height

    def next_line(self, height: Optional[int] = None) -> None:
        """Move to the next line after one of ``height``, by default a standard line."""
        if height is None:
            height = self.metrics.line_height
        self.spacer(height + self.metrics.line_spacing)

    def add_window(self, window: Window) -> None:
        """Fit ``window`` to its children and move below it."""
        window.adjust_height()
        self.current_y += window.rect.h + self.metrics.line_spacing

    def window_height(self) -> int:
        """Height used so far."""
        return self.current_y


class FormGridLayout(GridLayout):
    """A grid with a label column on the left and fields to its right."""

    def __init__(
        self, width: Optional[int] = None, metrics: Optional[LayoutMetrics] = None
    ) -> None:
        super().__init__(Window.display.width if width is None else width, metrics)
        self.label_width = self.metrics.label_width
        self.margin_left = self.metrics.padding
        self.margin_right = self.metrics.padding

    def line_slot(self) -> Rect:
        """The whole current line inside the margins."""
        return Rect(
            self.margin_left,
            self.current_y,
            self.width - self.margin_right - self.margin_left,
            self.metrics.line_height,
        )

    def centered_slot(self, width: int = 0) -> Rect:
        """A slot of ``width`` centred on the line; 0 means the full width."""
        if width == 0:
            width = self.width
        return Rect(
            self.margin_left + _cdiv(self.width - width, 2),
            self.current_y,
            min(width, self.width - self.margin_right - self.margin_left),
            self.metrics.line_height,
        )

    def label_slot(self, indent: bool = False) -> Rect:
        """The label column of the current line, optionally indented."""
        left = self.margin_left + self.metrics.indent_width if indent else self.margin_left
        return Rect(left, self.current_y, self.label_width - left, self.metrics.line_height)

    def field_slot(self, count: int = 1, index: int = 0) -> Rect:
        """Slot ``index`` of ``count`` equal slots right of the label column."""
        if count < 1:
            raise ValueError(f"slot count must be at least 1: {count}")
        spacing = self.metrics.line_spacing
        width = _cdiv(
            self.width - self.label_width - self.margin_right - (count - 1) * spacing, count
        )
        left = self.label_width + (width + spacing) * index
        return Rect(left, self.current_y, width, self.metrics.line_height)