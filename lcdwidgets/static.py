"""Non-editable widgets: text, bitmaps and live values."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from .flags import TextFlag, font_flag
from .geometry import Rect
from .theme import FIELD_PADDING_TOP
from .window import Window

__all__ = ["StaticText", "Subtitle", "StaticBitmap", "DynamicText", "DynamicNumber"]

LINE_GAP = 2


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class StaticText(Window):
    """A fixed text, split into lines at newlines."""

    def __init__(
        self,
        parent: Optional[Window],
        rect: Rect,
        text: str = "",
        window_flags: int = 0,
        text_flags: int = 0,
    ) -> None:
        super().__init__(parent, rect, window_flags, text_flags)
        self.text = text
        self.background_color = 0

    def paint(self, dc: Any) -> None:
        if self.background_color:
            dc.draw_solid_filled_rect(0, 0, self.rect.w, self.rect.h, self.background_color)

        flags = self.text_flags
        if flags & TextFlag.CENTERED:
            x = _cdiv(self.rect.w, 2)
        elif flags & TextFlag.RIGHT:
            x = self.rect.w
        else:
            x = 0

        font_height = dc.font_height(flags)
        y = _cdiv(self.rect.h - font_height, 2) if flags & TextFlag.VCENTERED else FIELD_PADDING_TOP
        for line in self.text.split("\n"):
            dc.draw_text(x, y, line, flags)
            y += font_height + LINE_GAP

    def set_text(self, value: str) -> None:
        if self.text != value:
            self.text = value
            self.invalidate()

    def set_background_color(self, color: int) -> None:
        self.background_color = color


class Subtitle(StaticText):
    """A text drawn in the bold font."""

    bold_font_index = 1

    def __init__(self, parent: Optional[Window], rect: Rect, text: str) -> None:
        super().__init__(parent, rect, text, 0, font_flag(self.bold_font_index))


class StaticBitmap(Window):
    """A bitmap drawn centred, scaled to fit, or as a coloured mask."""

    def __init__(
        self,
        parent: Optional[Window],
        rect: Rect,
        bitmap: Any = None,
        color: Optional[int] = None,
        scale: bool = False,
    ) -> None:
        super().__init__(parent, rect)
        self.bitmap = bitmap
        self.color = color
        self.scale = scale

    def set_bitmap(self, bitmap: Any) -> None:
        self.bitmap = bitmap
        self.invalidate()

    def set_mask_color(self, value: Optional[int]) -> None:
        """Draw the bitmap as a mask in ``value``; None draws it as an image."""
        self.color = value

    def paint(self, dc: Any) -> None:
        if self.bitmap is None:
            return
        if self.color is not None:
            dc.draw_mask(0, 0, self.bitmap, self.color)
        elif self.scale:
            dc.draw_scaled_bitmap(self.bitmap, 0, 0, self.width, self.height)
        else:
            dc.draw_bitmap(
                _cdiv(self.width - self.bitmap.width, 2),
                _cdiv(self.height - self.bitmap.height, 2),
                self.bitmap,
            )


class DynamicText(StaticText):
    """A text fetched from a handler each time events are checked."""

    def __init__(
        self,
        parent: Optional[Window],
        rect: Rect,
        text_handler: Callable[[], str],
        text_flags: int = 0,
    ) -> None:
        super().__init__(parent, rect, "", 0, text_flags)
        self.text_handler = text_handler

    def check_events(self) -> None:
        super().check_events()
        new_text = self.text_handler()
        if new_text != self.text:
            self.text = new_text
            self.invalidate()


class DynamicNumber(Window):
    """A number fetched from a handler, drawn with an optional prefix and suffix."""

    def __init__(
        self,
        parent: Optional[Window],
        rect: Rect,
        number_handler: Callable[[], Union[int, float]],
        text_flags: int = 0,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
    ) -> None:
        super().__init__(parent, rect, 0, text_flags)
        self.value: Union[int, float] = 0
        self.number_handler = number_handler
        self.prefix = prefix
        self.suffix = suffix

    def paint(self, dc: Any) -> None:
        dc.draw_number(
            0, FIELD_PADDING_TOP, self.value, self.text_flags, 0, self.prefix, self.suffix
        )

    def check_events(self) -> None:
        new_value = self.number_handler()
        if self.value != new_value:
            self.value = new_value
            self.invalidate()