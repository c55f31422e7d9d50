"""Windows that keep their drawn content in an off-screen bitmap."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from .geometry import Rect
from .window import Window, WindowFlag

__all__ = [
    "BufferedWindow",
    "OpaqueBufferedWindow",
    "TransparentBufferedWindow",
    "TransparentBitmapBackground",
]


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class BufferedWindow(Window, metaclass=ABCMeta):
    """A window whose content is redrawn into a bitmap only when invalidated.

    ``bitmap_factory`` is called with (width, height) to create the buffer.
    Combine with another window class to buffer it: ``class X(OpaqueBufferedWindow, Other)``.
    """

    bitmap_factory: ClassVar[Optional[Callable[[int, int], Any]]] = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.bitmap: Any = None
        self.paint_update_needed = False
        super().__init__(*args, **kwargs)

    def invalidate(self, rect: Optional[Rect] = None) -> None:
        self.paint_update_needed = True
        super().invalidate(rect)

    @abstractmethod
    def paint_update(self, dc: Any) -> None:
        """Draw the buffered content onto ``dc``."""

    def _ensure_bitmap(self) -> None:
        if self.bitmap is None:
            factory = type(self).bitmap_factory
            if factory is None:
                raise RuntimeError(f"{type(self).__name__} has no bitmap_factory")
            self.bitmap = factory(self.width, self.height)
            self.paint_update_needed = True


class OpaqueBufferedWindow(BufferedWindow):
    """Draws its content into the buffer, then copies the buffer to the screen."""

    def paint(self, dc: Any) -> None:
        self._ensure_bitmap()
        if self.paint_update_needed:
            self.paint_update(self.bitmap)
            self.paint_update_needed = False
        dc.draw_bitmap(0, 0, self.bitmap)


class TransparentBufferedWindow(BufferedWindow):
    """Draws onto the screen and keeps a copy once it was drawn in full."""

    def paint(self, dc: Any) -> None:
        self._ensure_bitmap()
        if self.paint_update_needed:
            self.paint_update(dc)
            xmin, xmax, ymin, ymax = dc.get_clipping_rect()
            # Only a fully drawn window can be stored.
            if xmax - xmin >= self.width and ymax - ymin >= self.height:
                offset_x, offset_y = dc.get_offset()
                self.bitmap.draw_bitmap(0, 0, dc, offset_x, offset_y)
                self.paint_update_needed = False
        else:
            dc.draw_bitmap(0, 0, self.bitmap)


class TransparentBitmapBackground(TransparentBufferedWindow):
    """An opaque window showing a bitmap centred over what lies below."""

    def __init__(self, parent: Optional[Window], rect: Rect, bitmap: Any) -> None:
        super().__init__(parent, rect, WindowFlag.OPAQUE)
        self.background = bitmap

    def paint_update(self, dc: Any) -> None:
        if self.background is not None:
            dc.draw_bitmap(
                _cdiv(self.width - self.background.width, 2),
                _cdiv(self.height - self.background.height, 2),
                self.background,
            )