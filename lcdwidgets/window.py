"""Window tree: geometry, scrolling, focus, painting and input routing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Callable, ClassVar, Optional, Protocol, Union

from .geometry import Rect

__all__ = [
    "INFINITE_HEIGHT",
    "WINDOW_FLAGS_LAST",
    "WindowFlag",
    "SetFocusFlag",
    "DrawContext",
    "Display",
    "Window",
    "snap_step",
]

INFINITE_HEIGHT = 2**31 - 1


class WindowFlag(IntFlag):
    """Flags that control how a window paints and scrolls."""

    OPAQUE = 1 << 0
    TRANSPARENT = 1 << 1
    NO_SCROLLBAR = 1 << 2
    NO_FOCUS = 1 << 3
    FORWARD_SCROLL = 1 << 4
    REFRESH_ALWAYS = 1 << 5
    PAINT_CHILDREN_FIRST = 1 << 6
    PUSH_FRONT = 1 << 7


WINDOW_FLAGS_LAST = WindowFlag.PUSH_FRONT


class SetFocusFlag(IntEnum):
    """Why focus is being moved to a window."""

    DEFAULT = 0
    FORWARD = 1
    BACKWARD = 2
    FIRST = 3


class DrawContext(Protocol):
    """The drawing surface a window paints on."""

    def get_offset(self) -> tuple[int, int]: ...

    def set_offset(self, x: int, y: int) -> None: ...

    def get_clipping_rect(self) -> tuple[int, int, int, int]: ...

    def set_clipping_rect(self, xmin: int, xmax: int, ymin: int, ymax: int) -> None: ...

    def draw_solid_filled_rect(self, x: int, y: int, w: int, h: int, color: int) -> None: ...


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _cdiv(a, b)


def _div_round_closest(n: int, d: int) -> int:
    if d == 0:
        return 0
    if (n < 0) != (d < 0):
        return _cdiv(n - _cdiv(d, 2), d)
    return _cdiv(n + _cdiv(d, 2), d)


@dataclass
class Display:
    """Screen size, scrollbar look, event source and touch state shared by all windows."""

    width: int = 480
    height: int = 272
    scrollbar_width: int = 3
    scrollbar_color: int = 0
    event_source: Optional[Callable[[], int]] = None
    touch_sliding: bool = False
    touch_delta_x: int = 0
    touch_delta_y: int = 0

    def next_event(self) -> int:
        """The next pending event, or 0 when there is none."""
        return self.event_source() if self.event_source is not None else 0

    def touch_at_rest(self) -> bool:
        """Whether no slide is in progress and the last slide has settled."""
        return not self.touch_sliding and self.touch_delta_x == 0 and self.touch_delta_y == 0


def snap_step(relative_scroll_position: int, page_size: int) -> int:
    """The scroll step that moves a position toward the nearest page boundary."""
    if relative_scroll_position > _cdiv(page_size, 2):
        result = page_size - relative_scroll_position
    else:
        result = -relative_scroll_position
    if abs(result) > 32:
        result = _cdiv(result, 2)
    return result


class Window:
    """A rectangular area of the screen with child windows."""

    display: ClassVar[Display] = Display()
    trash: ClassVar[list["Window"]] = []
    sliding_window: ClassVar[Optional["Window"]] = None
    _focus_window: ClassVar[Optional["Window"]] = None

    def __init__(
        self,
        parent: Optional[Window],
        rect: Rect,
        window_flags: int = 0,
        text_flags: int = 0,
    ) -> None:
        self.parent = parent
        self.children: list[Window] = []
        self.rect = rect.copy()
        self.inner_width = rect.w
        self.inner_height = rect.h
        self.page_width = 0
        self.page_height = 0
        self.scroll_position_x = 0
        self.scroll_position_y = 0
        self.window_flags = int(window_flags)
        self.text_flags = int(text_flags)
        self.close_handler: Optional[Callable[[], None]] = None
        self.focus_handler: Optional[Callable[[bool], None]] = None
        self._deleted = False
        if parent is not None:
            parent._add_child(self, bool(self.window_flags & WindowFlag.PUSH_FRONT))
            if not self.window_flags & WindowFlag.TRANSPARENT:
                # Subclass overrides are not yet ready during construction.
                Window.invalidate(self)

    # geometry

    @property
    def left(self) -> int:
        return self.rect.x

    @property
    def right(self) -> int:
        return self.rect.x + self.rect.w

    @property
    def top(self) -> int:
        return self.rect.y

    @property
    def bottom(self) -> int:
        return self.rect.y + self.rect.h

    @property
    def width(self) -> int:
        return self.rect.w

    @property
    def height(self) -> int:
        return self.rect.h

    @property
    def deleted(self) -> bool:
        return self._deleted

    # tree

    def is_child(self, window: Window) -> bool:
        """Whether ``window`` is this window or one of its ancestors."""
        return window is self or (self.parent is not None and self.parent.is_child(window))

    def full_screen_window(self) -> Window:
        """The nearest window, this one included, that covers the whole display."""
        window: Optional[Window] = self
        while window is not None:
            if window.width == self.display.width and window.height == self.display.height:
                return window
            window = window.parent
        raise LookupError("no full-screen window among the ancestors")

    def _add_child(self, window: Window, front: bool = False) -> None:
        if front:
            self.children.insert(0, window)
        else:
            self.children.append(window)

    def _remove_child(self, window: Window) -> None:
        self.children = [child for child in self.children if child is not window]
        self.invalidate()

    def attach(self, new_parent: Optional[Window]) -> None:
        """Move this window to the end of ``new_parent``'s children."""
        if self.parent is not None:
            self.detach()
        self.parent = new_parent
        if new_parent is not None:
            new_parent._add_child(self)

    def detach(self) -> None:
        """Remove this window from its parent."""
        if self.parent is not None:
            self.parent._remove_child(self)
            self.parent = None

    def bring_to_top(self) -> None:
        """Move this window above its siblings."""
        self.attach(self.parent)

    def delete_later(self, detach: bool = True, trash: bool = True) -> None:
        """Mark this window and its children deleted and queue it for disposal."""
        if self._deleted:
            return
        self._deleted = True
        if Window._focus_window is self:
            Window._focus_window = None
        if detach:
            self.detach()
        else:
            self.parent = None
        self.delete_children()
        if self.close_handler is not None:
            self.close_handler()
        if trash:
            Window.trash.append(self)

    def clear(self) -> None:
        """Reset scrolling and inner size and delete all children."""
        self.scroll_position_x = 0
        self.scroll_position_y = 0
        self.inner_width = self.rect.w
        self.inner_height = self.rect.h
        self.delete_children()
        self.invalidate()

    def delete_children(self) -> None:
        for window in list(self.children):
            window.delete_later(False)
        self.children.clear()

    # focus

    def has_focus(self) -> bool:
        return Window._focus_window is self

    @classmethod
    def focused(cls) -> Optional[Window]:
        """The window that has the focus, if any."""
        return Window._focus_window

    @classmethod
    def clear_focus(cls) -> None:
        """Take the focus away from whichever window has it."""
        window = Window._focus_window
        if window is not None:
            window.on_focus_lost()
            Window._focus_window = None

    def _scrolling_ancestor(self) -> Optional[Window]:
        parent = self.parent
        while parent is not None and parent.window_flags & WindowFlag.FORWARD_SCROLL:
            parent = parent.parent
        return parent

    def set_focus(
        self, flag: int = SetFocusFlag.DEFAULT, origin: Optional[Window] = None
    ) -> None:
        """Give the focus to this window, scrolling it into view first."""
        if self._deleted:
            return
        if Window._focus_window is not self:
            parent = self._scrolling_ancestor()
            if parent is not None:
                parent.scroll_to(self)
                self.invalidate()
            Window.clear_focus()
            Window._focus_window = self
            if self.focus_handler is not None:
                self.focus_handler(True)

    def on_focus_lost(self) -> None:
        if self.focus_handler is not None:
            self.focus_handler(False)
        self.invalidate()

    # size and position

    def set_rect(self, value: Rect) -> None:
        self.rect = value.copy()
        self.invalidate()

    def set_width(self, value: int) -> None:
        self.rect.w = value
        self.invalidate()

    def set_height(self, value: int) -> None:
        self.rect.h = value
        if self.window_flags & WindowFlag.FORWARD_SCROLL:
            self.inner_height = value
        elif self.inner_height <= value:
            self.set_scroll_position_y(0)
        self.invalidate()

    def set_left(self, x: int) -> None:
        self.rect.x = x
        self.invalidate()

    def set_top(self, y: int) -> None:
        self.rect.y = y
        self.invalidate()

    def set_window_centered(self) -> None:
        """Centre this window inside its parent."""
        if self.parent is None:
            raise ValueError("a window without a parent cannot be centred")
        self.rect.x = _cdiv(self.parent.width - self.width, 2)
        self.rect.y = _cdiv(self.parent.height - self.height, 2)

    def set_inner_width(self, w: int) -> None:
        self.inner_width = w
        if self.width >= w:
            self.scroll_position_x = 0

    def set_inner_height(self, h: int) -> None:
        self.inner_height = h
        if self.window_flags & WindowFlag.FORWARD_SCROLL:
            self.rect.h = h
            if self.parent is not None:
                self.parent.adjust_inner_height()
        elif self.height >= h:
            self.set_scroll_position_y(0)
        else:
            max_scroll_position = h - self.height
            if self.scroll_position_y > max_scroll_position:
                self.set_scroll_position_y(max_scroll_position)
        self.invalidate()

    def page_count(self) -> int:
        if self.page_width:
            return _cdiv(self.inner_width, self.page_width) & 0xFF
        if self.page_height:
            return _cdiv(self.inner_height, self.page_height) & 0xFF
        return 1

    def page_index(self) -> int:
        if self.page_width:
            return _cdiv(self.scroll_position_x + _cdiv(self.page_width, 2), self.page_width) & 0xFF
        if self.page_height:
            return _cdiv(self.scroll_position_y + _cdiv(self.page_height, 2), self.page_height) & 0xFF
        return 0

    def adjust_inner_height(self) -> None:
        """Fit the inner height to the lowest child."""
        bottom_max = max((child.rect.y + child.rect.h for child in self.children), default=0)
        self.set_inner_height(max(bottom_max, 0))

    def adjust_height(self) -> int:
        """Fit the height to the children; returns how much it changed."""
        old = self.rect.h
        self.adjust_inner_height()
        self.rect.h = self.inner_height
        return self.rect.h - old

    def move_windows_top(self, y: int, delta: int) -> None:
        """Shift every child whose top is at or below ``y`` by ``delta``."""
        if self.window_flags & WindowFlag.FORWARD_SCROLL and self.parent is not None:
            self.parent.move_windows_top(self.bottom, delta)
        for child in self.children:
            if child.rect.y >= y:
                child.rect.y += delta
                self.invalidate()
        self.set_inner_height(self.inner_height + delta)

    # scrolling

    def set_scroll_position_x(self, value: int) -> None:
        new_position = max(0, min(self.inner_width - self.width, value))
        if new_position != self.scroll_position_x:
            self.scroll_position_x = new_position
            self.invalidate()

    def set_scroll_position_y(self, value: int) -> None:
        new_position = min(self.inner_height - self.height, value)
        if new_position < 0 and self.inner_height != INFINITE_HEIGHT:
            new_position = 0
        if new_position != self.scroll_position_y:
            self.scroll_position_y = new_position
            self.invalidate()

    def scroll_to(self, target: Union[Window, Rect]) -> None:
        """Scroll so that a descendant window or an inner rectangle is visible."""
        if isinstance(target, Window):
            offset_x = offset_y = 0
            ancestor = target.parent
            while ancestor is not None and ancestor is not self:
                offset_x += ancestor.left
                offset_y += ancestor.top
                ancestor = ancestor.parent
            target = Rect(
                offset_x + target.left,
                offset_y + target.top,
                min(target.width, self.width),
                min(target.height, self.height),
            )
        self._scroll_to_rect(target)

    def _scroll_to_rect(self, rect: Rect) -> None:
        ph, pw = self.page_height, self.page_width
        if rect.top() < self.scroll_position_y:
            self.set_scroll_position_y(
                rect.top() - _cmod(rect.top(), ph) if ph else rect.top() - 5
            )
        elif rect.bottom() > self.scroll_position_y + self.height - 5:
            self.set_scroll_position_y(
                rect.top() - _cmod(rect.top(), ph) if ph else rect.bottom() - self.height + 5
            )

        if rect.left() < self.scroll_position_x:
            self.set_scroll_position_x(
                rect.left() - _cmod(rect.left(), pw) if pw else rect.left() - 5
            )
        elif rect.right() > self.scroll_position_x + self.width - 5:
            self.set_scroll_position_x(
                rect.left() - _cmod(rect.left(), pw) if pw else rect.right() - self.width + 5
            )

    # visibility

    def has_opaque_rect(self, test_rect: Rect) -> bool:
        """Whether this window or a child fully covers ``test_rect`` (parent coordinates)."""
        if not self.rect.contains(test_rect):
            return False
        if self.window_flags & WindowFlag.OPAQUE:
            return True
        relative = Rect(test_rect.x - self.rect.x, test_rect.y - self.rect.y, test_rect.w, test_rect.h)
        return any(child.has_opaque_rect(relative) for child in self.children)

    def is_child_full_size(self, child: Window) -> bool:
        return (
            child.top == 0
            and child.height == self.height
            and child.left == 0
            and child.width == self.width
        )

    def is_child_visible(self, window: Window) -> bool:
        """Whether ``window`` is not hidden by an opaque full-size sibling above it."""
        for child in reversed(self.children):
            if child is window:
                return True
            if child.window_flags & WindowFlag.OPAQUE and self.is_child_full_size(child):
                return False
        return False

    def is_visible(self) -> bool:
        return self.parent is not None and self.parent.is_child_visible(self)

    def is_inside_parent_scrolling_area(self) -> bool:
        parent = self.parent
        return (
            parent is not None
            and self.right >= parent.scroll_position_x
            and self.left <= parent.scroll_position_x + parent.width
        )

    def set_inside_parent_scrolling_area(self) -> None:
        parent = self._scrolling_ancestor()
        if parent is not None:
            parent.scroll_to(self)
            self.invalidate()

    def invalidate(self, rect: Optional[Rect] = None) -> None:
        """Mark ``rect`` (the whole window by default) as needing a repaint."""
        if rect is None:
            rect = Rect(0, 0, self.rect.w, self.rect.h)
        if self.is_visible():
            parent = self.parent
            parent.invalidate(
                Rect(
                    self.rect.x + rect.x - parent.scroll_position_x,
                    self.rect.y + rect.y - parent.scroll_position_y,
                    rect.w,
                    rect.h,
                )
            )

    # painting

    def paint(self, dc: DrawContext) -> None:
        """Draw this window's own content."""

    def full_paint(self, dc: DrawContext) -> None:
        """Paint this window, its scrollbar and its children."""
        xmin, xmax, ymin, ymax = dc.get_clipping_rect()
        x, y = dc.get_offset()
        paint_needed = True
        first_child = 0

        if self.window_flags & WindowFlag.PAINT_CHILDREN_FIRST:
            self._paint_children(dc, 0)
            dc.set_offset(x, y)
            dc.set_clipping_rect(xmin, xmax, ymin, ymax)
        else:
            relative = Rect(xmin - x, ymin - y, xmax - xmin, ymax - ymin)
            first_child = len(self.children)
            while first_child > 0:
                first_child -= 1
                if self.children[first_child].has_opaque_rect(relative):
                    paint_needed = False
                    break

        if paint_needed:
            self.paint(dc)

        if not self.window_flags & WindowFlag.NO_SCROLLBAR:
            self.draw_vertical_scrollbar(dc)

        if not self.window_flags & WindowFlag.PAINT_CHILDREN_FIRST:
            self._paint_children(dc, first_child)

    def _paint_children(self, dc: DrawContext, start: int) -> None:
        x, y = dc.get_offset()
        xmin, xmax, ymin, ymax = dc.get_clipping_rect()
        for child in self.children[start:]:
            child_xmin = x + child.rect.x
            if child_xmin >= xmax:
                continue
            child_ymin = y + child.rect.y
            if child_ymin >= ymax:
                continue
            if child_xmin + child.rect.w <= xmin:
                continue
            if child_ymin + child.rect.h <= ymin:
                continue
            dc.set_offset(
                x + child.rect.x - child.scroll_position_x,
                y + child.rect.y - child.scroll_position_y,
            )
            dc.set_clipping_rect(
                max(xmin, x + child.rect.left()),
                min(xmax, x + child.rect.right()),
                max(ymin, y + child.rect.top()),
                min(ymax, y + child.rect.bottom()),
            )
            child.full_paint(dc)

    def draw_vertical_scrollbar(self, dc: DrawContext) -> None:
        if self.inner_height > self.rect.h:
            h = self.rect.h
            yofs = _div_round_closest(h * self.scroll_position_y, self.inner_height)
            yhgt = _div_round_closest(h * h, self.inner_height)
            if yhgt < 15:
                yhgt = 15
            if yhgt + yofs > h:
                yhgt = h - yofs
            sw = self.display.scrollbar_width
            dc.draw_solid_filled_rect(
                self.rect.w - sw, self.scroll_position_y + yofs, sw, yhgt, self.display.scrollbar_color
            )

    def draw_horizontal_scrollbar(self, dc: DrawContext) -> None:
        if self.inner_width > self.rect.w:
            w = self.rect.w
            xofs = _div_round_closest(w * self.scroll_position_x, self.inner_width)
            xwdth = _div_round_closest(w * w, self.inner_width)
            if xwdth < 15:
                xwdth = 15
            if xwdth + xofs > w:
                xwdth = w - xofs
            sw = self.display.scrollbar_width
            dc.draw_solid_filled_rect(
                self.scroll_position_x + xofs, self.rect.h - sw, xwdth, sw, self.display.scrollbar_color
            )

    # events

    def check_events(self) -> None:
        """Poll children, deliver a pending event if focused, and snap scrolling to pages."""
        for child in list(self.children):
            if not child.deleted:
                child.check_events()

        if Window._focus_window is self:
            event = self.display.next_event()
            if event:
                self.on_event(event)

        if self.window_flags & WindowFlag.REFRESH_ALWAYS:
            self.invalidate()

        if self.display.touch_at_rest():
            if self.page_width:
                relative = _cmod(self.scroll_position_x, self.page_width)
                if relative:
                    self.set_scroll_position_x(
                        self.scroll_position_x + snap_step(relative, self.page_width)
                    )
            if self.page_height:
                relative = _cmod(self.scroll_position_y, self.page_height)
                if relative:
                    self.set_scroll_position_y(
                        self.scroll_position_y + snap_step(relative, self.page_height)
                    )

    def on_event(self, event: int) -> None:
        """Handle a key event; by default it goes to the parent."""
        if self.parent is not None:
            self.parent.on_event(event)

    def on_touch_start(self, x: int, y: int) -> bool:
        for child in reversed(self.children):
            if child.rect.contains_point(x, y) and child.on_touch_start(
                x - child.rect.x + child.scroll_position_x,
                y - child.rect.y + child.scroll_position_y,
            ):
                return True
        return False

    def _forward_touch_end(self, x: int, y: int) -> bool:
        for child in reversed(self.children):
            if child.rect.contains_point(x, y) and child.on_touch_end(
                x - child.rect.x + child.scroll_position_x,
                y - child.rect.y + child.scroll_position_y,
            ):
                return True
        return False

    def on_touch_end(self, x: int, y: int) -> bool:
        if self._forward_touch_end(x, y):
            return True
        return bool(self.window_flags & WindowFlag.OPAQUE)

    def on_touch_slide(
        self, x: int, y: int, start_x: int, start_y: int, slide_x: int, slide_y: int
    ) -> bool:
        start_x += self.scroll_position_x
        start_y += self.scroll_position_y

        for child in reversed(self.children):
            if child.rect.contains_point(start_x, start_y) and child.on_touch_slide(
                x - child.rect.x,
                y - child.rect.y,
                start_x - child.rect.x,
                start_y - child.rect.y,
                slide_x,
                slide_y,
            ):
                return True

        if Window.sliding_window is not None and Window.sliding_window is not self:
            return False

        if slide_y and self.inner_height > self.rect.h:
            self.set_scroll_position_y(self.scroll_position_y - slide_y)
            Window.sliding_window = self
            return True

        if slide_x and self.inner_width > self.rect.w:
            self.set_scroll_position_x(self.scroll_position_x - slide_x)
            Window.sliding_window = self
            return True

        return False