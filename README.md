# lcdwidgets

A small retained-mode widget toolkit for fixed-size colour LCD screens.
Windows form a tree. Each window has a rectangle, an inner scrollable area,
focus handling, and logic for painting and invalidation. The package builds a
few stock widgets and layout helpers on top of that tree.

The package draws nothing itself. Every paint method takes a *drawing
context* (`dc`) that you supply. This object has the methods a widget calls,
such as `draw_text`, `draw_bitmap`, `draw_solid_filled_rect`, `font_height`,
`get_offset` and `get_clipping_rect`, and it renders to your display or to an
off-screen buffer.

## Installation

```
pip install lcdwidgets
```

To include the test dependencies:

```
pip install "lcdwidgets[test]"
```

## Modules

- `lcdwidgets.geometry` provides `Point` and `Rect`. `Rect` has `left()`,
  `right()`, `top()` and `bottom()`, plus the containment tests
  `contains_point(x, y)` and `contains(other)`. The module also defines the
  constant `NULL_RECT`.
- `lcdwidgets.flags` provides the text and number flags (`TextFlag`) and the
  font helpers `font_flag`, `font_index` and `number_mode`. For RGB565 and
  ARGB4444 colours it has `rgb`, `argb`, `rgb_split`, `argb_split`,
  `rgb_join`, `get_red`, `get_green`, `get_blue` and `opacity`. To pack a
  colour into a flags word it has `color_to_flags`, `color_value` and
  `color_mask`.
- `lcdwidgets.bitfield` provides bit-field helpers: `bit`, `bitmask`, `mask`,
  `prep`, `get_field`, `set_field`, `flip`, `bit_get` and `single_bit_get`.
- `lcdwidgets.window` provides the `Window` base class, `WindowFlag`,
  `SetFocusFlag`, the `Display` description of the screen, and `snap_step`,
  which snaps scrolling to page boundaries.
- `lcdwidgets.gridlayout` provides `GridLayout` and `FormGridLayout`. These
  hand out slots for rows of widgets, using the sizes held in `LayoutMetrics`.
- `lcdwidgets.bufferedwindow` provides windows that cache their own
  rendering: `OpaqueBufferedWindow`, `TransparentBufferedWindow` and
  `TransparentBitmapBackground`.
- `lcdwidgets.theme` provides the abstract `Theme`, `IconState`, and
  `install_theme` and `current_theme` for choosing the theme in use.
- `lcdwidgets.static` provides `StaticText`, `Subtitle`, `StaticBitmap`,
  `DynamicText` and `DynamicNumber`.
- `lcdwidgets.progress` provides `Progress`, a bar that the current theme
  draws.

## Windows and painting

```python
from lcdwidgets.flags import TextFlag
from lcdwidgets.geometry import Rect
from lcdwidgets.static import StaticText
from lcdwidgets.window import Window


class Recorder:
    def __init__(self):
        self.calls = []

    def font_height(self, flags):
        return 12

    def draw_text(self, x, y, text, flags):
        self.calls.append((x, y, text))


screen = Window(None, Rect(0, 0, 480, 272))
label = StaticText(screen, Rect(10, 10, 100, 40), "one\ntwo",
                   text_flags=TextFlag.CENTERED)
dc = Recorder()
label.paint(dc)
assert dc.calls == [(50, 2, "one"), (50, 16, "two")]
```

All windows share some class-level state. `Window.display` is a `Display`
that holds the screen size, the scrollbar width and colour, an optional
`event_source` callable and the touch state. `Window.focused()` returns the
window that has the focus. Each call to `check_events()` polls the children,
passes the next event from `Display.event_source` to the focused window, and
snaps paged scrolling while no touch slide is in progress.

## Themes

`Theme` is abstract. A subclass implements `draw_progress_bar`,
`draw_check_box` and `draw_slider`. `install_theme` makes a theme current,
and `Progress.paint` draws through that theme:

```python
from lcdwidgets.theme import Theme, install_theme


class FlatTheme(Theme):
    def draw_progress_bar(self, dc, x, y, w, h, value, total):
        dc.draw_solid_filled_rect(x, y, w * value // total, h, 0xFFFF)

    def draw_check_box(self, dc, checked, x, y, focus=False):
        ...

    def draw_slider(self, dc, vmin, vmax, value, rect, edit, focus):
        ...


install_theme(FlatTheme())
```

If no theme is installed, `current_theme()` raises `LookupError`.

## Buffered windows

A buffered window creates its buffer by calling its class attribute
`bitmap_factory` with `(width, height)`. If `bitmap_factory` is not set,
painting raises `RuntimeError`. Subclasses implement `paint_update(dc)`.

## Colours and bit fields

```python
from lcdwidgets.bitfield import get_field, set_field
from lcdwidgets.flags import color_to_flags, color_value, rgb, rgb_split

red = rgb(255, 0, 0)          # 0xF800
assert rgb_split(red) == (31, 0, 0)
assert color_value(color_to_flags(red)) == red

word = set_field(0, 0b101, 4, 3)
assert get_field(word, 4, 3) == 0b101
```

## What the package does not do

- It has no rendering backend, no display driver and no input driver. You
  provide the drawing context and the event source.
- It has no editable form widgets: no buttons, check boxes, choices, number
  or text editors, sliders, menus, dialogs or on-screen keyboards.
  `Theme.draw_check_box` and `Theme.draw_slider` are drawing hooks only.
- It has no main loop. Your program calls `check_events()` and `full_paint()`
  on the root window.

## Running the tests

```
pytest
```