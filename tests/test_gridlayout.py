import pytest

from lcdwidgets.geometry import Rect
from lcdwidgets.gridlayout import FormGridLayout, GridLayout, LayoutMetrics
from lcdwidgets.window import Window

METRICS = LayoutMetrics(line_height=20, line_spacing=4, indent_width=10, label_width=100, padding=6)
WIDTH = 300


def test_single_slot_spans_width():
    layout = GridLayout(WIDTH, METRICS)
    assert layout.slot() == Rect(0, 0, WIDTH, METRICS.line_height)


def test_two_slots_are_adjacent_and_equal():
    layout = GridLayout(WIDTH, METRICS)
    first, second = layout.slot(2, 0), layout.slot(2, 1)
    assert first.w == second.w
    assert second.x == first.right() + METRICS.line_spacing
    assert second.right() == WIDTH


def test_slot_count_zero_rejected():
    with pytest.raises(ValueError):
        GridLayout(WIDTH, METRICS).slot(0)


def test_width_taken_from_window():
    window = Window(None, Rect(0, 0, 123, 40))
    assert GridLayout(window, METRICS).slot().w == 123


def test_spacer_and_next_line():
    layout = GridLayout(WIDTH, METRICS)
    layout.spacer()
    assert layout.window_height() == METRICS.line_spacing
    layout.spacer(7)
    assert layout.window_height() == METRICS.line_spacing + 7
    layout.next_line()
    assert layout.window_height() == 2 * METRICS.line_spacing + 7 + METRICS.line_height
    assert layout.slot().y == layout.window_height()


def test_add_window_fits_height():
    layout = GridLayout(WIDTH, METRICS)
    container = Window(None, Rect(0, 0, WIDTH, 10))
    Window(container, Rect(0, 0, 50, 30))
    layout.add_window(container)
    assert container.height == 30
    assert layout.window_height() == 30 + METRICS.line_spacing


def test_form_line_slot_inside_margins():
    layout = FormGridLayout(WIDTH, METRICS)
    assert layout.line_slot() == Rect(
        METRICS.padding, 0, WIDTH - 2 * METRICS.padding, METRICS.line_height
    )


def test_form_label_slot_and_indent():
    layout = FormGridLayout(WIDTH, METRICS)
    plain = layout.label_slot()
    indented = layout.label_slot(True)
    assert plain.x == METRICS.padding
    assert plain.right() == METRICS.label_width
    assert indented.x == METRICS.padding + METRICS.indent_width
    assert indented.right() == METRICS.label_width


def test_form_field_slots():
    layout = FormGridLayout(WIDTH, METRICS)
    single = layout.field_slot()
    assert single.x == METRICS.label_width
    assert single.right() == WIDTH - METRICS.padding
    first, second = layout.field_slot(2, 0), layout.field_slot(2, 1)
    assert second.x == first.right() + METRICS.line_spacing
    assert second.right() == WIDTH - METRICS.padding


def test_form_centered_slot():
    layout = FormGridLayout(WIDTH, METRICS)
    full = layout.centered_slot()
    assert full.x == METRICS.padding
    assert full.w == WIDTH - 2 * METRICS.padding
    narrow = layout.centered_slot(100)
    assert narrow.w == 100
    assert narrow.x == 106


def test_form_default_width_is_display():
    layout = FormGridLayout(metrics=METRICS)
    assert layout.line_slot().w == Window.display.width - 2 * METRICS.padding


def test_form_margins_adjustable():
    layout = FormGridLayout(WIDTH, METRICS)
    layout.margin_left = 0
    layout.margin_right = 0
    layout.label_width = 50
    assert layout.line_slot() == Rect(0, 0, WIDTH, METRICS.line_height)
    assert layout.field_slot().x == 50