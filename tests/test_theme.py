import pytest

from lcdwidgets.geometry import Rect
from lcdwidgets.theme import FIELD_PADDING_TOP, Theme, current_theme, install_theme


class RecordingTheme(Theme):
    def __init__(self):
        self.calls = []

    def draw_progress_bar(self, dc, x, y, w, h, value, total):
        self.calls.append(("progress", x, y, w, h, value, total))

    def draw_check_box(self, dc, checked, x, y, focus=False):
        self.calls.append(("check", checked, x, y, focus))

    def draw_slider(self, dc, vmin, vmax, value, rect, edit, focus):
        self.calls.append(("slider", vmin, vmax, value, rect, edit, focus))


class TextDC:
    def __init__(self):
        self.texts = []

    def draw_text(self, x, y, text, flags=0):
        self.texts.append((x, y, text))


def test_theme_is_abstract():
    with pytest.raises(TypeError):
        Theme()


def test_labelled_check_box_draws_box_and_label():
    theme = RecordingTheme()
    dc = TextDC()
    Theme.draw_labelled_check_box(theme, dc, True, "Label", focus=True)
    assert theme.calls == [("check", True, 0, FIELD_PADDING_TOP, True)]
    assert dc.texts == [(22, FIELD_PADDING_TOP, "Label")]


def test_labelled_check_box_without_label():
    theme = RecordingTheme()
    dc = TextDC()
    Theme.draw_labelled_check_box(theme, dc, False)
    assert theme.calls == [("check", False, 0, FIELD_PADDING_TOP, False)]
    assert dc.texts == []


def test_install_and_restore():
    theme = RecordingTheme()
    previous = install_theme(theme)
    try:
        assert current_theme() is theme
    finally:
        assert install_theme(previous) is theme


def test_no_theme_raises():
    previous = install_theme(None)
    try:
        with pytest.raises(LookupError):
            current_theme()
    finally:
        install_theme(previous)


def test_subclass_methods_dispatch():
    theme = RecordingTheme()
    rect = Rect(0, 0, 10, 10)
    theme.draw_slider(None, 0, 10, 5, rect, False, True)
    assert theme.calls == [("slider", 0, 10, 5, rect, False, True)]