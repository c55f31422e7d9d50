import pytest

from lcdwidgets.geometry import Rect
from lcdwidgets.progress import Progress
from lcdwidgets.theme import Theme, install_theme
from lcdwidgets.window import Window


class RecordingTheme(Theme):
    def __init__(self):
        self.calls = []

    def draw_progress_bar(self, dc, x, y, w, h, value, total):
        self.calls.append((dc, x, y, w, h, value, total))

    def draw_check_box(self, dc, checked, x, y, focus=False):
        self.calls.append(("check", checked))

    def draw_slider(self, dc, vmin, vmax, value, rect, edit, focus):
        self.calls.append(("slider", value))


class RecordingRoot(Window):
    def __init__(self):
        super().__init__(None, Rect(0, 0, 480, 272))
        self.invalidated = []

    def invalidate(self, rect=None):
        self.invalidated.append(rect)


@pytest.fixture
def theme():
    recording = RecordingTheme()
    previous = install_theme(recording)
    yield recording
    install_theme(previous)


def test_paint_uses_theme(theme):
    bar = Progress(None, Rect(0, 0, 120, 12))
    bar.set_value(40)
    dc = object()
    bar.paint(dc)
    assert theme.calls == [(dc, 0, 0, 120, 12, 40, 100)]


def test_initial_value_zero(theme):
    bar = Progress(None, Rect(0, 0, 50, 8))
    bar.paint(None)
    assert theme.calls[0][5] == 0


def test_set_value_invalidates_only_on_change():
    root = RecordingRoot()
    bar = Progress(root, Rect(0, 0, 50, 8))
    root.invalidated.clear()
    bar.set_value(0)
    assert root.invalidated == []
    bar.set_value(10)
    assert bar.value == 10
    assert len(root.invalidated) == 1


def test_paint_without_theme_raises():
    previous = install_theme(None)
    try:
        with pytest.raises(LookupError):
            Progress(None, Rect(0, 0, 50, 8)).paint(None)
    finally:
        install_theme(previous)