import pytest

from lcdwidgets.geometry import NULL_RECT, Point, Rect


@pytest.mark.parametrize("x,y,w,h", [(10, 20, 30, 40), (0, 0, 0, 0), (-5, 7, 3, 1)])
def test_edges_are_consistent_with_size(x, y, w, h):
    r = Rect(x, y, w, h)
    assert r.left() == x
    assert r.top() == y
    assert r.right() - r.left() == w
    assert r.bottom() - r.top() == h


def test_contains_point_includes_top_left_excludes_bottom_right():
    r = Rect(10, 20, 30, 40)
    assert r.contains_point(r.left(), r.top())
    assert r.contains_point(r.right() - 1, r.bottom() - 1)
    assert not r.contains_point(r.right(), r.top())
    assert not r.contains_point(r.left(), r.bottom())
    assert not r.contains_point(r.left() - 1, r.top())


def test_empty_rect_contains_no_point():
    assert not NULL_RECT.contains_point(0, 0)


def test_contains_rect():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(10, 10, 20, 20)
    assert outer.contains(inner)
    assert not inner.contains(outer)
    assert outer.contains(outer)


def test_contains_rect_partial_overlap_is_false():
    a = Rect(0, 0, 50, 50)
    b = Rect(40, 40, 50, 50)
    assert not a.contains(b)
    assert not b.contains(a)


def test_rect_is_mutable_and_edges_follow():
    r = Rect(0, 0, 10, 10)
    r.h = 25
    assert r.bottom() == r.y + 25


def test_copy_is_independent():
    r = Rect(1, 2, 3, 4)
    c = r.copy()
    c.x = 99
    assert r.x == 1
    assert c == Rect(99, 2, 3, 4)


def test_point_equality():
    assert Point(1, 2) == Point(1, 2)
    assert (Point(1, 2) != Point(2, 1)) is True