import pytest
from hypothesis import given
from hypothesis import strategies as st

from planar2d.bbox import BoundingBox
from planar2d.vector import Vector2d


def box(left, top, right, bottom):
    return BoundingBox(Vector2d(left, top), Vector2d(right, bottom))


def test_invalid_horizontal_order():
    with pytest.raises(ValueError):
        box(2.0, 1.0, 0.0, 0.0)


def test_invalid_vertical_order():
    with pytest.raises(ValueError):
        box(0.0, 0.0, 1.0, 1.0)


def test_overlapping_boxes():
    a = box(0, 2, 2, 0)
    b = box(1, 3, 3, 1)
    assert a.intersects(b)
    assert b.intersects(a)


@pytest.mark.parametrize(
    "other",
    [
        box(3, 2, 4, 0),  # right
        box(-4, 2, -3, 0),  # left
        box(0, 5, 2, 3),  # above
        box(0, -3, 2, -5),  # below
    ],
)
def test_disjoint_boxes(other):
    a = box(0, 2, 2, 0)
    assert not a.intersects(other)
    assert not other.intersects(a)


def test_touching_edges_intersect():
    a = box(0, 2, 2, 0)
    b = box(2, 2, 4, 0)
    assert a.intersects(b)


def test_corners_kept():
    b = box(-1, 5, 3, 2)
    assert b.top_left == Vector2d(-1, 5)
    assert b.bottom_right == Vector2d(3, 2)


coords = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)


@given(coords, coords, coords, coords)
def test_box_intersects_itself(x1, x2, y1, y2):
    b = box(min(x1, x2), max(y1, y2), max(x1, x2), min(y1, y2))
    assert b.intersects(b)