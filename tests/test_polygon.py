import pytest
from hypothesis import given
from hypothesis import strategies as st

from planar2d.polygon import Polygon
from planar2d.vector import Vector2d


def test_too_few_sides():
    with pytest.raises(ValueError):
        Polygon(2)


def test_default_square_vertices():
    square = Polygon(4)
    assert square.vertices == [
        Vector2d(1, 1),
        Vector2d(-1, 1),
        Vector2d(-1, -1),
        Vector2d(1, -1),
    ]


def test_default_square_area():
    assert Polygon(4).area() == pytest.approx(4.0)


@given(st.integers(min_value=3, max_value=20))
def test_regular_polygon_structure(sides):
    origin = Vector2d(2.5, -1.5)
    poly = Polygon(sides, 2.0, origin)
    verts = poly.vertices
    assert len(verts) == sides
    distances = [v.distance(origin) for v in verts]
    assert max(distances) == pytest.approx(min(distances))
    lines = poly.lines()
    assert len(lines) == sides
    for line, following in zip(lines, lines[1:] + lines[:1]):
        assert line.end == following.start
    assert poly.centroid().distance(origin) < 1e-6
    assert poly.contains(origin)


@given(st.floats(min_value=-50, max_value=50), st.floats(min_value=-50, max_value=50))
def test_area_invariant_under_translation(dx, dy):
    base = Polygon(6, 1.5)
    moved = Polygon(6, 1.5, Vector2d(dx, dy))
    assert moved.area() == pytest.approx(base.area())


def test_scale_scales_area():
    base = Polygon(5)
    stretched = Polygon(5, scale=Vector2d(2, 3))
    assert stretched.area() == pytest.approx(base.area() * 2 * 3)


def test_contains():
    square = Polygon(4)
    assert square.contains(Vector2d(0.5, -0.5))
    assert square.contains(square.vertices[0])
    assert not square.contains(Vector2d(5, 0))


def test_vertices_setter_and_bounding_box():
    poly = Polygon(3)
    poly.vertices = [Vector2d(-2, 0), Vector2d(3, 1), Vector2d(0, 4)]
    box = poly.bounding_box()
    assert box.top_left == Vector2d(-2, 4)
    assert box.bottom_right == Vector2d(3, 0)


def test_vertices_setter_rejects_too_few():
    poly = Polygon(3)
    with pytest.raises(ValueError):
        poly.vertices = [Vector2d(0, 0), Vector2d(1, 0)]


def test_vertices_returns_copy():
    poly = Polygon(3)
    verts = poly.vertices
    verts.clear()
    assert len(poly.vertices) == 3


def test_degenerate_polygon():
    poly = Polygon(3)
    poly.vertices = [Vector2d(0, 0), Vector2d(1, 1), Vector2d(2, 2)]
    assert poly.area() == 0.0
    assert poly.centroid() == Vector2d.ZERO


def test_overlaps_self():
    square = Polygon(4)
    assert square.overlaps(square)


def test_overlaps_nested():
    big = Polygon(4, 5)
    small = Polygon(4, 1)
    assert big.overlaps(small)
    assert small.overlaps(big)


def test_overlaps_crossing():
    a = Polygon(4)
    b = Polygon(4, origin=Vector2d(1.5, 0))
    assert a.overlaps(b)
    assert b.overlaps(a)


def test_no_overlap_far_apart():
    a = Polygon(4)
    b = Polygon(4, origin=Vector2d(10, 10))
    assert not a.overlaps(b)


def test_no_overlap_with_intersecting_bounding_boxes():
    a = Polygon(4, rotation_offset=45)
    b = Polygon(4, origin=Vector2d(2.5, 2.5), rotation_offset=45)
    assert a.bounding_box().intersects(b.bounding_box())
    assert not a.overlaps(b)


def test_str():
    text = str(Polygon(4))
    lines = text.splitlines()
    assert lines[0] == "Polygon with 4 sides:"
    assert len(lines) == 5
    assert all(line.startswith("Vector2d: ") for line in lines[1:])