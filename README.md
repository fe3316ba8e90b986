# planar2d

A small, dependency-free toolkit for plane geometry.

- `planar2d.vector.Vector2d` is an immutable 2D vector with `+`, `-`,
  multiplication and division by a scalar, scalar divided by a vector
  (component-wise), `dot`, `cross`, `distance`, `magnitude`, `normalized` and
  `angle_between` (in radians). Equality is tolerant: two vectors are equal when
  both components differ by less than `1e-8`. Because of that, vectors are not
  hashable. A vector can be unpacked (`x, y = v`). The class carries the
  constants `ZERO`, `UP`, `DOWN`, `LEFT`, `RIGHT` and `ONE`.
- `planar2d.line.Line2d` is a segment between two distinct points, with
  settable `start` and `end` properties, `intersects`, `contains`, `direction`
  and `length`.
- `planar2d.bbox.BoundingBox` is an axis-aligned box given by a `top_left` and
  a `bottom_right` corner (y grows upwards), with an `intersects` test that
  counts touching boxes as overlapping.
- `planar2d.polygon.Polygon` builds a regular polygon from a side count, an
  inscribed-circle radius, an origin, a per-axis scale and a rotation offset in
  degrees. Its `vertices` property can be replaced with any list of three or
  more points. It offers `lines`, `area`, `centroid`, `contains` (boundary
  points count as inside), `bounding_box` and `overlaps`.

## Installation

```
pip install planar2d
```

## Usage

```python
from planar2d.vector import Vector2d
from planar2d.line import Line2d
from planar2d.polygon import Polygon

a = Vector2d(3.0, 4.0)
print(a.magnitude())              # 5.0
print(a.normalized())             # Vector2d: 0.6, 0.8
print(a.dot(Vector2d(1.0, 0.0)))  # 3.0

l1 = Line2d(Vector2d(0, 0), Vector2d(2, 2))
l2 = Line2d(Vector2d(0, 2), Vector2d(2, 0))
print(l1.intersects(l2))            # Vector2d: 1, 1
print(l1.contains(Vector2d(1, 1)))  # True

square = Polygon(4, 1.0)          # square with inscribed radius 1
print(square.area())              # about 4.0
print(square.contains(Vector2d(0, 0)))  # True
print(square.bounding_box())

other = Polygon(6, 1.0, origin=Vector2d(1.5, 0))
print(square.overlaps(other))     # True
```

`str()` of a vector, segment or polygon gives a short human-readable listing;
`repr()` shows the constructor-style form.

`Line2d.intersects` returns the crossing point, or `None` when the segments
are parallel or do not meet.

`Polygon.centroid` returns the origin for a polygon with zero area, and
`Vector2d.angle_between` returns `0.0` when either vector has zero length.

## Errors

`ValueError` is raised for a segment whose ends coincide (also when setting
`start` or `end`), a bounding box with its corners the wrong way round, a
polygon with fewer than three sides or vertices, dividing a vector by zero, and
dividing a scalar by a vector with a (near-)zero component. Normalising a zero
vector raises `ZeroDivisionError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```