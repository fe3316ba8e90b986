"""Line segments in the plane."""

from __future__ import annotations

from typing import Optional

from .vector import Vector2d

_PARALLEL_EPS = 1e-10
_CONTAINS_EPS = 1e-8


class Line2d:
    """A segment between two distinct points."""

    __slots__ = ("_start", "_end")

    def __init__(self, start: Vector2d, end: Vector2d) -> None:
        if start == end:
            raise ValueError("Line2d must have distinct start and end points")
        self._start = start
        self._end = end

    @property
    def start(self) -> Vector2d:
        return self._start

    @start.setter
    def start(self, value: Vector2d) -> None:
        if value == self._end:
            raise ValueError("Start point cannot be the same as the end point")
        self._start = value

    @property
    def end(self) -> Vector2d:
        return self._end

    @end.setter
    def end(self, value: Vector2d) -> None:
        if value == self._start:
            raise ValueError("Start point cannot be the same as the end point")
        self._end = value

    def __repr__(self) -> str:
        return f"Line2d({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        s, e = self._start, self._end
        return f"Line2d: Start({s.x:g}, {s.y:g}), End({e.x:g}, {e.y:g})"

    def intersects(self, other: Line2d) -> Optional[Vector2d]:
        """Intersection point of the two segments, or None (also for parallel ones)."""
        p = self._start
        r = self._end - self._start
        q = other._start
        s = other._end - other._start

        r_cross_s = r.cross(s)
        if abs(r_cross_s) < _PARALLEL_EPS:
            return None

        q_minus_p = q - p
        t = q_minus_p.cross(s) / r_cross_s
        u = q_minus_p.cross(r) / r_cross_s
        if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
            return p + r * t
        return None

    def direction(self) -> Vector2d:
        """Vector from start to end."""
        return self._end - self._start

    def length(self) -> float:
        """Length of the segment."""
        return self._start.distance(self._end)

    def contains(self, point: Vector2d) -> bool:
        """True if the point lies on the segment, within a small tolerance."""
        ab = self._end - self._start
        ap = point - self._start
        if abs(ab.cross(ap)) > _CONTAINS_EPS:
            return False
        projection = ap.dot(ab)
        return -_CONTAINS_EPS <= projection <= ab.dot(ab) + _CONTAINS_EPS