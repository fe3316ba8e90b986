"""Polygons built as regular shapes or from explicit vertices."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from .bbox import BoundingBox
from .line import Line2d
from .vector import Vector2d


class Polygon:
    """A closed polygon given by its vertices in order."""

    __slots__ = ("_vertices",)

    def __init__(
        self,
        sides: int,
        inner_circle_radius: float = 1,
        origin: Vector2d = Vector2d.ZERO,
        scale: Vector2d = Vector2d.ONE,
        rotation_offset: float = 0,
    ) -> None:
        """Build a regular polygon; rotation_offset is in degrees."""
        if sides < 3:
            raise ValueError("Polygon must have at least 3 sides.")
        circum_radius = inner_circle_radius / math.cos(math.pi / sides)
        angle_step = 2 * math.pi / sides
        offset = math.pi / sides - math.radians(rotation_offset)
        self._vertices = [
            origin
            + Vector2d(
                circum_radius * math.cos(i * angle_step + offset) * scale.x,
                circum_radius * math.sin(i * angle_step + offset) * scale.y,
            )
            for i in range(sides)
        ]

    @property
    def vertices(self) -> list[Vector2d]:
        return list(self._vertices)

    @vertices.setter
    def vertices(self, new_vertices: Iterable[Vector2d]) -> None:
        verts = list(new_vertices)
        if len(verts) < 3:
            raise ValueError("Polygon must have at least 3 sides.")
        self._vertices = verts

    def __repr__(self) -> str:
        return f"Polygon(vertices={self._vertices!r})"

    def __str__(self) -> str:
        header = f"Polygon with {len(self._vertices)} sides:"
        return "\n".join([header, *map(str, self._vertices)])

    def _edges(self) -> Iterator[tuple[Vector2d, Vector2d]]:
        verts = self._vertices
        return zip(verts, verts[1:] + verts[:1])

    def lines(self) -> list[Line2d]:
        """Segments between consecutive vertices, closing the loop."""
        return [Line2d(a, b) for a, b in self._edges()]

    def overlaps(self, other: Polygon) -> bool:
        """True if the polygons share any area or boundary point."""
        if not self.bounding_box().intersects(other.bounding_box()):
            return False
        if self.contains(other._vertices[0]) or other.contains(self._vertices[0]):
            return True
        other_lines = other.lines()
        return any(
            mine.intersects(theirs) is not None
            for mine in self.lines()
            for theirs in other_lines
        )

    def contains(self, point: Vector2d) -> bool:
        """True if the point is inside the polygon or on its boundary."""
        if any(Line2d(a, b).contains(point) for a, b in self._edges()):
            return True
        crossings = 0
        for p1, p2 in self._edges():
            if (p1.y <= point.y < p2.y or p2.y <= point.y < p1.y) and point.x < (
                p2.x - p1.x
            ) * (point.y - p1.y) / (p2.y - p1.y) + p1.x:
                crossings += 1
        return crossings % 2 == 1

    def area(self) -> float:
        """Unsigned area (shoelace formula)."""
        return abs(sum(a.cross(b) for a, b in self._edges())) * 0.5

    def centroid(self) -> Vector2d:
        """Centre of mass; the origin if the polygon has no area."""
        area = cx = cy = 0.0
        for p1, p2 in self._edges():
            cross = p1.x * p2.y - p2.x * p1.y
            area += cross
            cx += (p1.x + p2.x) * cross
            cy += (p1.y + p2.y) * cross
        area *= 0.5
        if area == 0:
            return Vector2d()
        return Vector2d(cx / (6.0 * area), cy / (6.0 * area))

    def bounding_box(self) -> BoundingBox:
        """Smallest axis-aligned box holding every vertex."""
        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]
        return BoundingBox(Vector2d(min(xs), max(ys)), Vector2d(max(xs), min(ys)))