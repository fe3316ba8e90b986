"""Plane geometry: vectors, line segments, bounding boxes and regular polygons."""

__version__ = "1.0.0"
__all__ = ["bbox", "line", "polygon", "vector"]