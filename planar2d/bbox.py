"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector2d


@dataclass(frozen=True)
class BoundingBox:
    """Box given by its top-left and bottom-right corners (y grows upward)."""

    top_left: Vector2d
    bottom_right: Vector2d

    def __post_init__(self) -> None:
        tl, br = self.top_left, self.bottom_right
        if tl.x > br.x or tl.y < br.y:
            raise ValueError(
                "Top left must be higher and further left than bottom right"
            )

    def intersects(self, other: BoundingBox) -> bool:
        """True if the boxes overlap or touch."""
        return not (
            self.bottom_right.x < other.top_left.x
            or self.top_left.x > other.bottom_right.x
            or self.top_left.y < other.bottom_right.y
            or self.bottom_right.y > other.top_left.y
        )