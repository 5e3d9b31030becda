"""Geometry primitives for projecting items onto a scroll axis."""

from __future__ import annotations

from dataclasses import dataclass

from vlist.api.alignment import Direction, normalize_direction
from vlist.api.sizing import SizeAndPosition


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


def item_rect(
    size_and_position: SizeAndPosition,
    *,
    direction: Direction | str | None = "vertical",
    cross_size: float = 0.0,
) -> Rect:
    """Return content-space rectangle of one item along the scroll direction."""
    if normalize_direction(direction) == "horizontal":
        return Rect(x=size_and_position.offset, y=0.0, w=size_and_position.size, h=cross_size)
    return Rect(x=0.0, y=size_and_position.offset, w=cross_size, h=size_and_position.size)


__all__ = ["Rect", "item_rect"]
