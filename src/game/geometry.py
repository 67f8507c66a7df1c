# src/game/geometry.py
from __future__ import annotations
from typing import NamedTuple


class Box(NamedTuple):
    """Axis-aligned box in world units (top-left anchored)."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def inset(self, left: float, top: float, shrink_w: float, shrink_h: float) -> "Box":
        return Box(self.x + left, self.y + top, self.w - shrink_w, self.h - shrink_h)


def intersects(a: Box, b: Box) -> bool:
    """Strict AABB overlap: boxes sharing only an edge do not intersect."""
    return (
        a.x < b.x + b.w and
        a.x + a.w > b.x and
        a.y < b.y + b.h and
        a.y + a.h > b.y
    )
