"""Map projection and region membership helpers.

Preference space is the unit square with Y increasing upward. The canvas is a
square of side ``size`` with uniform padding ``pad`` and Y increasing downward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import CANVAS_PAD, CANVAS_SIZE, POLYGON_EPSILON

Point = Tuple[float, float]


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def clamp_point(point: Point) -> Point:
    return clamp01(float(point[0])), clamp01(float(point[1]))


@dataclass(frozen=True)
class MapFrame:
    size: float = CANVAS_SIZE
    pad: float = CANVAS_PAD

    @property
    def inner(self) -> float:
        return self.size - self.pad * 2


DEFAULT_FRAME = MapFrame()


def to_canvas(point: Point, frame: MapFrame = DEFAULT_FRAME) -> Point:
    x, y = point
    return frame.pad + x * frame.inner, frame.pad + (1.0 - y) * frame.inner


def from_canvas(point: Point, frame: MapFrame = DEFAULT_FRAME) -> Point:
    """Map a canvas position back into the unit square, clamping drags past the edges."""

    cx, cy = point
    return (
        clamp01((cx - frame.pad) / frame.inner),
        clamp01(1.0 - (cy - frame.pad) / frame.inner),
    )


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Ray-casting membership test over ``polygon`` treated as a closed loop.

    Edges are half-open in Y (``yi > py`` differs from ``yj > py``) so a ray
    passing through a shared vertex is counted once. Self-intersecting or
    degenerate polygons are not rejected; they yield whatever parity the rays
    produce.
    """

    px, py = point
    inside = False
    count = len(polygon)
    j = count - 1
    for i in range(count):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi + POLYGON_EPSILON) + xi:
            inside = not inside
        j = i
    return inside


def make_default_polygon() -> List[Point]:
    return [
        (0.25, 0.15),
        (0.85, 0.25),
        (0.75, 0.8),
        (0.35, 0.9),
        (0.2, 0.55),
    ]


def polygon_path(polygon: Sequence[Point], frame: MapFrame = DEFAULT_FRAME) -> str:
    if not polygon:
        return ""
    parts = []
    for idx, point in enumerate(polygon):
        x, y = to_canvas(point, frame)
        parts.append(f"{'M' if idx == 0 else 'L'}{x:.1f},{y:.1f}")
    return " ".join(parts) + " Z"
