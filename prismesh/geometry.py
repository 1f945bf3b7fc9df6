"""
Coordinate value types and planar loop helpers.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

XY = Tuple[float, float]


@dataclass(frozen=True)
class Point2:
    """A point (or UV coordinate) in the plane."""
    x: float
    y: float

    def __add__(self, other: Point2) -> Point2:
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2) -> Point2:
        return Point2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point2:
        return Point2(self.x * scalar, self.y * scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: Point2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Point3:
    """A point or direction in 3D space."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Point3) -> Point3:
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3) -> Point3:
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point3:
        return Point3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Point3:
        mag = self.magnitude
        if mag == 0.0:
            return Point3(0.0, 0.0, 0.0)
        return self * (1.0 / mag)

    def cross(self, other: Point3) -> Point3:
        return Point3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


def signed_area(loop: Sequence[Point2]) -> float:
    """Positive for CCW, negative for CW."""
    area = 0.0
    n = len(loop)
    for i in range(n):
        x0, y0 = loop[i]
        x1, y1 = loop[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return 0.5 * area


def ensure_orientation(loop: List[Point2], ccw: bool) -> List[Point2]:
    area = signed_area(loop)
    if ccw and area < 0.0:
        return list(reversed(loop))
    if not ccw and area > 0.0:
        return list(reversed(loop))
    return loop


def point_in_polygon(pt: XY, loop: Sequence[Point2]) -> bool:
    x, y = pt
    inside = False
    n = len(loop)
    for i in range(n):
        x0, y0 = loop[i]
        x1, y1 = loop[(i + 1) % n]
        cond = ((y0 > y) != (y1 > y)) and (x < (x1 - x0) * (y - y0) / ((y1 - y0) or 1e-30) + x0)
        if cond:
            inside = not inside
    return inside


def polygon_centroid(loop: Sequence[Point2]) -> XY:
    """Area centroid; falls back to the vertex average for degenerate loops."""
    area = 0.0
    cx = 0.0
    cy = 0.0
    n = len(loop)
    for i in range(n):
        x0, y0 = loop[i]
        x1, y1 = loop[(i + 1) % n]
        cross = x0 * y1 - x1 * y0
        area += cross
        cx += (x0 + x1) * cross
        cy += (y0 + y1) * cross
    area *= 0.5
    if abs(area) < 1e-12:
        return (sum(p.x for p in loop) / n, sum(p.y for p in loop) / n)
    return (cx / (6.0 * area), cy / (6.0 * area))


def interior_point(loop: Sequence[Point2]) -> XY:
    """A point strictly inside ``loop``, used as a hole marker for the triangulator."""
    cx, cy = polygon_centroid(loop)
    if point_in_polygon((cx, cy), loop):
        return (cx, cy)
    sx = sum(p.x for p in loop) / len(loop)
    sy = sum(p.y for p in loop) / len(loop)
    if point_in_polygon((sx, sy), loop):
        return (sx, sy)
    # try points just inside each edge midpoint until one lands in the loop
    inward = 1.0 if signed_area(loop) > 0.0 else -1.0
    n = len(loop)
    for i in range(n):
        a, b = loop[i], loop[(i + 1) % n]
        dx, dy = b.x - a.x, b.y - a.y
        length = math.hypot(dx, dy)
        if length == 0.0:
            continue
        step = 1e-3 * length
        px = 0.5 * (a.x + b.x) - inward * dy / length * step
        py = 0.5 * (a.y + b.y) + inward * dx / length * step
        if point_in_polygon((px, py), loop):
            return (px, py)
    return (cx, cy)
