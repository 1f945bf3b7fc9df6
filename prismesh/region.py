"""
Planar region: the cleaned exterior ring plus its interior features.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import (
    CIRCLE_HOLE_POINTS,
    MIN_POINT_DISTANCE,
    STEINER_RADIUS_DIVISOR,
    XY,
    Bounds,
    MeshConfig,
)
from .errors import ConfigurationError
from .geometry import Point2, ensure_orientation, interior_point, point_in_polygon

logger = logging.getLogger(__name__)


def remove_close_points(ring: List[Point2], tol: float = MIN_POINT_DISTANCE) -> List[Point2]:
    """Drop the second point of every consecutive pair (wrapping) closer than ``tol``."""
    n = len(ring)
    if n < 2:
        return list(ring)
    doomed = {(i + 1) % n for i in range(n) if ring[i].distance_to(ring[(i + 1) % n]) < tol}
    cleaned = list(ring)
    for i in sorted(doomed, reverse=True):
        del cleaned[i]
    if doomed:
        logger.debug("Removed %d degenerate exterior point(s)", len(doomed))
    return cleaned


def dedupe_ring(ring: Sequence[Point2]) -> List[Point2]:
    """Remove exact duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(ring))


def circle_points(center: XY, radius: float, count: int, *, reverse: bool = False) -> List[Point2]:
    cx, cy = center
    points: List[Point2] = []
    for i in range(count):
        k = count - i if reverse else i
        angle = k * 2.0 * math.pi / count
        points.append(Point2(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def ring_bounds(ring: Sequence[Point2]) -> Bounds:
    xs = [p.x for p in ring]
    ys = [p.y for p in ring]
    return Bounds(min(xs), min(ys), max(xs), max(ys))


@dataclass
class PlanarRegion:
    exterior: List[Point2]
    bounds: Bounds
    holes: List[List[Point2]] = field(default_factory=list)
    hole_markers: List[XY] = field(default_factory=list)
    steiner: List[Point2] = field(default_factory=list)

    @property
    def hole_sizes(self) -> List[int]:
        return [len(h) for h in self.holes]

    @classmethod
    def from_config(cls, exterior: Sequence[XY], config: Optional[MeshConfig] = None) -> PlanarRegion:
        config = (config or MeshConfig()).validate()

        ring = remove_close_points([Point2(float(x), float(y)) for x, y in exterior])
        if len(ring) < 3:
            raise ConfigurationError(f"exterior ring needs at least 3 distinct points, got {len(ring)}")
        ring = ensure_orientation(ring, ccw=True)

        if config.bounds is not None:
            bounds = Bounds(*(float(v) for v in config.bounds))
        else:
            bounds = ring_bounds(ring)
            if bounds.width <= 0.0 or bounds.height <= 0.0:
                raise ConfigurationError("exterior ring has zero extent")

        region = cls(exterior=ring, bounds=bounds)
        hole_rings = config.hole_rings()
        if hole_rings is not None:
            for k, raw in enumerate(hole_rings):
                hole = dedupe_ring([Point2(x, y) for x, y in raw])
                if len(hole) < 3:
                    raise ConfigurationError(f"hole #{k} needs at least 3 distinct points, got {len(hole)}")
                # holes wind opposite to the CCW exterior
                hole = ensure_orientation(hole, ccw=False)
                region.holes.append(hole)
                region.hole_markers.append(interior_point(hole))
        elif config.hole_radius > 0.0:
            # reversed angular order winds the hole opposite to the CCW exterior
            region.holes.append(
                circle_points(bounds.center, config.hole_radius, CIRCLE_HOLE_POINTS, reverse=True)
            )
            region.hole_markers.append(bounds.center)
        elif config.steiner_points > 0:
            radius = math.hypot(bounds.width, bounds.height) / STEINER_RADIUS_DIVISOR
            seeds = circle_points(bounds.center, radius, config.steiner_points)
            region.steiner = [p for p in seeds if point_in_polygon((p.x, p.y), ring)]
            if len(region.steiner) < len(seeds):
                logger.debug("Dropped %d seed point(s) outside the exterior", len(seeds) - len(region.steiner))

        logger.debug(
            "Planar region: %d exterior points, %d hole(s), %d seed point(s)",
            len(region.exterior), len(region.holes), len(region.steiner),
        )
        return region
