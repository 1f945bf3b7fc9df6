from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
import triangle

from .errors import TriangulationError
from .geometry import Point2
from .region import PlanarRegion
from .utils import build_point_lookup, point_key, timed

logger = logging.getLogger(__name__)

Seg = Tuple[int, int]

# PSLG input, zero-based indices, quiet; no quality/area switches so the
# triangulator never inserts vertices of its own
TRIANGLE_OPTIONS = "pzQ"


@dataclass
class TriangulationResult:
    """Canonical point list and the triangles indexing into it.

    Points are ordered exterior first, then seed points, then hole rings in
    the order they were added.
    """
    points: List[Point2]
    triangles: np.ndarray
    exterior_count: int
    steiner_count: int = 0
    hole_sizes: List[int] = field(default_factory=list)

    @property
    def hole_offset(self) -> int:
        return self.exterior_count + self.steiner_count


def canonical_points(region: PlanarRegion) -> List[Point2]:
    points = list(region.exterior)
    points.extend(region.steiner)
    for hole in region.holes:
        points.extend(hole)
    return points


def _prepare_pslg(region: PlanarRegion, points: List[Point2]):
    segments: List[Seg] = []

    def add_loop(start: int, n: int) -> None:
        for i in range(n):
            segments.append((start + i, start + (i + 1) % n))

    add_loop(0, len(region.exterior))
    start = len(region.exterior) + len(region.steiner)
    for hole in region.holes:
        add_loop(start, len(hole))
        start += len(hole)

    mesh_in = {
        "vertices": np.asarray([(p.x, p.y) for p in points], dtype=np.float64),
        "segments": np.asarray(segments, dtype=np.int32),
    }
    if region.hole_markers:
        mesh_in["holes"] = np.asarray(region.hole_markers, dtype=np.float64)
    return mesh_in


def _resolve_triangles(points: List[Point2], out_vertices: np.ndarray, out_triangles: np.ndarray) -> np.ndarray:
    lut = build_point_lookup(points)
    resolved = np.empty(out_triangles.shape, dtype=np.int64)
    for t, tri in enumerate(out_triangles):
        for j, k in enumerate(tri):
            x, y = out_vertices[k]
            idx = lut.get(point_key(x, y))
            if idx is None:
                raise TriangulationError(
                    f"triangle corner ({x!r}, {y!r}) does not match any point of the region"
                )
            resolved[t, j] = idx
    return resolved


def _orient_ccw(points: List[Point2], tris: np.ndarray) -> np.ndarray:
    if tris.size == 0:
        return tris
    xy = np.asarray([(p.x, p.y) for p in points], dtype=np.float64)
    tri_pts = xy[tris]
    v0 = tri_pts[:, 1, :] - tri_pts[:, 0, :]
    v1 = tri_pts[:, 2, :] - tri_pts[:, 0, :]
    cross = v0[:, 0] * v1[:, 1] - v0[:, 1] * v1[:, 0]
    neg_mask = cross < 0.0
    if np.any(neg_mask):
        tmp = tris[neg_mask, 1].copy()
        tris[neg_mask, 1] = tris[neg_mask, 2]
        tris[neg_mask, 2] = tmp
    return tris


@timed
def triangulate(region: PlanarRegion) -> TriangulationResult:
    """Constrained Delaunay triangulation of ``region`` (holes cut out, seeds kept)."""
    points = canonical_points(region)
    mesh_in = _prepare_pslg(region, points)

    result = triangle.triangulate(mesh_in, TRIANGLE_OPTIONS)

    if "triangles" not in result or result["triangles"] is None:
        raise TriangulationError("triangle returned no triangles")
    out_vertices = result.get("vertices")
    if out_vertices is None:
        raise TriangulationError("triangle returned no vertices")

    out_vertices = np.asarray(out_vertices, dtype=np.float64)
    out_triangles = np.asarray(result["triangles"], dtype=np.int64).reshape(-1, 3)
    if len(out_triangles) == 0:
        raise TriangulationError("triangle returned no triangles")

    tris = _orient_ccw(points, _resolve_triangles(points, out_vertices, out_triangles))
    logger.debug("Triangulated %d points into %d triangles", len(points), len(tris))
    return TriangulationResult(
        points=points,
        triangles=tris,
        exterior_count=len(region.exterior),
        steiner_count=len(region.steiner),
        hole_sizes=region.hole_sizes,
    )
