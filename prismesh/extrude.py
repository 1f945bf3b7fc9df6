"""
Level-0 prism: caps from the triangulation, walls from the exterior and hole rings.

Face entries are interleaved (v, t, v, t, v, t). At this level every vertex
has its own texture coordinate, so the vertex and texcoord index of a corner
coincide.
"""
from __future__ import annotations
import logging
from typing import List, Tuple

import numpy as np

from .adapter_triangle import TriangulationResult
from .config import Bounds
from .mesh import Mesh

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]


def _interleave(tris: List[Tri]) -> np.ndarray:
    arr = np.asarray(tris, dtype=np.int64).reshape(-1, 3)
    return np.repeat(arr, 2, axis=1)


def bottom_cap(triangles: np.ndarray) -> np.ndarray:
    # reversed winding so the bottom faces down
    return _interleave([(i0, i2, i1) for i0, i1, i2 in triangles.tolist()])


def top_cap(triangles: np.ndarray, n: int) -> np.ndarray:
    return _interleave([(n + i0, n + i1, n + i2) for i0, i1, i2 in triangles.tolist()])


def exterior_walls(ext_count: int, n: int) -> np.ndarray:
    tris: List[Tri] = []
    for i in range(ext_count):
        j = (i + 1) % ext_count
        tris.append((i, j, j + n))
        tris.append((i, j + n, i + n))
    return _interleave(tris)


def hole_walls(offset: int, hole_sizes: List[int], n: int) -> np.ndarray:
    tris: List[Tri] = []
    start = offset
    for size in hole_sizes:
        for k in range(size):
            i = start + k
            j = start + (k + 1) % size
            tris.append((i, j + n, j))
            tris.append((i, i + n, j + n))
        start += size
    return _interleave(tris)


def layer_buffers(result: TriangulationResult, height: float, bounds: Bounds):
    xy = np.asarray([(p.x, p.y) for p in result.points], dtype=np.float64).reshape(-1, 2)
    n = len(xy)
    bottom = np.column_stack((xy, np.zeros(n, dtype=np.float64)))
    top = np.column_stack((xy, np.full(n, float(height), dtype=np.float64)))
    uv = np.column_stack((
        (xy[:, 0] - bounds.min_x) / bounds.width,
        (xy[:, 1] - bounds.min_y) / bounds.height,
    ))
    return np.vstack((bottom, top)), np.vstack((uv, uv))


def build_prism(result: TriangulationResult, height: float, bounds: Bounds) -> Mesh:
    """Extrude the triangulation to ``height`` and return the level-0 mesh."""
    n = len(result.points)
    vertices, tex_coords = layer_buffers(result, height, bounds)
    stages = [
        bottom_cap(result.triangles),
        top_cap(result.triangles, n),
        exterior_walls(result.exterior_count, n),
        hole_walls(result.hole_offset, result.hole_sizes, n),
    ]
    faces6 = np.concatenate(stages)
    logger.debug(
        "Prism: %d vertices, %d cap + %d exterior wall + %d hole wall faces",
        len(vertices), 2 * len(result.triangles), len(stages[2]), len(stages[3]),
    )
    return Mesh.from_interleaved(vertices, tex_coords, faces6, level=0)
