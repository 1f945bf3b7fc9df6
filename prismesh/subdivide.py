"""
Midpoint subdivision: every triangle becomes four.

The geometric faces and the texture faces are refined in lock step but with
separate midpoint caches, since UV seams and geometric seams can differ.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from .errors import MeshError
from .mesh import Mesh

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


@dataclass
class SubdivisionContext:
    """Index counters and midpoint caches owned by a single build."""
    vertex_counter: int
    uv_counter: int
    vertex_cache: Dict[Edge, int] = field(default_factory=dict)
    uv_cache: Dict[Edge, int] = field(default_factory=dict)

    @classmethod
    def for_mesh(cls, mesh: Mesh) -> SubdivisionContext:
        return cls(vertex_counter=mesh.num_vertices, uv_counter=mesh.num_tex_coords)

    def reset_caches(self) -> None:
        self.vertex_cache.clear()
        self.uv_cache.clear()


class _MidpointAllocator:
    def __init__(self, coords: np.ndarray, cache: Dict[Edge, int], counter: int):
        self.coords = coords
        self.cache = cache
        self.counter = counter
        self.new_rows: List[np.ndarray] = []

    def middle(self, a: int, b: int) -> int:
        key = (a, b) if a < b else (b, a)
        idx = self.cache.get(key)
        if idx is not None:
            return idx
        self.new_rows.append((self.coords[a] + self.coords[b]) * 0.5)
        idx = self.counter
        self.cache[key] = idx
        self.counter += 1
        return idx

    def dense(self) -> np.ndarray:
        if not self.new_rows:
            return self.coords
        return np.vstack((self.coords, np.asarray(self.new_rows)))


def split_faces(coords: np.ndarray, faces: np.ndarray, cache: Dict[Edge, int], counter: int):
    """One refinement of ``faces`` over ``coords``; returns (coords, faces, counter)."""
    alloc = _MidpointAllocator(coords, cache, counter)
    out = np.empty((4 * len(faces), 3), dtype=np.int64)
    for k, (v1, v2, v3) in enumerate(faces.tolist()):
        a = alloc.middle(v1, v2)
        b = alloc.middle(v2, v3)
        c = alloc.middle(v3, v1)
        out[4 * k] = (v1, a, c)
        out[4 * k + 1] = (v2, b, a)
        out[4 * k + 2] = (v3, c, b)
        out[4 * k + 3] = (a, b, c)
    return alloc.dense(), out, alloc.counter


def subdivide(mesh: Mesh, ctx: SubdivisionContext) -> Mesh:
    """Refine ``mesh`` by one level using the build-scoped ``ctx``."""
    if ctx.vertex_counter != mesh.num_vertices or ctx.uv_counter != mesh.num_tex_coords:
        raise MeshError("subdivision context does not belong to this mesh")

    ctx.reset_caches()
    vertices, faces, ctx.vertex_counter = split_faces(
        mesh.vertices, mesh.faces, ctx.vertex_cache, ctx.vertex_counter
    )
    tex_coords, tex_faces, ctx.uv_counter = split_faces(
        mesh.tex_coords, mesh.tex_faces, ctx.uv_cache, ctx.uv_counter
    )
    ctx.reset_caches()

    logger.debug(
        "Level %d: %d -> %d faces, %d -> %d vertices",
        mesh.level + 1, mesh.num_faces, len(faces), mesh.num_vertices, len(vertices),
    )
    return Mesh(
        vertices=vertices,
        tex_coords=tex_coords,
        faces=faces,
        tex_faces=tex_faces,
        level=mesh.level + 1,
    )
