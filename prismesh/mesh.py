"""
Triangle mesh buffers shared by the extruder, the subdivider and the classifier.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

import meshio
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Mesh:
    """Geometric mesh plus a parallel texture mesh.

    ``faces[k]`` indexes ``vertices`` and ``tex_faces[k]`` indexes
    ``tex_coords`` for the same triangle k. Smoothing groups and size hints
    are only set on the mesh of the final subdivision level.
    """
    vertices: npt.NDArray[np.float64]
    tex_coords: npt.NDArray[np.float64]
    faces: npt.NDArray[np.int64]
    tex_faces: npt.NDArray[np.int64]
    level: int = 0
    smoothing_groups: Optional[npt.NDArray[np.int32]] = None
    area_size: Optional[Tuple[float, float]] = None
    atlas_size: Optional[Tuple[int, int]] = None

    @classmethod
    def from_interleaved(cls, vertices, tex_coords, faces6, level: int = 0) -> Mesh:
        """Split (v, t, v, t, v, t) face entries into the face and texture-face lists."""
        faces6 = np.asarray(faces6, dtype=np.int64).reshape(-1, 6)
        return cls(
            vertices=np.asarray(vertices, dtype=np.float64).reshape(-1, 3),
            tex_coords=np.asarray(tex_coords, dtype=np.float64).reshape(-1, 2),
            faces=np.ascontiguousarray(faces6[:, 0::2]),
            tex_faces=np.ascontiguousarray(faces6[:, 1::2]),
            level=level,
        )

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_tex_coords(self) -> int:
        return len(self.tex_coords)

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    @property
    def points_flat(self) -> npt.NDArray[np.float64]:
        return self.vertices.ravel()

    @property
    def tex_coords_flat(self) -> npt.NDArray[np.float64]:
        return self.tex_coords.ravel()

    @property
    def faces_interleaved(self) -> npt.NDArray[np.int64]:
        out = np.empty((self.num_faces, 6), dtype=np.int64)
        out[:, 0::2] = self.faces
        out[:, 1::2] = self.tex_faces
        return out

    @property
    def faces_flat(self) -> npt.NDArray[np.int64]:
        return self.faces_interleaved.ravel()

    def edge_count(self) -> int:
        """Number of distinct undirected edges of the geometric mesh."""
        if self.num_faces == 0:
            return 0
        edges = np.concatenate([self.faces[:, [0, 1]], self.faces[:, [1, 2]], self.faces[:, [2, 0]]])
        return len(np.unique(np.sort(edges, axis=1), axis=0))

    def to_meshio(self) -> meshio.Mesh:
        """In-memory hand-off to meshio; nothing is written to disk."""
        cell_data = {}
        if self.smoothing_groups is not None:
            cell_data["smoothing_group"] = [np.asarray(self.smoothing_groups, dtype=np.int32)]
        return meshio.Mesh(
            points=self.vertices,
            cells=[("triangle", self.faces)],
            cell_data=cell_data,
        )
