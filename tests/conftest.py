from __future__ import annotations

import numpy as np
import pytest

from prismesh import MeshConfig, PlanarRegion, build_prism, triangulate

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
SQUARE_HOLE = [(4.0, 4.0), (6.0, 4.0), (6.0, 6.0), (4.0, 6.0)]


def face_normals(mesh) -> np.ndarray:
    tri = mesh.vertices[mesh.faces]
    n = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    return n / np.linalg.norm(n, axis=1)[:, None]


def face_centroids(mesh) -> np.ndarray:
    return mesh.vertices[mesh.faces].mean(axis=1)


@pytest.fixture
def square():
    return list(SQUARE)


@pytest.fixture
def square_hole():
    return list(SQUARE_HOLE)


@pytest.fixture
def square_mesh():
    region = PlanarRegion.from_config(SQUARE, MeshConfig(level=0, height=5.0))
    return build_prism(triangulate(region), 5.0, region.bounds)
