from __future__ import annotations

import numpy as np

from prismesh import Mesh, Point3, classify_faces
from prismesh.smoothing import face_normal, smoothing_group


def test_flat_top_and_bottom():
    a, b, c = Point3(0, 0, 1), Point3(1, 0, 1), Point3(0, 1, 1)
    assert face_normal(a, b, c) == Point3(0.0, 0.0, 1.0)
    assert smoothing_group(face_normal(a, b, c)) == 2
    assert smoothing_group(face_normal(a, c, b)) == 1


def test_vertical_wall():
    normal = face_normal(Point3(0, 0, 0), Point3(1, 0, 0), Point3(1, 0, 5))
    assert normal.z == 0.0
    assert smoothing_group(normal) == 4


def test_sloped_face_is_a_side():
    normal = face_normal(Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0.2))
    assert 0.9 < normal.z < 0.99
    assert smoothing_group(normal) == 4


def test_degenerate_face():
    p = Point3(1, 1, 1)
    assert smoothing_group(face_normal(p, p, p)) == 4


def test_classify_square_prism(square_mesh):
    groups = classify_faces(square_mesh)
    assert groups.tolist() == [1, 1, 2, 2] + [4] * 8


def test_classify_keeps_face_order():
    mesh = Mesh(
        vertices=np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]),
        tex_coords=np.zeros((4, 2)),
        faces=np.array([[0, 2, 1], [0, 1, 3], [0, 1, 2]]),
        tex_faces=np.zeros((3, 3), dtype=np.int64),
    )
    assert classify_faces(mesh).tolist() == [1, 4, 2]
