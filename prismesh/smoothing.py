from __future__ import annotations
import numpy as np

from .config import SMOOTHING_THRESHOLD
from .geometry import Point3
from .mesh import Mesh

GROUP_DOWN = 1
GROUP_UP = 2
GROUP_SIDE = 4


def face_normal(a: Point3, b: Point3, c: Point3) -> Point3:
    return (b - a).cross(c - a).normalize()


def smoothing_group(normal: Point3, threshold: float = SMOOTHING_THRESHOLD) -> int:
    if normal.z < -threshold:
        return GROUP_DOWN
    if normal.z > threshold:
        return GROUP_UP
    return GROUP_SIDE


def classify_faces(mesh: Mesh) -> np.ndarray:
    """One smoothing group per face: 1 facing down, 2 facing up, 4 otherwise."""
    points = [Point3(*row) for row in mesh.vertices.tolist()]
    groups = np.empty(mesh.num_faces, dtype=np.int32)
    for k, (i0, i1, i2) in enumerate(mesh.faces.tolist()):
        groups[k] = smoothing_group(face_normal(points[i0], points[i1], points[i2]))
    return groups
