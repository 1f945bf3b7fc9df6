from __future__ import annotations

import numpy as np
import pytest

from prismesh import Bounds, MeshConfig, PlanarRegion, build_prism, triangulate
from prismesh.extrude import exterior_walls, hole_walls

from conftest import face_centroids, face_normals


def test_square_layout(square_mesh):
    assert square_mesh.level == 0
    assert square_mesh.num_vertices == 8
    assert square_mesh.num_tex_coords == 8
    assert square_mesh.num_faces == 10
    np.testing.assert_array_equal(square_mesh.vertices[:4, 2], 0.0)
    np.testing.assert_array_equal(square_mesh.vertices[4:, 2], 5.0)
    np.testing.assert_array_equal(square_mesh.vertices[:4, :2], square_mesh.vertices[4:, :2])
    np.testing.assert_array_equal(square_mesh.faces, square_mesh.tex_faces)


def test_uv_normalized_to_bounds(square_mesh):
    np.testing.assert_allclose(square_mesh.tex_coords, square_mesh.vertices[:, :2] / 10.0)


def test_uv_uses_bounds_override(square):
    bounds = Bounds(-10.0, 0.0, 10.0, 20.0)
    region = PlanarRegion.from_config(square, MeshConfig(bounds=bounds))
    mesh = build_prism(triangulate(region), 1.0, region.bounds)
    u = (mesh.vertices[:, 0] + 10.0) / 20.0
    v = mesh.vertices[:, 1] / 20.0
    np.testing.assert_allclose(mesh.tex_coords, np.column_stack((u, v)))


def test_cap_and_wall_orientation(square_mesh):
    normals = face_normals(square_mesh)
    np.testing.assert_allclose(normals[:2], [[0.0, 0.0, -1.0]] * 2, atol=1e-12)
    np.testing.assert_allclose(normals[2:4], [[0.0, 0.0, 1.0]] * 2, atol=1e-12)
    walls = normals[4:]
    np.testing.assert_allclose(walls[:, 2], 0.0, atol=1e-12)
    radial = face_centroids(square_mesh)[4:, :2] - 5.0
    assert np.all(np.einsum("ij,ij->i", walls[:, :2], radial) > 0.0)


def test_interleaved_faces(square_mesh):
    inter = square_mesh.faces_interleaved
    assert inter.shape == (10, 6)
    np.testing.assert_array_equal(inter[:, 0::2], square_mesh.faces)
    np.testing.assert_array_equal(inter[:, 1::2], square_mesh.tex_faces)
    assert square_mesh.faces_flat.shape == (60,)
    assert square_mesh.points_flat.shape == (24,)
    assert square_mesh.tex_coords_flat.shape == (16,)


def test_exterior_walls_close_the_ring():
    walls = exterior_walls(4, 4)[:, 0::2].tolist()
    assert walls[-2:] == [[3, 0, 4], [3, 4, 7]]


def test_hole_walls_are_offset_and_reversed():
    walls = hole_walls(4, [4], 8)[:, 0::2].tolist()
    assert walls[:2] == [[4, 13, 5], [4, 12, 13]]
    assert walls[-2:] == [[7, 12, 4], [7, 15, 12]]


def test_square_with_hole(square, square_hole):
    region = PlanarRegion.from_config(square, MeshConfig(holes=[square_hole]))
    result = triangulate(region)
    mesh = build_prism(result, 2.0, region.bounds)
    assert mesh.num_vertices == 16
    assert mesh.num_faces == 2 * len(result.triangles) + 2 * 4 + 2 * 4

    normals = face_normals(mesh)
    centroids = face_centroids(mesh)
    hole_start = 2 * len(result.triangles) + 8
    ext = slice(2 * len(result.triangles), hole_start)
    radial = centroids[:, :2] - 5.0
    outward = np.einsum("ij,ij->i", normals[:, :2], radial)
    assert np.all(outward[ext] > 0.0)
    # hole rings wind clockwise, so their walls come out the other way round
    assert np.all(outward[hole_start:] > 0.0)
    np.testing.assert_allclose(normals[hole_start:, 2], 0.0, atol=1e-12)


def _hole_wall_facing(mesh, n_tris, center=(5.0, 5.0)):
    start = 2 * n_tris + 8
    normals = face_normals(mesh)[start:]
    radial = face_centroids(mesh)[start:, :2] - np.asarray(center)
    return np.sign(np.einsum("ij,ij->i", normals[:, :2], radial))


@pytest.mark.parametrize("hole_order", [1, -1])
def test_hole_walls_ignore_input_order(square, square_hole, hole_order):
    forward = PlanarRegion.from_config(square, MeshConfig(holes=[square_hole]))
    given = PlanarRegion.from_config(square, MeshConfig(holes=[square_hole[::hole_order]]))
    assert given.holes == forward.holes

    ref = triangulate(forward)
    res = triangulate(given)
    ref_mesh = build_prism(ref, 1.0, forward.bounds)
    mesh = build_prism(res, 1.0, given.bounds)
    np.testing.assert_array_equal(mesh.faces[2 * len(res.triangles):], ref_mesh.faces[2 * len(ref.triangles):])
    assert set(_hole_wall_facing(mesh, len(res.triangles)).tolist()) == {1.0}


def test_explicit_and_circular_holes_face_alike(square):
    region = PlanarRegion.from_config(square, MeshConfig(hole_radius=1.5))
    result = triangulate(region)
    mesh = build_prism(result, 1.0, region.bounds)
    assert set(_hole_wall_facing(mesh, len(result.triangles)).tolist()) == {1.0}
