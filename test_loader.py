# -*- coding: utf-8 -*-
import numpy as np
import pytest

from wfmesh import load_obj, Mat4
from wfmesh.mesh import MeshBuffers, Vertex
from wfmesh.math import Vec3
from wfmesh.utils.profiler import Profiler


def test_load_obj_returns_arrays(tmp_path, quad_obj):
    path = tmp_path / "quad.obj"
    path.write_text(quad_obj, encoding="utf-8")

    buffers, meta = load_obj(path)

    assert meta.num_triangles == 2
    assert buffers.positions.shape == (6, 3)
    assert buffers.normals.shape == (6, 3)
    assert buffers.colors.shape == (6, 4)
    assert buffers.texcoords.shape == (6, 2)
    assert buffers.indices.dtype == np.uint32
    assert buffers.indices.tolist() == [0, 1, 2, 3, 4, 5]
    assert np.allclose(buffers.normals, [0, 0, 1])
    assert np.allclose(buffers.colors, 1.0)


def test_load_obj_applies_transform(tmp_path, triangle_obj):
    path = tmp_path / "tri.obj"
    path.write_text(triangle_obj, encoding="utf-8")
    buffers, _ = load_obj(path, Mat4.translate(0, 0, 5))
    assert np.allclose(buffers.positions[:, 2], 5.0)


def test_interleaved_layout():
    vertices = [Vertex(Vec3(1, 2, 3)), Vertex(Vec3(4, 5, 6))]
    buffers = MeshBuffers.from_vertices(vertices, [0, 1])
    data = buffers.interleaved()
    assert data.dtype == np.float32
    assert data.shape == (2 * 12,)
    # pos(3) + normal(3) + color(4) + uv(2)
    assert data[:12].tolist() == [1, 2, 3, 1, 0, 0, 1, 1, 1, 1, 0, 0]


def test_bounding_sphere():
    vertices = [Vertex(Vec3(-1, 0, 0)), Vertex(Vec3(1, 0, 0))]
    centre, radius = MeshBuffers.from_vertices(vertices, [0, 1]).bounding_sphere
    assert np.allclose(centre, [0, 0, 0])
    assert radius == pytest.approx(1.0)


def test_bounding_sphere_empty():
    centre, radius = MeshBuffers.from_vertices([], []).bounding_sphere
    assert radius == 0.0


def test_vertex_copy_is_deep():
    v = Vertex(Vec3(1, 2, 3))
    c = v.copy()
    assert c == v
    c.position.x = 9.0
    assert v.position.x == 1.0


def test_profiler_measures_elapsed():
    with Profiler("noop") as prof:
        sum(range(1000))
    assert prof.elapsed >= 0.0
