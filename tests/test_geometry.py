"""Tests for mesh intake: validation, normals and handedness conversion."""

import numpy as np
import pytest

from objview.geometry import MeshData, convert_handedness, prepare_mesh
from objview.geometry.prepare import vertex_normals

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tetra():
    v = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=np.float32)
    f = np.array([[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]], dtype=np.uint32)
    return v, f


# ---------------------------------------------------------------------------
# convert_handedness
# ---------------------------------------------------------------------------

class TestConvertHandedness:
    def test_negates_z_of_positions_and_normals(self):
        v, n = convert_handedness([[1.0, 2.0, 3.0]], [[0.0, 0.0, 1.0]])
        np.testing.assert_array_equal(v, [[1.0, 2.0, -3.0]])
        np.testing.assert_array_equal(n, [[0.0, 0.0, -1.0]])

    def test_inputs_untouched_and_twice_is_identity(self):
        rng = np.random.default_rng(0)
        v0 = rng.normal(size=(10, 3)).astype(np.float32)
        n0 = rng.normal(size=(10, 3)).astype(np.float32)
        v_copy, n_copy = v0.copy(), n0.copy()
        v1, n1 = convert_handedness(*convert_handedness(v0, n0))
        np.testing.assert_array_equal(v0, v_copy)
        np.testing.assert_array_equal(n0, n_copy)
        np.testing.assert_array_equal(v1, v0)
        np.testing.assert_array_equal(n1, n0)

    def test_preserves_unit_length(self):
        n = np.array([[0.6, 0.0, 0.8], [0.0, 1.0, 0.0]], dtype=np.float32)
        _, converted = convert_handedness(np.zeros_like(n), n)
        np.testing.assert_allclose(np.linalg.norm(converted, axis=1), 1.0, rtol=1e-6)


# ---------------------------------------------------------------------------
# vertex_normals
# ---------------------------------------------------------------------------

class TestVertexNormals:
    def test_flat_triangle(self):
        v = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float32)
        n = vertex_normals(v, np.array([[0, 1, 2]]))
        np.testing.assert_allclose(n, [[0, 0, 1]] * 3, atol=1e-12)

    def test_unreferenced_vertex_keeps_zero(self):
        v = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [5, 5, 5]], dtype=np.float32)
        n = vertex_normals(v, np.array([[0, 1, 2]]))
        np.testing.assert_array_equal(n[3], [0, 0, 0])

    def test_unit_length(self):
        v, f = _tetra()
        n = vertex_normals(v, f)
        np.testing.assert_allclose(np.linalg.norm(n, axis=1), 1.0, rtol=1e-9)


# ---------------------------------------------------------------------------
# prepare_mesh
# ---------------------------------------------------------------------------

class TestPrepareMesh:
    def test_pair_computes_and_converts_normals(self):
        v = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float64)
        mesh = prepare_mesh((v, [[0, 1, 2]]))
        assert isinstance(mesh, MeshData)
        assert mesh.vertices.dtype == np.float32
        assert mesh.normals.dtype == np.float32
        assert mesh.faces.dtype == np.uint32
        np.testing.assert_allclose(mesh.normals, [[0, 0, -1]] * 3, atol=1e-6)

    def test_triple_uses_given_normals(self):
        v, f = _tetra()
        normals = np.tile([0.0, 1.0, 1.0], (4, 1))
        mesh = prepare_mesh([v, f, normals])
        np.testing.assert_array_equal(mesh.normals, np.tile([0.0, 1.0, -1.0], (4, 1)))
        np.testing.assert_array_equal(mesh.vertices[:, 2], -v[:, 2])

    def test_mesh_data_passes_through(self):
        mesh = prepare_mesh(_tetra())
        assert prepare_mesh(mesh) is mesh

    def test_interleaved(self):
        mesh = prepare_mesh(_tetra())
        data = mesh.interleaved()
        assert data.shape == (4, 6)
        assert data.dtype == np.float32
        assert data.flags["C_CONTIGUOUS"]
        np.testing.assert_array_equal(data[:, :3], mesh.vertices)
        np.testing.assert_array_equal(data[:, 3:], mesh.normals)

    @pytest.mark.parametrize("bad", [
        np.zeros((4, 3)),
        (np.zeros((4, 3)),),
        (np.zeros((4, 3)), np.zeros((1, 3)), np.zeros((4, 3)), None),
        "mesh.obj",
    ])
    def test_wrong_container_raises_type_error(self, bad):
        with pytest.raises(TypeError):
            prepare_mesh(bad)

    def test_bad_vertex_shape(self):
        with pytest.raises(ValueError, match="vertices"):
            prepare_mesh((np.zeros((4, 2)), [[0, 1, 2]]))

    def test_bad_face_shape(self):
        with pytest.raises(ValueError, match="faces"):
            prepare_mesh((np.zeros((4, 3)), [[0, 1, 2, 3]]))

    def test_face_index_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            prepare_mesh((np.zeros((3, 3)), [[0, 1, 3]]))

    def test_normal_shape_mismatch(self):
        with pytest.raises(ValueError, match="normals"):
            prepare_mesh((np.zeros((3, 3)), [[0, 1, 2]], np.zeros((2, 3))))

    def test_empty_faces_allowed(self):
        mesh = prepare_mesh((np.zeros((3, 3)), np.zeros((0, 3))))
        assert mesh.faces.shape == (0, 3)
        np.testing.assert_array_equal(mesh.normals, np.zeros((3, 3)))
