"""Mesh intake for the viewer.

Meshes arrive as in-memory arrays in a right-handed coordinate system.
:func:`prepare_mesh` validates their shapes, computes normals where none
are given, and converts positions and normals to the left-handed
convention used by the projection in :mod:`objview.gl.camera`.
"""

import logging
from dataclasses import dataclass

import numpy as np

# Module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class MeshData:
    """GPU-ready triangle mesh in the rendering convention.

    Attributes
    ----------
    vertices : numpy.ndarray
        (N, 3) float32 positions.
    normals : numpy.ndarray
        (N, 3) float32 unit normals.
    faces : numpy.ndarray
        (M, 3) uint32 triangle indices.
    """
    vertices: np.ndarray
    normals: np.ndarray
    faces: np.ndarray

    def interleaved(self):
        """Return (N, 6) float32 rows of ``x, y, z, nx, ny, nz``."""
        return np.ascontiguousarray(
            np.hstack([self.vertices, self.normals]), dtype=np.float32
        )


def convert_handedness(vertices, normals):
    """Convert right-handed positions and normals to the left-handed convention.

    Negates the Z component of both arrays, which equals a rotation by pi
    about X followed by a flip of Y.

    Parameters
    ----------
    vertices, normals : array-like
        (N, 3) arrays.

    Returns
    -------
    vertices, normals : numpy.ndarray
        New (N, 3) float32 arrays; the inputs are not modified.
    """
    flip = np.array([1.0, 1.0, -1.0], dtype=np.float32)
    vertices = np.asarray(vertices, dtype=np.float32) * flip
    normals = np.asarray(normals, dtype=np.float32) * flip
    return vertices, normals


def vertex_normals(v, t):
    """Compute area-weighted per-vertex normals from triangle connectivity.

    Parameters
    ----------
    v : numpy.ndarray
        Vertex coordinates (n_vertices, 3).
    t : numpy.ndarray
        Triangle indices (n_faces, 3).

    Returns
    -------
    numpy.ndarray
        Per-vertex unit normals (n_vertices, 3). Vertices that belong to
        no face keep a zero normal.
    """
    v = np.asarray(v, dtype=np.float64)
    t = np.asarray(t, dtype=np.int64)
    face_normals = np.cross(v[t[:, 1]] - v[t[:, 0]], v[t[:, 2]] - v[t[:, 0]])
    n = np.zeros_like(v)
    for corner in range(3):
        np.add.at(n, t[:, corner], face_normals)
    ln = np.linalg.norm(n, axis=1)
    ln[ln < np.finfo(float).eps] = 1.0
    return n / ln[:, None]


def prepare_mesh(mesh):
    """Resolve a mesh input to :class:`MeshData` in the rendering convention.

    Parameters
    ----------
    mesh : MeshData or tuple/list of array-likes
        Either an already prepared :class:`MeshData` (returned unchanged),
        a ``(vertices, faces)`` pair, or a ``(vertices, faces, normals)``
        triple, all in the right-handed source convention.

    Returns
    -------
    MeshData
        Converted mesh.

    Raises
    ------
    TypeError
        If *mesh* is neither :class:`MeshData` nor a 2- or 3-element
        tuple/list.
    ValueError
        If the arrays do not have the expected shapes or if face indices
        are out of range.
    """
    if isinstance(mesh, MeshData):
        return mesh
    if not isinstance(mesh, (tuple, list)) or len(mesh) not in (2, 3):
        raise TypeError(
            "mesh must be a (vertices, faces) or (vertices, faces, normals) "
            f"tuple/list, got {type(mesh).__name__!r}."
        )

    vertices = np.asarray(mesh[0], dtype=np.float32)
    faces = np.asarray(mesh[1], dtype=np.uint32)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(
            f"vertices must be an array of shape (N, 3), got shape {vertices.shape}."
        )
    if faces.ndim != 2 or faces.shape[1] != 3:
        raise ValueError(
            f"faces must be an array of shape (M, 3), got shape {faces.shape}."
        )
    if faces.size > 0 and int(faces.max()) >= vertices.shape[0]:
        raise ValueError(
            f"Face indices out of range [0, {vertices.shape[0]}): max={int(faces.max())}."
        )

    if len(mesh) == 3:
        normals = np.asarray(mesh[2], dtype=np.float32)
        if normals.shape != vertices.shape:
            raise ValueError(
                f"normals must match vertices shape {vertices.shape}, got {normals.shape}."
            )
    else:
        normals = vertex_normals(vertices, faces)

    vertices, normals = convert_handedness(vertices, normals)
    logger.debug("Prepared mesh: %d vertices, %d faces", vertices.shape[0], faces.shape[0])
    return MeshData(vertices=vertices, normals=normals, faces=faces)
