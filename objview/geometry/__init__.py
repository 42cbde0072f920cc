"""Geometry subpackage: array mesh intake and handedness conversion."""
from .prepare import MeshData, convert_handedness, prepare_mesh, vertex_normals

__all__ = [
    'MeshData',
    'convert_handedness',
    'prepare_mesh',
    'vertex_normals',
]
