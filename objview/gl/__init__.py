"""Matrix builders, vector math and shader sources (gl package).

Pure-numpy helpers are re-exported at package level, e.g.:

    from objview.gl import make_model, make_projection, make_view

The GLFW/PyOpenGL adapters live in :mod:`objview.gl.utils` and are only
imported by the interactive viewer, so the math stays usable without an
OpenGL driver.
"""

from .camera import euler_rotation, make_model, make_projection, make_view
from .shaders import get_object_shaders, get_overlay_shaders
from .vecmath import cross, dot, normalize

__all__ = [
    'make_model', 'make_projection', 'make_view', 'euler_rotation',
    'normalize', 'cross', 'dot',
    'get_object_shaders', 'get_overlay_shaders',
]
