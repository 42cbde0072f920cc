"""objview: keyboard-driven 3-D mesh viewer with a numeric overlay.

objview keeps an object pose and a camera pose, turns them into model,
view and projection matrices, and redraws only when the pose changed.
It includes:

- **Pose state**: :class:`TransformState` with one mutator per key command
- **Matrix builders**: ``make_model``, ``make_view``, ``make_projection``
- **Render gate**: :class:`RenderGate`, dirty-flag gated redraw
- **HUD**: :func:`compose_hud` plus a Pillow text layout
- **Viewer**: :func:`show_window`, a GLFW/OpenGL window

For the interactive viewer::

    import numpy as np
    from objview import show_window

    vertices = np.load("mesh_vertices.npy")
    faces = np.load("mesh_faces.npy")
    show_window((vertices, faces))

Without a display, the state machine and matrices work on their own::

    from objview import TransformState, make_view

    state = TransformState()
    state.view_position_up()
    view = make_view(state.camera_position, state.camera_direction, state.camera_up)

The render gate takes any presenter with ``present(frame)`` and
``finish()``. :class:`objview.utils.image.ImageTextSink` keeps the HUD as
a Pillow image, so a whole frame can be produced headless::

    from objview import OverlayMode, RenderGate, prepare_mesh
    from objview.utils.image import ImageTextSink

    gate = RenderGate(state, prepare_mesh((vertices, faces)), presenter,
                      ImageTextSink((800, 600)), OverlayMode.WITH_OVERLAY)
    gate.tick()
    gate.text_sink.image.save("hud.png")

"""

from ._config import sys_info  # noqa: F401
from ._version import __version__  # noqa: F401
from .controller import Controller
from .gate import Frame, RenderGate
from .geometry import MeshData, convert_handedness, prepare_mesh
from .gl import make_model, make_projection, make_view
from .hud import HudLayout, HudRegion, compose_hud
from .state import PoseSnapshot, TransformState
from .utils.types import Command, OverlayMode, Signal

# The window needs GLFW and an OpenGL driver; the rest of the package does not.
try:
    from .viewer import show_window
    _has_viewer = True
except ImportError:
    _has_viewer = False

__all__ = [
    "__version__",
    "sys_info",
    "Command",
    "Controller",
    "Frame",
    "HudLayout",
    "HudRegion",
    "MeshData",
    "OverlayMode",
    "PoseSnapshot",
    "RenderGate",
    "Signal",
    "TransformState",
    "compose_hud",
    "convert_handedness",
    "make_model",
    "make_projection",
    "make_view",
    "prepare_mesh",
]

if _has_viewer:
    __all__.append("show_window")
