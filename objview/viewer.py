"""Interactive GLFW viewer.

Opens a window for a triangle mesh given as arrays, maps key presses to
pose commands and redraws at a fixed tick cadence whenever the pose
changed::

    import numpy as np
    from objview import show_window

    v = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=np.float32)
    f = np.array([[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]], dtype=np.uint32)
    show_window((v, f))

See :mod:`objview.keymap` for the key bindings.
"""

import logging

import glfw

from .controller import Controller
from .gate import RenderGate
from .geometry import prepare_mesh
from .gl.utils import GLPresenter, GLTextOverlay, init_window
from .hud import FONT_SIZE
from .keymap import command_for_key
from .state import TransformState
from .utils.types import OverlayMode, Signal

# Module logger
logger = logging.getLogger(__name__)

INTERACTIVE_TICK_HZ = 30.0
PASSIVE_TICK_HZ = 60.0


def initial_viewport(framebuffer_size, width, height):
    """Return the framebuffer size, or ``(width, height)`` if it has a zero side.

    A window that starts minimized reports a 0xN framebuffer.
    """
    fb_width, fb_height = framebuffer_size
    if fb_width > 0 and fb_height > 0:
        return fb_width, fb_height
    logger.debug("Framebuffer size %sx%s unusable, using %sx%s", fb_width, fb_height, width, height)
    return width, height


def show_window(
    mesh,
    width=800,
    height=600,
    title="Obj viewer",
    interactive=True,
    overlay=OverlayMode.WITH_OVERLAY,
    font_file=None,
    state=None,
):
    """Open a live OpenGL window showing ``mesh`` until it is closed.

    Parameters
    ----------
    mesh : MeshData or tuple of array-likes
        ``(vertices, faces)`` or ``(vertices, faces, normals)`` in a
        right-handed coordinate system, or prepared :class:`MeshData`.
    width, height : int, optional
        Initial window size in pixels. Defaults to (800×600).
    title : str, optional
        Window title. Default is ``'Obj viewer'``.
    interactive : bool, optional
        If True, key presses drive the pose and ticks run at 30 Hz. If
        False, only Escape is handled and ticks run at 60 Hz.
        Default is ``True``.
    overlay : OverlayMode, optional
        Whether to draw the numeric HUD. Default is
        ``OverlayMode.WITH_OVERLAY``.
    font_file : str or None, optional
        TrueType font for the HUD; Pillow's default font if None.
    state : TransformState or None, optional
        Initial pose; a fresh :class:`TransformState` if None.

    Returns
    -------
    TransformState
        The pose at the time the window was closed.

    Raises
    ------
    RuntimeError
        If the GLFW window or OpenGL context could not be created.
    ValueError, TypeError
        If ``mesh`` has invalid shapes or type.
    """
    mesh = prepare_mesh(mesh)
    if state is None:
        state = TransformState()

    window = init_window(width, height, title, visible=True)
    if not window:
        raise RuntimeError(
            "Could not create a GLFW window/context. OpenGL context unavailable."
        )

    try:
        presenter = GLPresenter(window, mesh)
        text_sink = None
        if overlay == OverlayMode.WITH_OVERLAY:
            text_sink = GLTextOverlay(window, font_file=font_file, font_size=int(FONT_SIZE))
        gate = RenderGate(
            state, mesh, presenter, text_sink, overlay,
            viewport=initial_viewport(glfw.get_framebuffer_size(window), width, height),
        )
        controller = Controller(state, gate)

        def _key_cb(win, key, _scancode, action, _mods):
            event = command_for_key(key, action)
            if event is None:
                return
            if event is Signal.EXIT or interactive:
                if not controller.handle(event):
                    glfw.set_window_should_close(win, True)

        def _framebuffer_size_cb(_win, fb_width, fb_height):
            if fb_width > 0 and fb_height > 0:
                gate.resize(fb_width, fb_height)

        glfw.set_key_callback(window, _key_cb)
        glfw.set_framebuffer_size_callback(window, _framebuffer_size_cb)

        tick_interval = 1.0 / (INTERACTIVE_TICK_HZ if interactive else PASSIVE_TICK_HZ)
        logger.info(
            "Loaded mesh: %d vertices, %d faces", mesh.vertices.shape[0], mesh.faces.shape[0]
        )
        if interactive:
            logger.info(
                "Keys: 8/2/4/6/9/3=camera 5=reset A/D/W/S=rotate Q/E=roll "
                "-/= scale arrows/PgUp/PgDn=move ESC=quit"
            )

        next_tick = glfw.get_time()
        while not glfw.window_should_close(window):
            glfw.wait_events_timeout(max(0.0, next_tick - glfw.get_time()))
            if glfw.get_time() < next_tick:
                continue
            next_tick = max(next_tick + tick_interval, glfw.get_time())
            if not controller.handle(Signal.TICK):
                break
    finally:
        glfw.terminate()

    return state
