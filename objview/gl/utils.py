"""GLFW window and PyOpenGL draw adapters.

:class:`GLPresenter` implements the rasterizer sink of
:class:`objview.gate.RenderGate` and :class:`GLTextOverlay` the text sink.
Both raise ``RuntimeError`` when OpenGL reports an error so that the gate
can retry the frame on the next tick.
"""

import logging
import warnings

import glfw
import numpy as np
import OpenGL.GL as gl
import OpenGL.GL.shaders as shaders

from ..utils.image import load_font, render_hud
from .shaders import get_object_shaders, get_overlay_shaders

# Module logger
logger = logging.getLogger(__name__)

CLEAR_COLOR = (0.0, 0.0, 1.0, 1.0)


def compile_shader_program(vertex_src, fragment_src):
    """Compile GLSL vertex and fragment sources and link them into a program.

    Parameters
    ----------
    vertex_src : str
        Vertex shader source code.
    fragment_src : str
        Fragment shader source code.

    Returns
    -------
    int
        OpenGL program handle.
    """
    return shaders.compileProgram(
        shaders.compileShader(vertex_src, gl.GL_VERTEX_SHADER),
        shaders.compileShader(fragment_src, gl.GL_FRAGMENT_SHADER),
    )


def check_gl_error(what):
    """Raise ``RuntimeError`` if OpenGL has a pending error."""
    err = gl.glGetError()
    if err != gl.GL_NO_ERROR:
        logger.error("OpenGL error after %s: %s", what, err)
        raise RuntimeError(f"OpenGL error after {what}: {err}")


def init_window(width, height, title="Obj viewer", visible=True):
    """Create a GLFW window with a 24-bit depth buffer and make its context current.

    Requests an OpenGL 3.3 Core Profile with ``FORWARD_COMPAT``.

    Parameters
    ----------
    width, height : int
        Window dimensions in pixels.
    title : str, optional, default 'Obj viewer'
        Window title.
    visible : bool, optional, default True
        If False create an invisible window.

    Returns
    -------
    window or False
        GLFW window handle on success, or False on failure.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        if not glfw.init():
            return False

    glfw.default_window_hints()
    glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
    glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
    glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)
    glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
    glfw.window_hint(glfw.DEPTH_BITS, 24)
    if not visible:
        glfw.window_hint(glfw.VISIBLE, glfw.FALSE)

    window = glfw.create_window(width, height, title, None, None)
    if not window:
        logger.debug("glfw.create_window failed for %sx%s", width, height)
        glfw.terminate()
        return False
    glfw.make_context_current(window)
    glfw.swap_interval(1)
    return window


class GLPresenter:
    """Draw a :class:`~objview.gate.Frame` into the current GLFW window.

    The mesh is uploaded once at construction; :meth:`present` only sets
    uniforms and issues one indexed draw.

    Parameters
    ----------
    window : GLFWwindow
        Window whose context is current.
    mesh : MeshData
        Geometry to upload.
    """

    def __init__(self, window, mesh):
        self.window = window
        # A bound VAO is needed before the program is validated on core profiles
        self.vao = gl.glGenVertexArrays(1)
        gl.glBindVertexArray(self.vao)
        vertex_shader, fragment_shader = get_object_shaders()
        self.program = compile_shader_program(vertex_shader, fragment_shader)

        meshdata = mesh.interleaved()
        triangles = np.ascontiguousarray(mesh.faces, dtype=np.uint32)
        self.vbo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, meshdata.nbytes, meshdata, gl.GL_STATIC_DRAW)
        self.ebo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        gl.glBufferData(gl.GL_ELEMENT_ARRAY_BUFFER, triangles.nbytes, triangles, gl.GL_STATIC_DRAW)

        stride = 6 * 4
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, gl.ctypes.c_void_p(0))
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, gl.ctypes.c_void_p(3 * 4))
        gl.glEnableVertexAttribArray(1)
        gl.glBindVertexArray(0)

        self._uniforms = {
            name: gl.glGetUniformLocation(self.program, name)
            for name in ("model", "offset", "view", "perspective", "u_light")
        }
        check_gl_error("mesh upload")

    def present(self, frame):
        width, height = glfw.get_framebuffer_size(self.window)
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDepthFunc(gl.GL_LESS)
        gl.glDepthMask(gl.GL_TRUE)

        gl.glUseProgram(self.program)
        gl.glUniformMatrix4fv(self._uniforms["model"], 1, gl.GL_FALSE, frame.model)
        gl.glUniform3f(self._uniforms["offset"], *frame.offset)
        gl.glUniformMatrix4fv(self._uniforms["view"], 1, gl.GL_FALSE, frame.view)
        gl.glUniformMatrix4fv(self._uniforms["perspective"], 1, gl.GL_FALSE, frame.projection)
        gl.glUniform3f(self._uniforms["u_light"], *frame.light)

        gl.glBindVertexArray(self.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, frame.mesh.faces.size, gl.GL_UNSIGNED_INT, None)
        gl.glBindVertexArray(0)
        check_gl_error("draw")

    def finish(self):
        glfw.swap_buffers(self.window)
        check_gl_error("swap")


class GLTextOverlay:
    """Draw HUD regions as a blended full-screen texture.

    The layout is rendered with Pillow (see
    :func:`objview.utils.image.render_hud`) at framebuffer size and
    uploaded into a texture every time :meth:`draw` is called.

    Parameters
    ----------
    window : GLFWwindow
        Window whose context is current.
    font_file : str or None, optional
        TrueType font for the HUD; Pillow's default font if None.
    font_size : int, optional
        Font size in pixels. Default is 18.
    """

    def __init__(self, window, font_file=None, font_size=18):
        self.window = window
        self.font = load_font(font_size, font_file)
        corners = np.array([-1, -1, 1, -1, -1, 1, 1, 1], dtype=np.float32)
        self.vao = gl.glGenVertexArrays(1)
        gl.glBindVertexArray(self.vao)
        vertex_shader, fragment_shader = get_overlay_shaders()
        self.program = compile_shader_program(vertex_shader, fragment_shader)
        self.vbo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, corners.nbytes, corners, gl.GL_STATIC_DRAW)
        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, 2 * 4, gl.ctypes.c_void_p(0))
        gl.glEnableVertexAttribArray(0)
        gl.glBindVertexArray(0)

        self.texture = gl.glGenTextures(1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        check_gl_error("overlay setup")

    def draw(self, layout):
        width, height = glfw.get_framebuffer_size(self.window)
        image = render_hud(layout, (width, height), self.font)
        pixels = np.asarray(image, dtype=np.uint8)

        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, width, height, 0,
            gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels,
        )

        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        gl.glUseProgram(self.program)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glUniform1i(gl.glGetUniformLocation(self.program, "hud"), 0)
        gl.glBindVertexArray(self.vao)
        gl.glDrawArrays(gl.GL_TRIANGLE_STRIP, 0, 4)
        gl.glBindVertexArray(0)
        gl.glDisable(gl.GL_BLEND)
        check_gl_error("overlay draw")
