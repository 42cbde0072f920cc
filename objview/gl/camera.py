"""Model, view and projection matrix builders.

All matrices are returned as 4x4 ``float32`` arrays in the layout that
``glUniformMatrix4fv(..., GL_FALSE, ...)`` expects (the same layout pyrr
uses): translation lives in the last row, and a point is transformed as
``[x, y, z, 1] @ matrix``.

The rendering convention is left-handed: the projection maps ``+z`` into
the screen. Meshes are converted once at load time, see
:func:`objview.geometry.convert_handedness`.
"""

import logging

import numpy as np
import pyrr

from .vecmath import cross, dot, normalize

# Module logger
logger = logging.getLogger(__name__)

FIELD_OF_VIEW = np.pi / 3.0
Z_NEAR = 0.1
Z_FAR = 1024.0
OBJECT_DEPTH = 2.0


def make_projection(width, height, fov=FIELD_OF_VIEW, near=Z_NEAR, far=Z_FAR):
    """Create a 4x4 perspective projection matrix.

    Parameters
    ----------
    width, height : int
        Viewport dimensions in pixels. ``width`` must be non-zero.
    fov : float, optional, default pi/3
        Field of view in radians.
    near, far : float, optional, default 0.1, 1024.0
        Near and far clipping planes.

    Returns
    -------
    numpy.ndarray
        4x4 float32 projection matrix.

    Raises
    ------
    ZeroDivisionError
        If ``width`` is zero.
    """
    aspect_ratio = height / width
    f = 1.0 / np.tan(fov / 2.0)
    return np.array([
        [f * aspect_ratio, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) / (far - near), 1.0],
        [0.0, 0.0, -(2.0 * far * near) / (far - near), 0.0],
    ], dtype=np.float32)


def make_view(position, direction, up):
    """Create the view matrix for a camera at ``position`` looking along ``direction``.

    Neither ``direction`` nor ``up`` needs to be normalized; ``up`` is
    re-orthogonalized against the viewing direction.

    Parameters
    ----------
    position : array-like
        Camera position in world space.
    direction : array-like
        Viewing direction.
    up : array-like
        Approximate up vector; must not be parallel to ``direction``.

    Returns
    -------
    numpy.ndarray
        4x4 float32 view matrix whose linear part is orthonormal.

    Raises
    ------
    ValueError
        If ``direction`` has zero length or ``up`` is parallel to it.
    """
    f = normalize(direction)
    try:
        s = normalize(cross(up, f))
    except ValueError as exc:
        raise ValueError(
            f"Camera up vector {list(up)!r} is parallel to direction {list(direction)!r}."
        ) from exc
    u = cross(f, s)

    t = (-dot(position, s), -dot(position, u), -dot(position, f))

    return np.array([
        [s[0], u[0], f[0], 0.0],
        [s[1], u[1], f[1], 0.0],
        [s[2], u[2], f[2], 0.0],
        [t[0], t[1], t[2], 1.0],
    ], dtype=np.float32)


def euler_rotation(roll, pitch, yaw):
    """Return the 4x4 rotation for roll about X, then pitch about Y, then yaw about Z.

    The column-vector rotation is ``Rz(yaw) @ Ry(pitch) @ Rx(roll)``; it is
    returned transposed to match the upload layout.
    """
    cr, sr = np.cos(roll), np.sin(roll)
    cp, sp = np.cos(pitch), np.sin(pitch)
    cy, sy = np.cos(yaw), np.sin(yaw)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
    ry = np.array([[cp, 0.0, sp], [0.0, 1.0, 0.0], [-sp, 0.0, cp]])
    rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])

    r4 = np.eye(4)
    r4[:3, :3] = (rz @ ry @ rx).T
    return r4


def make_model(rotation, scale, depth=OBJECT_DEPTH):
    """Build the object's model matrix from Euler angles and a uniform scale.

    The object position offset is *not* part of this matrix; it is passed
    to the shader separately (see :class:`objview.gate.Frame`).

    Parameters
    ----------
    rotation : sequence of float
        ``(roll, pitch, yaw)`` in radians.
    scale : float
        Uniform scaling factor. Zero yields a singular matrix.
    depth : float, optional, default 2.0
        Fixed translation along the projection axis.

    Returns
    -------
    numpy.ndarray
        4x4 float32 model matrix (rotation, then scale, then depth offset).
    """
    roll, pitch, yaw = rotation
    scale_matrix = pyrr.matrix44.create_from_scale([scale, scale, scale])
    depth_matrix = pyrr.matrix44.create_from_translation([0.0, 0.0, depth])
    model = euler_rotation(roll, pitch, yaw) @ scale_matrix @ depth_matrix
    logger.debug("Model matrix:\n%s", model)
    return np.asarray(model, dtype=np.float32)
