"""Object and camera pose with change tracking.

:class:`TransformState` is the single source of truth for everything the
user can change from the keyboard. Every mutator moves exactly one field
by a fixed step and marks the state dirty; the render gate clears the flag
once a frame showing the new pose has been presented.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from .gl.camera import make_view
from .utils.types import Command

# Module logger
logger = logging.getLogger(__name__)

INITIAL_CAMERA_POSITION = (3.0, 1.0, 1.0)
INITIAL_CAMERA_DIRECTION = (-3.0, -1.0, 1.0)
INITIAL_CAMERA_UP = (0.0, 1.0, 0.0)

CAMERA_VERTICAL_STEP = 0.1
CAMERA_HORIZONTAL_STEP = 0.2
ROTATION_STEP = np.pi / 20.0
SCALE_FACTOR = 2.0
TRANSLATION_STEP = 1.0


@dataclass(frozen=True)
class PoseSnapshot:
    """Immutable copy of a :class:`TransformState` pose."""
    object_position: np.ndarray
    object_rotation: np.ndarray
    object_scale: float
    camera_position: np.ndarray
    camera_direction: np.ndarray
    camera_up: np.ndarray


@dataclass(eq=False)
class TransformState:
    """Mutable object pose, camera pose and redraw flag.

    Attributes
    ----------
    object_position : np.ndarray
        Offset of the object in world units; added in the vertex shader.
    rotation_steps : list of int
        Signed (roll, pitch, yaw) step counts. Counting whole steps keeps
        opposite rotations exact inverses of each other.
    object_scale : float
        Multiplicative scale; never clamped, so repeated halving can
        reach 0.0.
    camera_position, camera_direction, camera_up : np.ndarray
        Camera pose. The direction is normalized only when the view
        matrix is built.
    dirty : bool
        True while a pose change has not been presented. A new state
        starts dirty so that the first tick draws.
    """
    object_position: np.ndarray = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    rotation_steps: list = field(default_factory=lambda: [0, 0, 0])
    object_scale: float = 1.0
    camera_position: np.ndarray = field(
        default_factory=lambda: np.array(INITIAL_CAMERA_POSITION, dtype=np.float64)
    )
    camera_direction: np.ndarray = field(
        default_factory=lambda: np.array(INITIAL_CAMERA_DIRECTION, dtype=np.float64)
    )
    camera_up: np.ndarray = field(
        default_factory=lambda: np.array(INITIAL_CAMERA_UP, dtype=np.float64)
    )
    dirty: bool = True

    @property
    def object_rotation(self):
        """(roll, pitch, yaw) in radians, not wrapped."""
        return np.array(self.rotation_steps, dtype=np.float64) * ROTATION_STEP

    # ------------------------------------------------------------------
    # Redraw flag
    # ------------------------------------------------------------------

    def is_dirty(self):
        return self.dirty

    def mark_dirty(self):
        """Request a redraw without changing the pose (e.g. after a resize)."""
        self.dirty = True

    def reset_redraw_flag(self):
        """Clear the redraw flag; called by the render gate after a present."""
        self.dirty = False

    # ------------------------------------------------------------------
    # Dispatch and snapshots
    # ------------------------------------------------------------------

    def apply(self, command):
        """Carry out a :class:`~objview.utils.types.Command`."""
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {command!r}.")
        getattr(self, command.value)()
        logger.debug("%s -> dirty=%s", command.name, self.dirty)

    def snapshot(self):
        """Return a :class:`PoseSnapshot` that later mutations cannot alter."""
        return PoseSnapshot(
            object_position=self.object_position.copy(),
            object_rotation=self.object_rotation.copy(),
            object_scale=float(self.object_scale),
            camera_position=self.camera_position.copy(),
            camera_direction=self.camera_direction.copy(),
            camera_up=self.camera_up.copy(),
        )

    # ------------------------------------------------------------------
    # Camera
    # ------------------------------------------------------------------

    def reset_view(self):
        self.camera_position = np.array(INITIAL_CAMERA_POSITION, dtype=np.float64)
        self.camera_direction = np.array(INITIAL_CAMERA_DIRECTION, dtype=np.float64)
        self.camera_up = np.array(INITIAL_CAMERA_UP, dtype=np.float64)
        self.dirty = True

    def set_camera(self, position, direction, up):
        """Replace the whole camera pose.

        Raises
        ------
        ValueError
            If ``direction`` is zero-length or parallel to ``up``. The
            state is left untouched in that case.
        """
        make_view(position, direction, up)
        self.camera_position = np.array(position, dtype=np.float64)
        self.camera_direction = np.array(direction, dtype=np.float64)
        self.camera_up = np.array(up, dtype=np.float64)
        self.dirty = True

    def view_position_up(self):
        self.camera_position[1] += CAMERA_VERTICAL_STEP
        self.dirty = True

    def view_position_down(self):
        self.camera_position[1] -= CAMERA_VERTICAL_STEP
        self.dirty = True

    def view_position_forward(self):
        self.camera_position[0] -= CAMERA_HORIZONTAL_STEP
        self.dirty = True

    def view_position_backward(self):
        self.camera_position[0] += CAMERA_HORIZONTAL_STEP
        self.dirty = True

    def view_position_left(self):
        self.camera_position[2] += CAMERA_HORIZONTAL_STEP
        self.dirty = True

    def view_position_right(self):
        self.camera_position[2] -= CAMERA_HORIZONTAL_STEP
        self.dirty = True

    # ------------------------------------------------------------------
    # Object rotation and scale
    # ------------------------------------------------------------------

    def _rotate(self, axis, steps):
        self.rotation_steps[axis] += steps
        self.dirty = True

    def roll_up(self):
        self._rotate(0, 1)

    def roll_down(self):
        self._rotate(0, -1)

    def rotate_left(self):
        self._rotate(1, 1)

    def rotate_right(self):
        self._rotate(1, -1)

    def rotate_up(self):
        self._rotate(2, 1)

    def rotate_down(self):
        self._rotate(2, -1)

    def scale_up(self):
        self.object_scale *= SCALE_FACTOR
        self.dirty = True

    def scale_down(self):
        self.object_scale /= SCALE_FACTOR
        self.dirty = True

    # ------------------------------------------------------------------
    # Object translation
    # ------------------------------------------------------------------

    def _move(self, axis, step):
        self.object_position[axis] += step
        self.dirty = True

    def move_x_pos(self):
        self._move(0, TRANSLATION_STEP)

    def move_x_neg(self):
        self._move(0, -TRANSLATION_STEP)

    def move_y_pos(self):
        self._move(1, TRANSLATION_STEP)

    def move_y_neg(self):
        self._move(1, -TRANSLATION_STEP)

    def move_z_pos(self):
        self._move(2, TRANSLATION_STEP)

    def move_z_neg(self):
        self._move(2, -TRANSLATION_STEP)
