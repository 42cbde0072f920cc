"""Enumerations shared across objview.

Dependencies:
    enum

"""

from enum import Enum


class Command(Enum):
    """Closed set of discrete viewer commands.

    Each value is the name of the :class:`~objview.state.TransformState`
    method that carries the command out.
    """
    VIEW_UP = "view_position_up"
    VIEW_DOWN = "view_position_down"
    VIEW_LEFT = "view_position_left"
    VIEW_RIGHT = "view_position_right"
    VIEW_FORWARD = "view_position_forward"
    VIEW_BACKWARD = "view_position_backward"
    RESET_VIEW = "reset_view"
    ROLL_UP = "roll_up"
    ROLL_DOWN = "roll_down"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    ROTATE_UP = "rotate_up"
    ROTATE_DOWN = "rotate_down"
    SCALE_UP = "scale_up"
    SCALE_DOWN = "scale_down"
    MOVE_X_POS = "move_x_pos"
    MOVE_X_NEG = "move_x_neg"
    MOVE_Y_POS = "move_y_pos"
    MOVE_Y_NEG = "move_y_neg"
    MOVE_Z_POS = "move_z_pos"
    MOVE_Z_NEG = "move_z_neg"


class Signal(Enum):
    TICK = 1
    EXIT = 2


class OverlayMode(Enum):
    WITH_OVERLAY = 1
    WITHOUT_OVERLAY = 2


class HorizontalAlign(Enum):
    LEFT = 1
    RIGHT = 2
