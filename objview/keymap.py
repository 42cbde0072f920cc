"""GLFW keyboard bindings.

Camera keys sit on the digit row and the numeric keypad, object keys on
the letters and the navigation block::

    8 / 2      camera up / down          A / D      rotate left / right
    4 / 6      camera left / right       W / S      rotate up / down
    9 / 3      camera forward / back     Q / E      roll up / down
    5          reset camera              - / =      scale down / up
    Up / Down  move object -x / +x       PgUp/PgDn  move object +y / -y
    Left/Right move object -z / +z       Esc        quit (on release)
"""

import glfw

from .utils.types import Command, Signal

KEY_BINDINGS = {
    glfw.KEY_8: Command.VIEW_UP,
    glfw.KEY_2: Command.VIEW_DOWN,
    glfw.KEY_4: Command.VIEW_LEFT,
    glfw.KEY_6: Command.VIEW_RIGHT,
    glfw.KEY_9: Command.VIEW_FORWARD,
    glfw.KEY_3: Command.VIEW_BACKWARD,
    glfw.KEY_5: Command.RESET_VIEW,
    glfw.KEY_KP_8: Command.VIEW_UP,
    glfw.KEY_KP_2: Command.VIEW_DOWN,
    glfw.KEY_KP_4: Command.VIEW_LEFT,
    glfw.KEY_KP_6: Command.VIEW_RIGHT,
    glfw.KEY_KP_9: Command.VIEW_FORWARD,
    glfw.KEY_KP_3: Command.VIEW_BACKWARD,
    glfw.KEY_KP_5: Command.RESET_VIEW,
    glfw.KEY_A: Command.ROTATE_LEFT,
    glfw.KEY_D: Command.ROTATE_RIGHT,
    glfw.KEY_W: Command.ROTATE_UP,
    glfw.KEY_S: Command.ROTATE_DOWN,
    glfw.KEY_Q: Command.ROLL_UP,
    glfw.KEY_E: Command.ROLL_DOWN,
    glfw.KEY_MINUS: Command.SCALE_DOWN,
    glfw.KEY_EQUAL: Command.SCALE_UP,
    glfw.KEY_DOWN: Command.MOVE_X_POS,
    glfw.KEY_UP: Command.MOVE_X_NEG,
    glfw.KEY_PAGE_UP: Command.MOVE_Y_POS,
    glfw.KEY_PAGE_DOWN: Command.MOVE_Y_NEG,
    glfw.KEY_LEFT: Command.MOVE_Z_NEG,
    glfw.KEY_RIGHT: Command.MOVE_Z_POS,
}


def command_for_key(key, action):
    """Map a GLFW key event to a viewer event.

    Parameters
    ----------
    key : int
        GLFW key code.
    action : int
        ``glfw.PRESS``, ``glfw.REPEAT`` or ``glfw.RELEASE``.

    Returns
    -------
    Command, Signal or None
        The bound command on press/repeat, :attr:`Signal.EXIT` when Escape
        is released, otherwise None.
    """
    if action == glfw.RELEASE:
        return Signal.EXIT if key == glfw.KEY_ESCAPE else None
    return KEY_BINDINGS.get(key)
