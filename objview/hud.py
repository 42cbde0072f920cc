"""Head-up display text for the viewer.

:func:`compose_hud` turns a pose into four text regions, one per window
corner, each with the layout directive a text renderer needs. No drawing
happens here; see :func:`objview.utils.image.render_hud`.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .utils.types import HorizontalAlign

FONT_SIZE = 18.0


@dataclass(frozen=True)
class HudRegion:
    """One block of overlay text.

    Attributes
    ----------
    text : str
        Plain text, possibly multi-line.
    position : tuple of float
        Anchor in pixels from the top-left corner of the viewport. For
        right-aligned regions this is where the text *ends*.
    align : HorizontalAlign
        Horizontal alignment relative to ``position``.
    bounds : tuple of float or None
        ``(width, height)`` the text is wrapped and clipped to, or
        ``None`` for a single unbounded line.
    """
    text: str
    position: tuple
    align: HorizontalAlign = HorizontalAlign.LEFT
    bounds: Optional[tuple] = None


class HudLayout(NamedTuple):
    top_left: HudRegion
    top_right: HudRegion
    bottom_left: HudRegion
    bottom_right: HudRegion


def _fmt(value):
    """Shortest decimal that round-trips the single-precision value."""
    return np.format_float_positional(np.float32(value), trim="-")


def compose_hud(pose, width, height, font_size=FONT_SIZE):
    """Compose the four HUD regions for ``pose``.

    Parameters
    ----------
    pose : TransformState or PoseSnapshot
        Pose to describe.
    width, height : int
        Viewport size in pixels.
    font_size : float, optional, default 18.0
        Line height used to anchor the bottom row.

    Returns
    -------
    HudLayout
        Object pose (top left), camera position (top right), scale factor
        (bottom left) and camera direction (bottom right).
    """
    width = float(width)
    height = float(height)
    bottom = height - (font_size + 1.0)

    x, y, z = (_fmt(c) for c in pose.object_position)
    rx, ry, rz = (_fmt(c) for c in pose.object_rotation)
    coordinates = f"(x={x}, y={y}, z={z})\n(rx={rx}, ry={ry}, rz={rz})"

    cx, cy, cz = (_fmt(c) for c in pose.camera_position)
    view_coordinates = f"(x={cx}, y={cy}, z={cz})"

    dx, dy, dz = (_fmt(c) for c in pose.camera_direction)

    return HudLayout(
        top_left=HudRegion(coordinates, (0.0, 0.0), HorizontalAlign.LEFT, (width, height / 2.0)),
        top_right=HudRegion(view_coordinates, (width, 0.0), HorizontalAlign.RIGHT, (width, height)),
        bottom_left=HudRegion(f"Scaling factor: {_fmt(pose.object_scale)}", (0.0, bottom)),
        bottom_right=HudRegion(
            f"Direction ({dx}, {dy}, {dz})", (width, bottom), HorizontalAlign.RIGHT
        ),
    )
