"""Dirty-gated redraw.

The :class:`RenderGate` is consulted once per tick. It draws only when the
pose changed since the last successful present, and clears the state's
redraw flag only after the frame was finished without error.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

from .geometry import MeshData
from .gl.camera import make_model, make_projection, make_view
from .hud import HudLayout, compose_hud
from .state import TransformState
from .utils.types import OverlayMode

# Module logger
logger = logging.getLogger(__name__)

LIGHT_DIRECTION = (1.4, 0.4, -0.7)


@dataclass(frozen=True, eq=False)
class Frame:
    """Everything the rasterizer needs to draw one frame."""
    model: np.ndarray
    offset: np.ndarray
    view: np.ndarray
    projection: np.ndarray
    light: np.ndarray
    mesh: MeshData


class FramePresenter(Protocol):
    """Rasterizer sink. Both methods raise ``RuntimeError`` on failure."""

    def present(self, frame: Frame) -> None: ...

    def finish(self) -> None: ...


class TextSink(Protocol):
    """Text-layout sink for the HUD. Raises ``RuntimeError`` on failure."""

    def draw(self, layout: HudLayout) -> None: ...


class RenderGate:
    """Decide once per tick whether to redraw, and draw if so.

    Parameters
    ----------
    state : TransformState
        Pose whose redraw flag drives the gate.
    mesh : MeshData
        Geometry handed to the presenter with every frame.
    presenter : FramePresenter
        Rasterizer sink.
    text_sink : TextSink or None, optional
        Receives the HUD layout; required with ``OverlayMode.WITH_OVERLAY``.
    overlay : OverlayMode, optional
        Whether frames carry the HUD. Default is ``OverlayMode.WITH_OVERLAY``.
    viewport : tuple of int, optional
        Initial ``(width, height)``. Default is ``(800, 600)``.
    """

    def __init__(
        self,
        state: TransformState,
        mesh: MeshData,
        presenter: FramePresenter,
        text_sink: Optional[TextSink] = None,
        overlay: OverlayMode = OverlayMode.WITH_OVERLAY,
        viewport=(800, 600),
    ):
        if overlay == OverlayMode.WITH_OVERLAY and text_sink is None:
            raise ValueError("OverlayMode.WITH_OVERLAY requires a text_sink.")
        self.state = state
        self.mesh = mesh
        self.presenter = presenter
        self.text_sink = text_sink
        self.overlay = overlay
        self.viewport = tuple(viewport)

    def resize(self, width, height):
        """Record a new viewport size and request a redraw."""
        self.viewport = (width, height)
        self.state.mark_dirty()

    def build_frame(self, pose):
        """Build the :class:`Frame` for a :class:`~objview.state.PoseSnapshot`."""
        width, height = self.viewport
        return Frame(
            model=make_model(pose.object_rotation, pose.object_scale),
            offset=np.asarray(pose.object_position, dtype=np.float32),
            view=make_view(pose.camera_position, pose.camera_direction, pose.camera_up),
            projection=make_projection(width, height),
            light=np.array(LIGHT_DIRECTION, dtype=np.float32),
            mesh=self.mesh,
        )

    def tick(self):
        """Redraw if the state is dirty.

        Returns
        -------
        bool
            True if a frame was presented, False if nothing needed drawing
            or the frame failed. A failed frame leaves the state dirty so
            the next tick retries.
        """
        if not self.state.is_dirty():
            return False

        pose = self.state.snapshot()
        frame = self.build_frame(pose)
        try:
            self.presenter.present(frame)
            if self.overlay == OverlayMode.WITH_OVERLAY:
                self.text_sink.draw(compose_hud(pose, *self.viewport))
            self.presenter.finish()
        except RuntimeError as exc:
            logger.error("Frame failed, retrying on next tick: %s", exc)
            return False

        self.state.reset_redraw_flag()
        return True
