"""Tests for HUD composition and its Pillow rendering."""

import re

import numpy as np
import pytest
from PIL import Image

from objview.hud import HudLayout, HudRegion, compose_hud
from objview.state import TransformState
from objview.utils.image import (
    ImageTextSink,
    fit_text,
    load_font,
    render_hud,
    text_size,
)
from objview.utils.types import HorizontalAlign


@pytest.fixture(scope="module")
def font():
    return load_font(18)


# ---------------------------------------------------------------------------
# compose_hud
# ---------------------------------------------------------------------------

class TestComposeHud:
    def test_initial_pose_texts(self):
        layout = compose_hud(TransformState(), 800, 600)
        assert layout.top_left.text == "(x=0, y=0, z=0)\n(rx=0, ry=0, rz=0)"
        assert layout.top_right.text == "(x=3, y=1, z=1)"
        assert layout.bottom_left.text == "Scaling factor: 1"
        assert layout.bottom_right.text == "Direction (-3, -1, 1)"

    def test_positions_and_alignment(self):
        layout = compose_hud(TransformState(), 800, 600)
        assert layout.top_left.position == (0.0, 0.0)
        assert layout.top_left.bounds == (800.0, 300.0)
        assert layout.top_left.align == HorizontalAlign.LEFT
        assert layout.top_right.position == (800.0, 0.0)
        assert layout.top_right.bounds == (800.0, 600.0)
        assert layout.top_right.align == HorizontalAlign.RIGHT
        assert layout.bottom_left.position == (0.0, 581.0)
        assert layout.bottom_left.align == HorizontalAlign.LEFT
        assert layout.bottom_right.position == (800.0, 581.0)
        assert layout.bottom_right.align == HorizontalAlign.RIGHT

    def test_font_size_moves_bottom_row(self):
        layout = compose_hud(TransformState(), 640, 480, font_size=24.0)
        assert layout.bottom_left.position == (0.0, 455.0)

    def test_values_follow_pose(self):
        state = TransformState()
        state.view_position_up()
        state.move_z_neg()
        state.scale_down()
        state.roll_up()
        layout = compose_hud(state.snapshot(), 800, 600)
        assert layout.top_right.text == "(x=3, y=1.1, z=1)"
        assert layout.bottom_left.text == "Scaling factor: 0.5"
        assert layout.top_left.text.startswith("(x=0, y=0, z=-1)\n")
        rx = float(re.search(r"rx=([-0-9.e]+)", layout.top_left.text).group(1))
        assert rx == pytest.approx(np.pi / 20, abs=1e-6)

    def test_is_a_named_tuple_of_regions(self):
        layout = compose_hud(TransformState(), 800, 600)
        assert isinstance(layout, HudLayout)
        assert len(layout) == 4
        assert all(isinstance(region, HudRegion) for region in layout)


# ---------------------------------------------------------------------------
# Text fitting
# ---------------------------------------------------------------------------

class TestFitText:
    def test_unbounded_is_unchanged(self, font):
        assert fit_text("a b\nc", font, None) == "a b\nc"

    def test_wraps_to_width(self, font):
        width, _ = text_size("aaa bbb", font)
        assert fit_text("aaa bbb ccc", font, (width, 1000)) == "aaa bbb\nccc"

    def test_drops_lines_past_height(self, font):
        assert fit_text("one\ntwo", font, (1000, 0)) == ""
        _, one_line = text_size("one", font)
        kept = fit_text("one\ntwo\nthree", font, (1000, one_line))
        assert kept.split("\n")[0] == "one"
        assert "three" not in kept


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _has_ink(alpha, rows, cols):
    return bool(np.any(alpha[rows, cols] > 0))


class TestRenderHud:
    def test_text_lands_in_each_corner(self, font):
        layout = compose_hud(TransformState(), 800, 600)
        image = render_hud(layout, (800, 600), font)
        assert image.mode == "RGBA"
        assert image.size == (800, 600)
        alpha = np.asarray(image)[:, :, 3]
        assert _has_ink(alpha, slice(0, 60), slice(0, 200))
        assert _has_ink(alpha, slice(0, 40), slice(760, 800))
        assert _has_ink(alpha, slice(575, 600), slice(0, 200))
        assert _has_ink(alpha, slice(575, 600), slice(760, 800))
        assert not _has_ink(alpha, slice(200, 400), slice(250, 550))

    def test_right_aligned_text_ends_at_anchor(self, font):
        region = HudRegion("Direction (1, 2, 3)", (400.0, 10.0), HorizontalAlign.RIGHT)
        layout = HudLayout(region, HudRegion("", (0, 0)), HudRegion("", (0, 0)), HudRegion("", (0, 0)))
        alpha = np.asarray(render_hud(layout, (800, 100), font))[:, :, 3]
        columns = np.nonzero(alpha.any(axis=0))[0]
        assert columns.size > 0
        assert columns.max() <= 405
        assert columns.max() >= 380

    def test_default_font(self):
        layout = compose_hud(TransformState(), 320, 240)
        image = render_hud(layout, (320, 240))
        assert isinstance(image, Image.Image)


class TestImageTextSink:
    def test_keeps_last_image(self, font):
        sink = ImageTextSink((640, 480), font)
        assert sink.image is None
        sink.draw(compose_hud(TransformState(), 640, 480))
        assert sink.image.size == (640, 480)
        assert np.asarray(sink.image)[:, :, 3].any()


def test_load_font_missing_file_warns():
    with pytest.warns(UserWarning, match="could not be loaded"):
        font = load_font(12, "/nonexistent/font.ttf")
    assert font is not None
