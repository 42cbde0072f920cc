"""Text layout helpers that draw HUD regions with Pillow.
"""
import logging
import warnings

from PIL import Image, ImageDraw, ImageFont

from objview.utils.types import HorizontalAlign

# Module logger
logger = logging.getLogger(__name__)

LINE_SPACING = 4
TEXT_COLOR = (255, 255, 255, 255)


def load_font(size=18, font_file=None):
    """Load a TrueType font, falling back to Pillow's default font.

    Parameters
    ----------
    size : int, optional
        Font size in pixels. Default is 18.
    font_file : str or None, optional
        Path to a ``.ttf`` file. If None or unreadable, Pillow's bundled
        default font is used at ``size``.

    Returns
    -------
    PIL.ImageFont.FreeTypeFont or PIL.ImageFont.ImageFont
    """
    if font_file is not None:
        try:
            return ImageFont.truetype(font_file, int(size))
        except OSError:
            warnings.warn(
                f"Font {font_file!r} could not be loaded; falling back to default font",
                UserWarning,
            )
    return ImageFont.load_default(size=int(size))


def text_size(text, font):
    """Return text width and height in pixels."""
    dummy_img = Image.new("L", (1, 1))
    draw = ImageDraw.Draw(dummy_img)
    bbox = draw.multiline_textbbox((0, 0), text, font=font, spacing=LINE_SPACING)
    return bbox[2] - bbox[0], bbox[3] - bbox[1]


def _wrap_line(line, font, max_width):
    """Greedy word wrap of a single line to ``max_width`` pixels."""
    words = line.split(" ")
    lines = [words[0]]
    for word in words[1:]:
        candidate = f"{lines[-1]} {word}"
        if text_size(candidate, font)[0] <= max_width:
            lines[-1] = candidate
        else:
            lines.append(word)
    return lines


def fit_text(text, font, bounds):
    """Wrap ``text`` to the bounds width and drop lines past the bounds height.

    Parameters
    ----------
    text : str
        Possibly multi-line text.
    font : PIL.ImageFont
        Font used for measuring.
    bounds : tuple of float or None
        ``(width, height)`` in pixels; None returns ``text`` unchanged.

    Returns
    -------
    str
        Text that fits into ``bounds``.
    """
    if bounds is None:
        return text
    max_width, max_height = bounds
    lines = []
    for line in text.split("\n"):
        lines.extend(_wrap_line(line, font, max_width))

    kept = []
    for line in lines:
        if text_size("\n".join(kept + [line]), font)[1] > max_height:
            break
        kept.append(line)
    return "\n".join(kept)


def draw_region(draw, region, font, color=TEXT_COLOR):
    """Draw one :class:`~objview.hud.HudRegion` onto a Pillow ``ImageDraw``."""
    text = fit_text(region.text, font, region.bounds)
    if not text:
        return
    x, y = region.position
    align = "left"
    if region.align == HorizontalAlign.RIGHT:
        width, _ = text_size(text, font)
        x -= width
        align = "right"
    draw.multiline_text(
        (int(x), int(y)), text, fill=color, font=font, spacing=LINE_SPACING, align=align
    )


def render_hud(layout, size, font=None, color=TEXT_COLOR):
    """Lay out all HUD regions on a transparent RGBA image.

    Parameters
    ----------
    layout : HudLayout
        Regions returned by :func:`objview.hud.compose_hud`.
    size : tuple of int
        ``(width, height)`` of the image in pixels.
    font : PIL.ImageFont or None, optional
        Font to use; :func:`load_font` defaults if None.
    color : tuple, optional
        RGBA text color. Default is opaque white.

    Returns
    -------
    PIL.Image.Image
        RGBA image, transparent where there is no text.
    """
    font = font or load_font()
    image = Image.new("RGBA", (int(size[0]), int(size[1])), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    for region in layout:
        draw_region(draw, region, font, color)
    logger.debug("Rendered HUD image %sx%s", image.width, image.height)
    return image


class ImageTextSink:
    """Text sink that keeps the most recently rendered HUD as a Pillow image.

    Parameters
    ----------
    size : tuple of int
        Image size in pixels.
    font : PIL.ImageFont or None, optional
        Font to use; defaults to :func:`load_font`.
    """

    def __init__(self, size, font=None):
        self.size = tuple(size)
        self.font = font or load_font()
        self.image = None

    def draw(self, layout):
        self.image = render_hud(layout, self.size, self.font)
