"""Pillow backend: measures text and paints a :class:`DrawPlan` onto an RGB image."""

from __future__ import annotations

import io
import logging
import math
from typing import Dict, List, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..config import RenderOptions
from .ops import CurveOp, DrawPlan, LineOp, Point, PolygonOp, TextOp

logger = logging.getLogger(__name__)

BACKGROUND = "#ffffff"
CURVE_SAMPLES = 32

FontType = ImageFont.FreeTypeFont


class DrawingSurfaceError(RuntimeError):
    """Raised when no font or drawing surface can be set up."""


def load_font(name: str, size: int) -> FontType:
    """Load ``name`` at ``size`` px, falling back to Pillow's bundled font."""
    try:
        return ImageFont.truetype(name, size)
    except (OSError, ImportError):
        logger.warning("Font %r unavailable, using Pillow default", name)
    try:
        return ImageFont.load_default(size=size)
    except (OSError, ImportError, TypeError) as exc:
        raise DrawingSurfaceError(f"no scalable font available for {name!r}") from exc


class PillowTextMeasurer:
    """``TextMeasurer`` backed by Pillow fonts."""

    def __init__(self, options: RenderOptions) -> None:
        self.term_font = load_font(options.term_font, options.font_size)
        self.nonterm_font = load_font(options.nonterm_font, options.font_size)
        self._cache: Dict[Tuple[str, bool], float] = {}

    def font(self, terminal: bool) -> FontType:
        return self.term_font if terminal else self.nonterm_font

    def text_width(self, text: str, terminal: bool) -> float:
        key = (text, terminal)
        if key not in self._cache:
            self._cache[key] = float(self.font(terminal).getlength(text))
        return self._cache[key]


def quadratic_points(start: Point, control: Point, end: Point, samples: int = CURVE_SAMPLES) -> List[Point]:
    t = np.linspace(0.0, 1.0, samples)[:, None]
    p0, p1, p2 = (np.asarray(p, dtype=float) for p in (start, control, end))
    curve = (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2
    return [(float(x), float(y)) for x, y in curve]


def render_image(plan: DrawPlan, measurer: PillowTextMeasurer) -> Image.Image:
    size = (max(1, math.ceil(plan.width)), max(1, math.ceil(plan.height)))
    try:
        image = Image.new("RGB", size, BACKGROUND)
        draw = ImageDraw.Draw(image)
    except (ValueError, MemoryError) as exc:
        raise DrawingSurfaceError(f"cannot allocate a {size[0]}x{size[1]} canvas") from exc

    for op in plan.ops:
        if isinstance(op, TextOp):
            draw.text((op.x, op.y), op.text, fill=op.color, font=measurer.font(op.terminal), anchor="ms")
        elif isinstance(op, LineOp):
            draw.line(op.points, fill=op.color, width=1)
        elif isinstance(op, CurveOp):
            draw.line(quadratic_points(op.start, op.control, op.end), fill=op.color, width=1)
        elif isinstance(op, PolygonOp):
            draw.polygon(op.points, fill=op.fill)
        else:
            raise TypeError(f"unsupported draw operation {op!r}")
    return image


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()
