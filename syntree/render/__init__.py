"""Draw-operation planning and the Pillow/TikZ backends."""

from .ops import CurveOp, DrawOp, DrawPlan, LineOp, PolygonOp, TextOp, canvas_size, plan_drawing
from .raster import DrawingSurfaceError, PillowTextMeasurer, encode_png, render_image
from .tikz import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    "CurveOp",
    "DrawOp",
    "DrawPlan",
    "LineOp",
    "PolygonOp",
    "TextOp",
    "canvas_size",
    "plan_drawing",
    "DrawingSurfaceError",
    "PillowTextMeasurer",
    "encode_png",
    "render_image",
    "generate_tikz_code",
    "generate_tikz_document",
    "latex_escape",
]
