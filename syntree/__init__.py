from .parser import parse_tree, parse_node
from .tree import TreeNode, Span
from .topology import link_tree, mark_triangles
from .layout import LayoutOptions, TextMeasurer, compute_widths, assign_locations, find_heights, layout_tree
from .movement import MovementLink, ChainMark, find_head, find_movement, resolve_link, resolve_movement
from .consistency import check_movement, MovementWarning
from .printer import format_tree, format_node
from .config import RenderOptions, get_render_options, set_render_options
from .pipeline import build_tree, render_tree, render_png, RenderResult
from .render import (
    DrawPlan,
    DrawingSurfaceError,
    PillowTextMeasurer,
    plan_drawing,
    render_image,
    encode_png,
    generate_tikz_code,
    generate_tikz_document,
    latex_escape,
)

__all__ = [
    'parse_tree',
    'parse_node',
    'TreeNode',
    'Span',
    'link_tree',
    'mark_triangles',
    'LayoutOptions',
    'TextMeasurer',
    'compute_widths',
    'assign_locations',
    'find_heights',
    'layout_tree',
    'MovementLink',
    'ChainMark',
    'find_head',
    'find_movement',
    'resolve_link',
    'resolve_movement',
    'check_movement',
    'MovementWarning',
    'format_tree',
    'format_node',
    'RenderOptions',
    'get_render_options',
    'set_render_options',
    'build_tree',
    'render_tree',
    'render_png',
    'RenderResult',
    'DrawPlan',
    'DrawingSurfaceError',
    'PillowTextMeasurer',
    'plan_drawing',
    'render_image',
    'encode_png',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape',
]
