"""End-to-end rendering: parse, link, lay out, resolve movement, plan drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import RenderOptions, get_render_options
from .layout import TextMeasurer, layout_tree
from .movement import MovementLink, resolve_movement
from .parser import parse_tree
from .render.ops import DrawPlan, plan_drawing
from .render.raster import PillowTextMeasurer, encode_png, render_image
from .topology import link_tree, mark_triangles
from .tree import TreeNode

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    tree: TreeNode
    links: List[MovementLink] = field(default_factory=list)
    plan: Optional[DrawPlan] = None
    measurer: Optional[TextMeasurer] = None


def build_tree(text: str) -> TreeNode:
    """Parse ``text`` and run the topology and triangle passes."""
    root = parse_tree(text)
    link_tree(root)
    mark_triangles(root)
    return root


def render_tree(
    text: str,
    options: Optional[RenderOptions] = None,
    measurer: Optional[TextMeasurer] = None,
) -> RenderResult:
    """Run the whole pipeline for one input string.

    Every call builds its own tree, so results are never shared between calls.
    When ``measurer`` is omitted, fonts are loaded with Pillow.
    """
    options = (options or get_render_options()).validate()
    if measurer is None:
        measurer = PillowTextMeasurer(options)

    root = build_tree(text)
    layout_tree(root, measurer, options.layout_options())
    links = resolve_movement(root, options.vertical_spacing)
    plan = plan_drawing(root, links, options)
    logger.info(
        "Planned %.0fx%.0f canvas with %d draw operation(s)",
        plan.width,
        plan.height,
        len(plan.ops),
    )
    return RenderResult(tree=root, links=links, plan=plan, measurer=measurer)


def render_png(text: str, options: Optional[RenderOptions] = None) -> bytes:
    """Render bracket notation straight to PNG bytes."""
    result = render_tree(text, options)
    return encode_png(render_image(result.plan, result.measurer))
