"""Backend-neutral draw operations for a laid-out tree."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from ..config import RenderOptions
from ..layout import is_collapsed_terminal
from ..movement import MovementLink
from ..topology import iter_nodes
from ..tree import TreeNode

Point = Tuple[float, float]

BLACK = "#000000"
TERMINAL_COLOR = "#008000"
NONTERMINAL_COLOR = "#0000ff"

ARROW_OFFSET = 3.0
ARROW_HALF_WIDTH = 3.0
ARROW_LENGTH = 10.0


@dataclass
class TextOp:
    x: float
    y: float  # baseline; text is centered on x
    text: str
    terminal: bool
    color: str = BLACK


@dataclass
class LineOp:
    points: List[Point]
    color: str = BLACK


@dataclass
class CurveOp:
    """Quadratic Bezier segment."""

    start: Point
    control: Point
    end: Point
    color: str = BLACK


@dataclass
class PolygonOp:
    points: List[Point]
    fill: str = BLACK


DrawOp = Union[TextOp, LineOp, CurveOp, PolygonOp]


@dataclass
class DrawPlan:
    width: float
    height: float
    x_shift: float
    y_shift: float
    ops: List[DrawOp] = field(default_factory=list)

    def of_type(self, kind: type) -> List[DrawOp]:
        return [op for op in self.ops if isinstance(op, kind)]


def canvas_size(root: TreeNode, links: Sequence[MovementLink], options: RenderOptions) -> Tuple[float, float]:
    width = root.left_width + root.right_width + 2 * options.margin
    height = root.max_y + options.font_size + 2 * options.margin
    # a curve dipping below the deepest node needs room underneath
    if any(link.max_y == root.max_y for link in links):
        height += options.vertical_spacing
    return width, height


def _text_color(node: TreeNode, options: RenderOptions) -> str:
    if not options.color:
        return BLACK
    return NONTERMINAL_COLOR if node.has_children else TERMINAL_COLOR


def _connector(node: TreeNode, options: RenderOptions, shift: Point) -> List[DrawOp]:
    parent = node.parent
    if parent is None:
        return []
    sx, sy = shift
    top = (parent.x + sx, parent.y + options.padding_below_text + sy)
    base_y = node.y - options.font_size - options.padding_above_text + sy
    if node.draw_triangle:
        return [
            LineOp([
                top,
                (node.x - node.left_width + sx, base_y),
                (node.x + node.right_width + sx, base_y),
                top,
            ])
        ]
    if is_collapsed_terminal(node, options.layout_options()):
        return []
    return [LineOp([top, (node.x + sx, base_y)])]


def movement_ops(link: MovementLink, options: RenderOptions, shift: Point) -> List[DrawOp]:
    """Two quadratic curves through the link's bottom and an arrowhead at the head."""
    sx, sy = shift
    tail_x = link.tail.x + ARROW_OFFSET
    dest_x = link.dest_x - ARROW_OFFSET
    if link.leftwards:
        tail_x -= 2 * ARROW_OFFSET
        dest_x += 2 * ARROW_OFFSET
    tail_y = link.tail.y + options.padding_below_text
    dest_y = link.dest_y + options.padding_below_text
    bottom_y = link.bottom_y
    mid_x = (tail_x + dest_x) / 2

    def p(x: float, y: float) -> Point:
        return (x + sx, y + sy)

    return [
        CurveOp(p(tail_x, tail_y), p(tail_x, bottom_y), p(mid_x, bottom_y)),
        CurveOp(p(mid_x, bottom_y), p(dest_x, bottom_y), p(dest_x, dest_y)),
        PolygonOp([
            p(dest_x + ARROW_HALF_WIDTH, dest_y + ARROW_LENGTH),
            p(dest_x - ARROW_HALF_WIDTH, dest_y + ARROW_LENGTH),
            p(dest_x, dest_y),
        ]),
    ]


def plan_drawing(root: TreeNode, links: Sequence[MovementLink], options: RenderOptions) -> DrawPlan:
    """Turn a laid-out tree and its resolved links into canvas-space operations."""
    width, height = canvas_size(root, links, options)
    x_shift = math.floor(root.left_width + options.margin)
    y_shift = math.floor(options.font_size + options.margin)
    shift = (x_shift, y_shift)
    plan = DrawPlan(width=width, height=height, x_shift=x_shift, y_shift=y_shift)

    for node in iter_nodes(root):
        plan.ops.append(
            TextOp(
                node.x + x_shift,
                node.y + y_shift,
                node.value,
                terminal=not node.has_children,
                color=_text_color(node, options),
            )
        )
        plan.ops.extend(_connector(node, options, shift))

    for link in links:
        if link.should_draw:
            plan.ops.extend(movement_ops(link, options, shift))
    return plan
