"""Width propagation and coordinate assignment for syntax trees."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from .tree import TreeNode

logger = logging.getLogger(__name__)


class TextMeasurer(Protocol):
    def text_width(self, text: str, terminal: bool) -> float:
        """Return the pixel width of ``text`` in the terminal or nonterminal font."""


@dataclass
class LayoutOptions:
    font_size: float = 12
    vertical_spacing: float = 40
    horizontal_spacing: float = 10
    padding_above_text: float = 6
    padding_below_text: float = 6
    term_lines: bool = False


def compute_widths(node: TreeNode, measurer: TextMeasurer, options: LayoutOptions) -> None:
    """Bottom-up pass setting half-widths and the child step."""
    val_width = measurer.text_width(node.value, not node.has_children)

    for child in node.children:
        compute_widths(child, measurer, options)

    if not node.has_children:
        node.left_width = val_width / 2
        node.right_width = val_width / 2
        node.step = 0.0
        return

    # Children are spaced evenly, as far apart as the widest adjacent pair needs.
    node.step = 0.0
    child = node.first
    while child is not None and child.next is not None:
        space = child.right_width + options.horizontal_spacing + child.next.left_width
        node.step = max(node.step, space)
        child = child.next

    sub = ((len(node.children) - 1) / 2) * node.step
    node.left_width = max(sub + node.first.left_width, val_width / 2)
    node.right_width = max(sub + node.last.right_width, val_width / 2)


def is_collapsed_terminal(node: TreeNode, options: LayoutOptions) -> bool:
    """True for a sole terminal child drawn directly under its parent without a line."""
    return (
        not node.has_children
        and node.parent is not None
        and not options.term_lines
        and len(node.parent.children) == 1
        and not node.draw_triangle
    )


def assign_locations(node: TreeNode, x: float, y: float, options: LayoutOptions) -> None:
    """Top-down pass placing ``node`` at the anchor ``(x, y)``."""
    # floor + 0.5 keeps one-pixel lines crisp
    node.x = math.floor(x) + 0.5
    node.y = math.floor(y) + 0.5

    if node.has_children:
        left_start = x - node.step * ((len(node.children) - 1) / 2)
        for i, child in enumerate(node.children):
            assign_locations(child, left_start + i * node.step, y + options.vertical_spacing, options)
    elif is_collapsed_terminal(node, options):
        node.y = (
            node.parent.y
            + options.padding_above_text
            + options.padding_below_text
            + options.font_size
        )


def find_heights(node: TreeNode) -> float:
    node.max_y = node.y
    for child in node.children:
        node.max_y = max(node.max_y, find_heights(child))
    return node.max_y


def layout_tree(root: TreeNode, measurer: TextMeasurer, options: LayoutOptions) -> TreeNode:
    compute_widths(root, measurer, options)
    assign_locations(root, 0, 0, options)
    find_heights(root)
    logger.debug(
        "Laid out tree: left=%.1f right=%.1f max_y=%.1f",
        root.left_width,
        root.right_width,
        root.max_y,
    )
    return root
