"""Movement arrows: pairing tails with heads and finding the clearance a curve needs.

A tail is a terminal annotated ``<name>``; its head is the constituent labelled
``_name``. Resolving a link marks the ancestor chains of both endpoints, takes
the first shared ancestor as the LCA and scans sideways from each endpoint
towards the other chain to find the lowest point the connecting curve must
pass beneath.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .logging_utils import apply_debug_logging
from .topology import siblings
from .tree import TreeNode

logger = logging.getLogger(__name__)


class ChainMark(enum.Flag):
    NONE = 0
    HEAD = enum.auto()
    TAIL = enum.auto()


ChainMarks = Dict[TreeNode, ChainMark]


@dataclass
class MovementLink:
    tail: TreeNode
    head: Optional[TreeNode] = None
    lca: Optional[TreeNode] = None
    should_draw: bool = False
    leftwards: bool = False
    max_y: Optional[float] = None  # clearance height
    dest_x: Optional[float] = None
    dest_y: Optional[float] = None
    bottom_y: Optional[float] = None
    marks: ChainMarks = field(default_factory=dict, repr=False, compare=False)


def find_head(node: TreeNode, label: str) -> Optional[TreeNode]:
    """Depth-first search for the node whose head label is ``label``.

    Descendants are searched before ``node`` itself; the first match wins.
    """
    for child in node.children:
        found = find_head(child, label)
        if found is not None:
            return found
    if node.head == label:
        return node
    return None


def find_movement(root: TreeNode) -> List[MovementLink]:
    """Create one unresolved link per tail-bearing node, in post-order."""
    links: List[MovementLink] = []

    def visit(node: TreeNode) -> None:
        for child in node.children:
            visit(child)
        if node.tail is not None:
            links.append(MovementLink(tail=node, head=find_head(root, node.tail)))

    visit(root)
    return links


def mark_tail_chain(tail: TreeNode, head: TreeNode, marks: ChainMarks) -> bool:
    """Mark ``tail`` and its ancestors. Returns False if ``head`` dominates ``tail``."""
    n = tail
    marks[n] = marks.get(n, ChainMark.NONE) | ChainMark.TAIL
    while n.parent is not None:
        n = n.parent
        if n is head:
            return False
        marks[n] = marks.get(n, ChainMark.NONE) | ChainMark.TAIL
    return True


def mark_head_chain(head: TreeNode, marks: ChainMarks) -> Optional[TreeNode]:
    """Mark ``head`` and its ancestors up to the first tail-marked one, the LCA."""
    n = head
    marks[n] = marks.get(n, ChainMark.NONE) | ChainMark.HEAD
    while n.parent is not None:
        n = n.parent
        marks[n] = marks.get(n, ChainMark.NONE) | ChainMark.HEAD
        if marks[n] & ChainMark.TAIL:
            return n
    return None


def intervening_height(node: TreeNode, leftwards: bool, marks: ChainMarks) -> float:
    """Deepest point between ``node`` and the other chain, scanning sideways then up."""
    max_y = node.y
    n: Optional[TreeNode] = node
    while n is not None:
        for sibling in siblings(n, leftwards):
            if marks.get(sibling, ChainMark.NONE):
                return max_y
            max_y = max(max_y, sibling.max_y)
        n = n.parent
        if n is not None:
            max_y = max(max_y, n.y)
    return max_y


def resolve_link(link: MovementLink, vertical_spacing: float) -> MovementLink:
    """Decide whether ``link`` can be drawn and compute where its curve runs."""
    link.should_draw = False
    link.lca = None
    link.marks = {}
    tail, head = link.tail, link.head
    if tail is None or head is None:
        logger.debug("Movement <%s> has no matching head", tail.tail if tail else None)
        return link

    marks: ChainMarks = {}
    link.marks = marks
    if not mark_tail_chain(tail, head, marks):
        logger.debug("Movement <%s> head dominates its tail", tail.tail)
        return link

    link.lca = mark_head_chain(head, marks)
    if link.lca is None:
        return link

    for child in link.lca.children:
        mark = marks.get(child, ChainMark.NONE)
        if mark:
            link.leftwards = bool(mark & ChainMark.HEAD)
            break

    link.max_y = max(
        intervening_height(tail, link.leftwards, marks),
        intervening_height(head, not link.leftwards, marks),
        head.max_y,
    )
    link.dest_x = head.x
    link.dest_y = head.max_y
    link.bottom_y = link.max_y + vertical_spacing
    link.should_draw = True
    return link


def resolve_movement(root: TreeNode, vertical_spacing: float) -> List[MovementLink]:
    links = find_movement(root)
    for link in links:
        resolve_link(link, vertical_spacing)
    logger.info(
        "Resolved %d movement link(s), %d drawable",
        len(links),
        sum(1 for link in links if link.should_draw),
    )
    return links


apply_debug_logging(globals(), logger=logger)
