from typing import Iterator, Optional

from .tree import TreeNode


def link_tree(node: TreeNode, parent: Optional[TreeNode] = None) -> TreeNode:
    """Set parent, first/last child and sibling links below ``node``.

    Safe to call again on an already linked tree.
    """
    node.parent = parent
    if parent is None:
        node.previous = None
        node.next = None
    for n in iter_nodes(node):
        children = n.children
        n.first = children[0] if children else None
        n.last = children[-1] if children else None
        for idx, child in enumerate(children):
            child.parent = n
            child.previous = children[idx - 1] if idx > 0 else None
            child.next = children[idx + 1] if idx + 1 < len(children) else None
    return node


def mark_triangles(node: TreeNode) -> None:
    """Flag every terminal whose parent is starred."""
    for n in iter_nodes(node):
        n.draw_triangle = (
            not n.has_children and n.parent is not None and n.parent.starred
        )


def iter_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Yield ``node`` and its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_ancestors(node: TreeNode) -> Iterator[TreeNode]:
    n = node.parent
    while n is not None:
        yield n
        n = n.parent


def siblings(node: TreeNode, leftwards: bool) -> Iterator[TreeNode]:
    n = node.previous if leftwards else node.next
    while n is not None:
        yield n
        n = n.previous if leftwards else n.next
