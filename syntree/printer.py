from typing import List

from .lexer import has_tail_annotation, is_numeric_label, subscriptify
from .tree import TreeNode


def base_label(node: TreeNode) -> str:
    """Return the constituent label without its subscript suffix."""
    value = node.value
    if node.head is not None and is_numeric_label(node.head):
        suffix = subscriptify(node.head)
        if value.endswith(suffix):
            value = value[:len(value) - len(suffix)]
    return value


def format_terminal(node: TreeNode) -> str:
    if node.tail is None:
        return node.value
    mark = f"<{node.tail}>"
    # only the first annotation is read back as the tail
    if has_tail_annotation(node.value):
        return f"{mark} {node.value}"
    return f"{node.value} {mark}".lstrip()


def format_node(node: TreeNode) -> str:
    if not isinstance(node, TreeNode):
        raise ValueError(f"cannot format {node!r}")
    if not (node.bracketed or node.children or node.head is not None or node.starred):
        return format_terminal(node)
    label = base_label(node)
    if node.starred:
        label += "^"
    if node.head is not None:
        label += f"_{node.head}"
    parts: List[str] = [label]
    parts.extend(format_node(child) for child in node.children)
    return "[" + " ".join(parts) + "]"


def format_tree(root: TreeNode) -> str:
    """Write ``root`` back as canonical bracket notation."""
    return format_node(root)
