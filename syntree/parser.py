import logging
from typing import Iterator, List, Optional, Tuple

from .lexer import LBRACK, pad_brackets, scan_label, split_children, split_label, split_terminal
from .tree import Span, TreeNode

logger = logging.getLogger(__name__)


def parse_terminal(text: str, start: int, end: int) -> TreeNode:
    value, tail = split_terminal(text[start:end])
    return TreeNode(value=value, tail=tail, span=Span(start, end))


def _open_node(text: str, start: int, end: int) -> Tuple[TreeNode, List[Tuple[int, int]]]:
    """Build the node at ``text[start:end]`` without its children.

    Returns the node and the spans of the children still to be parsed.
    """
    if start >= end or text[start] != LBRACK:
        return parse_terminal(text, start, end), []

    body = text[:end]
    label_end = scan_label(body, start + 1)
    label = split_label(body[start + 1:label_end])
    spans, consumed = split_children(body, label_end)
    node = TreeNode(
        value=label.value,
        starred=label.starred,
        head=label.head,
        bracketed=True,
        span=Span(start, consumed),
    )
    return node, spans


def parse_node(text: str, start: int = 0, end: Optional[int] = None) -> Tuple[TreeNode, int]:
    """Parse the node at ``text[start:end]``.

    Returns the node and the offset just past what it consumed. Anything after
    a constituent's closing bracket is left unconsumed. Nesting depth is not
    bounded by the interpreter's recursion limit.
    """
    if end is None:
        end = len(text)
    root, spans = _open_node(text, start, end)
    consumed = root.span.end if root.bracketed else end

    stack: List[Tuple[TreeNode, Iterator[Tuple[int, int]]]] = [(root, iter(spans))]
    while stack:
        node, pending = stack[-1]
        child_span = next(pending, None)
        if child_span is None:
            stack.pop()
            continue
        child, child_spans = _open_node(text, *child_span)
        node.children.append(child)
        if child_spans:
            stack.append((child, iter(child_spans)))
    return root, consumed


def parse_tree(text: str) -> TreeNode:
    """Parse bracket notation into a tree. Never raises on string input."""
    normalized = pad_brackets(text)
    if normalized != text.strip():
        logger.debug("Padded unbalanced input to %r", normalized)
    root, consumed = parse_node(normalized)
    if consumed < len(normalized) and normalized[consumed:].strip():
        logger.debug("Ignoring trailing input after root: %r", normalized[consumed:])
    return root
