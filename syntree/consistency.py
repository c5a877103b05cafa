from dataclasses import dataclass
from typing import Dict, List

from .movement import find_head
from .topology import iter_ancestors, iter_nodes
from .tree import Span, TreeNode


@dataclass
class MovementWarning:
    span: Span
    kind: str
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def _at(span: Span) -> str:
    return f'[col {span.start + 1}]'


def check_movement(root: TreeNode) -> List[MovementWarning]:
    """Report movement annotations that will not produce an arrow as written.

    Reporting only: resolution still takes the first depth-first head.
    """
    warnings: List[MovementWarning] = []

    heads: Dict[str, List[TreeNode]] = {}
    for node in iter_nodes(root):
        if node.head is not None:
            heads.setdefault(node.head, []).append(node)
    for label, nodes in heads.items():
        if len(nodes) > 1:
            used = find_head(root, label)
            warnings.append(
                MovementWarning(
                    used.span,
                    'duplicate-head',
                    f'{_at(used.span)} head _{label} is defined {len(nodes)} times; '
                    f'using {used.value!r}',
                )
            )

    for node in iter_nodes(root):
        if node.tail is None:
            continue
        head = find_head(root, node.tail)
        if head is None:
            warnings.append(
                MovementWarning(
                    node.span,
                    'unmatched-tail',
                    f'{_at(node.span)} no head _{node.tail} for {node.value!r}',
                )
            )
        elif any(ancestor is head for ancestor in iter_ancestors(node)):
            warnings.append(
                MovementWarning(
                    node.span,
                    'head-dominates-tail',
                    f'{_at(node.span)} head {head.value!r} dominates its tail {node.value!r}',
                )
            )
    return warnings
