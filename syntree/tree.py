from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Span:
    start: int
    end: int


@dataclass(eq=False)
class TreeNode:
    value: str = ''
    children: List["TreeNode"] = field(default_factory=list)
    tail: Optional[str] = None  # movement source, from <name>
    head: Optional[str] = None  # movement target, from _name
    starred: bool = False
    bracketed: bool = False  # written as [...] in the source
    span: Span = field(default_factory=lambda: Span(0, 0))

    # set by topology.link_tree
    parent: Optional["TreeNode"] = field(default=None, repr=False)
    first: Optional["TreeNode"] = field(default=None, repr=False)
    last: Optional["TreeNode"] = field(default=None, repr=False)
    next: Optional["TreeNode"] = field(default=None, repr=False)
    previous: Optional["TreeNode"] = field(default=None, repr=False)

    # set by topology.mark_triangles and the layout passes
    draw_triangle: bool = field(default=False, repr=False)
    left_width: float = field(default=0.0, repr=False)
    right_width: float = field(default=0.0, repr=False)
    step: float = field(default=0.0, repr=False)
    x: float = field(default=0.0, repr=False)
    y: float = field(default=0.0, repr=False)
    max_y: float = field(default=0.0, repr=False)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def is_root(self) -> bool:
        return self.parent is None
