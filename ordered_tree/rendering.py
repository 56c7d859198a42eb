"""Text renderings of a tree's structure for console demonstrations.

Both renderers only read ``value``, ``left`` and ``right`` from the nodes and
therefore work on any subtree, not just on a whole :class:`OrderedTree`.

* ``render_sideways`` – rotated view with the right subtree on top and
  box-drawing connectors, readable for trees of any shape.
* ``render_levels`` – one row per level, marking missing children with a
  centred dot.  Rows double in width with every level, so it is best suited
  to small, reasonably balanced trees.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from .binary_search_tree import Node

EMPTY_TREE = "<empty>"

__all__ = [
    "EMPTY_TREE",
    "RENDERERS",
    "render_levels",
    "render_sideways",
]


def render_sideways(root: Optional[Node]) -> str:
    """Render *root* rotated a quarter turn, right subtree first.

    Each line holds a single value prefixed by the connectors leading to it,
    so reading the output top to bottom walks the values in descending order.
    """

    if root is None:
        return EMPTY_TREE

    lines: List[str] = []
    # (node, prefix, is_left, emit) frames; the stack unwinds right, self, left.
    stack: List[Tuple[Node, str, bool, bool]] = [(root, "", True, False)]
    while stack:
        node, prefix, is_left, emit = stack.pop()
        if emit:
            connector = "└── " if is_left else "┌── "
            lines.append(f"{prefix}{connector}{node.value}")
            continue
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + ("│   " if is_left else "    "), False, False))

    return "\n".join(lines)


def render_levels(root: Optional[Node]) -> str:
    """Render *root* as one row per depth, left to right.

    Every row lists as many slots as a complete tree would hold at that depth,
    so an absent child (or a child of an absent node) shows as ``·`` and values
    stay aligned with their parents.  Rendering ends at the deepest row that
    still holds a value.
    """

    if root is None:
        return EMPTY_TREE

    rows: List[str] = []
    level: List[Optional[Node]] = [root]
    while any(node is not None for node in level):
        rows.append(" ".join("·" if node is None else str(node.value) for node in level))
        level = [
            child
            for node in level
            for child in ((None, None) if node is None else (node.left, node.right))
        ]
    return "\n".join(rows)


RENDERERS: Dict[str, Callable[[Optional[Node]], str]] = {
    "sideways": render_sideways,
    "levels": render_levels,
}
