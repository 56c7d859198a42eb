"""Binary search tree over an ordered, duplicate-free set of values.

The module exposes two building blocks:

* ``Node`` – a ``@dataclass`` holding one value and optional left/right
  children.  Nodes carry no parent pointer; every algorithm walks top-down.
* ``OrderedTree`` – the tree itself with construction, lookup, mutation,
  height/depth queries, balance checking, rebalancing and the four classic
  traversal orders.

Structural mutations are expressed as slot replacement: a walk locates the
owning slot (a parent's ``left``/``right`` or the tree's ``root``) and stores
the restructured subtree back into it.  Balance is never cached; heights are
recomputed whenever they are requested.

Apart from the logarithmic-depth construction, every walk is iterative so that
degenerate chains produced by sorted insertions cannot exhaust the interpreter
recursion limit.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import Any, Callable, Deque, Dict, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)

Visitor = Callable[[Any], object]

__all__ = [
    "Node",
    "OrderedTree",
    "Visitor",
    "VisitorRequiredError",
]


class VisitorRequiredError(TypeError):
    """Raised when a traversal is requested without a callable visitor."""


@dataclass(slots=True, eq=False)
class Node:
    """Single tree node owning its (optional) left and right subtrees."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _build_subtree(values: Sequence[Any], start: int, end: int) -> Optional[Node]:
    """Return a minimal-height subtree over ``values[start:end + 1]``."""

    if start > end:
        return None
    mid = (start + end) // 2
    node = Node(values[mid])
    node.left = _build_subtree(values, start, mid - 1)
    node.right = _build_subtree(values, mid + 1, end)
    return node


def _build(values: Iterable[Any]) -> Optional[Node]:
    ordered = sorted(set(values))
    logger.debug("Building tree from %d distinct values", len(ordered))
    return _build_subtree(ordered, 0, len(ordered) - 1)


def _insert_into(root: Optional[Node], value: Any) -> Node:
    """Insert *value* below *root* and return the (possibly new) subtree root."""

    if root is None:
        return Node(value)

    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value)
                break
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value)
                break
            node = node.right
        else:
            break
    return root


def _min_value(node: Node) -> Any:
    while node.left is not None:
        node = node.left
    return node.value


def _delete_from(root: Optional[Node], value: Any) -> Optional[Node]:
    """Remove *value* below *root* and return the restructured subtree root.

    A node with two children takes over the value of its in-order successor,
    after which the walk continues into the right subtree to remove that
    successor, which never has a left child.
    """

    parent: Optional[Node] = None
    from_left = False
    node = root
    while node is not None:
        if value < node.value:
            parent, from_left, node = node, True, node.left
        elif value > node.value:
            parent, from_left, node = node, False, node.right
        elif node.left is not None and node.right is not None:
            node.value = _min_value(node.right)
            value = node.value
            parent, from_left, node = node, False, node.right
        else:
            replacement = node.right if node.left is None else node.left
            if parent is None:
                return replacement
            if from_left:
                parent.left = replacement
            else:
                parent.right = replacement
            return root
    return root


def _subtree_height(node: Optional[Node]) -> int:
    """Return the edge-count height of *node*; ``-1`` for an empty subtree."""

    height = -1
    level: List[Node] = [node] if node is not None else []
    while level:
        height += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return height


def _iter_post_order_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = []
    last_visited: Optional[Node] = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        peek = stack[-1]
        if peek.right is not None and peek.right is not last_visited:
            node = peek.right
        else:
            yield peek
            last_visited = stack.pop()


class OrderedTree:
    """Binary search tree holding unique, totally ordered values.

    ``OrderedTree(values)`` and :meth:`build` both deduplicate and sort the
    input before producing a height-balanced shape.  Subsequent inserts and
    deletes do not rebalance; call :meth:`rebalance` to restore a minimal
    height.
    """

    __slots__ = ("root",)

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[Node] = None
        if values is not None:
            self.root = _build(values)

    @classmethod
    def build(cls, values: Iterable[Any]) -> "OrderedTree":
        """Return a minimal-height tree over the distinct members of *values*."""

        return cls(values)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def includes(self, value: Any) -> bool:
        """Return ``True`` when *value* is stored in the tree."""

        return self.find(value) is not None

    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding *value* or ``None`` when it is absent."""

        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def height(self, value: Any) -> Optional[int]:
        """Return the height of the node holding *value*.

        Leaves have height ``0``.  ``None`` signals that *value* is absent.
        """

        node = self.find(value)
        if node is None:
            return None
        return _subtree_height(node)

    def depth(self, value: Any) -> Optional[int]:
        """Return the number of edges between the root and *value*, or ``None``."""

        depth = 0
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return depth
            depth += 1
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, value: Any) -> None:
        """Insert *value*; inserting an existing value leaves the tree untouched."""

        self.root = _insert_into(self.root, value)

    def delete_item(self, value: Any) -> None:
        """Remove *value* from the tree; absent values are ignored."""

        self.root = _delete_from(self.root, value)

    def rebalance(self) -> None:
        """Rebuild the tree into a minimal-height shape holding the same values."""

        values = list(self.iter_in_order())
        self.root = _build_subtree(values, 0, len(values) - 1)
        logger.debug("Rebalanced tree with %d values", len(values))

    # ------------------------------------------------------------------
    # Balance
    # ------------------------------------------------------------------
    def is_balanced(self) -> bool:
        """Return ``True`` when every node's subtree heights differ by at most one.

        Heights are computed bottom-up in a single post-order pass and the walk
        stops at the first imbalanced node.
        """

        heights: Dict[int, int] = {}
        for node in _iter_post_order_nodes(self.root):
            left = heights.pop(id(node.left)) if node.left is not None else -1
            right = heights.pop(id(node.right)) if node.right is not None else -1
            if abs(left - right) > 1:
                return False
            heights[id(node)] = max(left, right) + 1
        return True

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def level_order(self, visitor: Optional[Visitor] = None) -> None:
        """Call *visitor* with every value breadth-first, left to right."""

        self._visit(visitor, self.iter_level_order)

    def in_order(self, visitor: Optional[Visitor] = None) -> None:
        """Call *visitor* with every value in ascending order."""

        self._visit(visitor, self.iter_in_order)

    def pre_order(self, visitor: Optional[Visitor] = None) -> None:
        """Call *visitor* with each node value before its subtrees."""

        self._visit(visitor, self.iter_pre_order)

    def post_order(self, visitor: Optional[Visitor] = None) -> None:
        """Call *visitor* with each node value after its subtrees."""

        self._visit(visitor, self.iter_post_order)

    def iter_level_order(self) -> Iterator[Any]:
        if self.root is None:
            return
        queue: Deque[Node] = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def iter_in_order(self) -> Iterator[Any]:
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def iter_pre_order(self) -> Iterator[Any]:
        stack: List[Node] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def iter_post_order(self) -> Iterator[Any]:
        for node in _iter_post_order_nodes(self.root):
            yield node.value

    @staticmethod
    def _visit(visitor: Optional[Visitor], walk: Callable[[], Iterator[Any]]) -> None:
        if not callable(visitor):
            raise VisitorRequiredError("A callable visitor is required")
        for value in walk():
            visitor(value)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------
    def __contains__(self, value: object) -> bool:
        return self.includes(value)

    def __iter__(self) -> Iterator[Any]:
        return self.iter_in_order()

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_pre_order())

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}({list(self.iter_in_order())!r})"
