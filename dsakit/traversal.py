"""Level-wise and column-wise traversals of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, TypeVar

from dsakit.nodes import TreeNode


class _Binary(Protocol):
    left: Optional["_Binary"]
    right: Optional["_Binary"]


_N = TypeVar("_N", bound=_Binary)


@dataclass(eq=False)
class NextNode:
    """A binary tree node that also points at its right neighbour on its level."""

    val: int = 0
    left: Optional[NextNode] = None
    right: Optional[NextNode] = None
    next: Optional[NextNode] = None


def _levels(root: Optional[_N]) -> Iterator[list[_N]]:
    """Yield the nodes of each level, top to bottom, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    return sum(1 for _ in _levels(root))


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, from the root down."""
    return [[node.val for node in level] for level in _levels(root)]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, from the deepest level up."""
    return level_order(root)[::-1]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the values seen from the right: the last node of each level."""
    return [level[-1].val for level in _levels(root)]


def left_view(root: Optional[TreeNode]) -> list[int]:
    """Return the values seen from the left: the first node of each level."""
    return [level[0].val for level in _levels(root)]


def right_view(root: Optional[TreeNode]) -> list[int]:
    """Return the last value of each level."""
    return right_side_view(root)


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the levels alternating left-to-right and right-to-left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def vertical_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values column by column, leftmost column first.

    Within a column the values appear in preorder.
    """
    columns: defaultdict[int, list[int]] = defaultdict(list)
    stack: list[tuple[TreeNode, int]] = [(root, 0)] if root is not None else []
    while stack:
        node, column = stack.pop()
        columns[column].append(node.val)
        if node.right is not None:
            stack.append((node.right, column + 1))
        if node.left is not None:
            stack.append((node.left, column - 1))
    return [columns[column] for column in sorted(columns)]


def connect(root: Optional[NextNode]) -> Optional[NextNode]:
    """Point every node's ``next`` at its right neighbour on the same level."""
    queue: deque[NextNode] = deque([root] if root is not None else [])
    while queue:
        neighbour: Optional[NextNode] = None
        for _ in range(len(queue)):
            node = queue.popleft()
            node.next = neighbour
            neighbour = node
            if node.right is not None:
                queue.append(node.right)
            if node.left is not None:
                queue.append(node.left)
    return root