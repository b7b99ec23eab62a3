"""Node types shared by the tree and list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a linked list from ``values``; return its head, or None if empty."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def iter_inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes of a tree in inorder, without recursion."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a tree in inorder."""
    return [node.val for node in iter_inorder(root)]


def preorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a tree in preorder."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def clone_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a deep copy of a tree."""
    if root is None:
        return None
    return TreeNode(root.val, clone_tree(root.left), clone_tree(root.right))