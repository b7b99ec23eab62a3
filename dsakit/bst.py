"""A binary search tree with insertion, removal and traversals."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from dsakit.nodes import TreeNode, inorder_values, preorder_values


class BinarySearchTree:
    """An unbalanced binary search tree. Equal values go to the right."""

    def __init__(self) -> None:
        self._root: Optional[TreeNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, data: Any) -> None:
        """Insert ``data``; duplicates are kept."""
        new = TreeNode(data)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if node.val > data:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove one occurrence of ``data``; absent values are ignored."""
        self._root, removed = self._remove(self._root, data)
        if removed:
            self._size -= 1

    def _remove(self, node: Optional[TreeNode], data: Any) -> tuple[Optional[TreeNode], bool]:
        if node is None:
            return None, False
        if node.val > data:
            node.left, removed = self._remove(node.left, data)
            return node, removed
        if node.val < data:
            node.right, removed = self._remove(node.right, data)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.val = self._max_of(node.left)
        node.left, _ = self._remove(node.left, node.val)
        return node, True

    @staticmethod
    def _min_of(node: Optional[TreeNode]) -> Any:
        if node is None:
            raise ValueError("can't find min value: tree is empty")
        while node.left is not None:
            node = node.left
        return node.val

    @staticmethod
    def _max_of(node: Optional[TreeNode]) -> Any:
        if node is None:
            raise ValueError("can't find max value: tree is empty")
        while node.right is not None:
            node = node.right
        return node.val

    def min(self) -> Any:
        """Return the smallest value; raise ValueError if empty."""
        return self._min_of(self._root)

    def max(self) -> Any:
        """Return the largest value; raise ValueError if empty."""
        return self._max_of(self._root)

    def inorder(self) -> list[Any]:
        return inorder_values(self._root)

    def preorder(self) -> list[Any]:
        return preorder_values(self._root)

    def postorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.val)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list[Any]:
        result: list[Any] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result