"""Text encodings of binary trees and binary search trees."""

from __future__ import annotations

from typing import Iterator, Optional

from dsakit.nodes import TreeNode

_NULL = "N"


def serialize_bst(root: Optional[TreeNode]) -> str:
    """Encode a BST as its preorder values, each followed by a comma."""
    parts: list[str] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        parts.append(f"{node.val},")
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return "".join(parts)


def deserialize_bst(data: str) -> Optional[TreeNode]:
    """Decode a BST written by :func:`serialize_bst`.

    Text after the last comma is ignored. Raise ValueError on a bad number.
    """
    tokens = [int(token) for token in data.split(",")[:-1]]

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(tokens[start])
        split = next(
            (i for i in range(start + 1, end + 1) if tokens[i] >= node.val),
            end + 1,
        )
        node.left = build(start + 1, split - 1)
        node.right = build(split, end)
        return node

    return build(0, len(tokens) - 1)


def serialize_tree(root: Optional[TreeNode]) -> str:
    """Encode any binary tree in preorder, writing ``N`` for a missing child."""
    parts: list[str] = []
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            parts.append(f"{_NULL},")
            continue
        parts.append(f"{node.val},")
        stack.append(node.right)
        stack.append(node.left)
    return "".join(parts)


def deserialize_tree(data: str) -> Optional[TreeNode]:
    """Decode a tree written by :func:`serialize_tree`.

    Missing trailing tokens count as empty children. Raise ValueError on a
    token that is neither ``N`` nor a number.
    """
    tokens = data.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    stream: Iterator[str] = iter(tokens)

    def build() -> Optional[TreeNode]:
        token = next(stream, None)
        if token is None or token == _NULL:
            return None
        node = TreeNode(int(token))
        node.left = build()
        node.right = build()
        return node

    return build()