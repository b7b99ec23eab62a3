"""Building binary trees from traversals and enumerating full binary trees."""

from __future__ import annotations

from typing import Optional, Sequence

from dsakit.nodes import TreeNode, clone_tree


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder values.

    Raise ValueError if the two sequences cannot describe the same tree.
    """
    if len(inorder) != len(postorder):
        raise ValueError("inorder and postorder differ in length")
    position = {value: i for i, value in enumerate(inorder)}
    remaining = list(postorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        value = remaining.pop()
        try:
            index = position[value]
        except KeyError:
            raise ValueError(f"value {value!r} is missing from inorder") from None
        root = TreeNode(inorder[index])
        root.right = build(index + 1, end)
        root.left = build(start, index - 1)
        return root

    return build(0, len(postorder) - 1)


def build_tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder values.

    Raise ValueError if the two sequences cannot describe the same tree.
    """
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder differ in length")
    values = iter(preorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        node = TreeNode(next(values))
        if start == end:
            return node
        try:
            index = list(inorder).index(node.val, start, end + 1)
        except ValueError:
            raise ValueError(
                f"value {node.val!r} is missing from its inorder range"
            ) from None
        node.left = build(start, index - 1)
        node.right = build(index + 1, end)
        return node

    return build(0, len(preorder) - 1)


def all_possible_full_binary_trees(n: int) -> list[TreeNode]:
    """Return every full binary tree with ``n`` nodes, all valued 0.

    A full binary tree needs an odd node count; otherwise the list is empty.
    """
    if n < 1 or n % 2 == 0:
        return []
    trees: dict[int, list[TreeNode]] = {1: [TreeNode(0)]}
    for size in range(3, n + 1, 2):
        trees[size] = [
            TreeNode(0, clone_tree(left), clone_tree(right))
            for left_size in range(1, size, 2)
            for left in trees[left_size]
            for right in trees[size - 1 - left_size]
        ]
    return trees[n]