"""Structural properties and path queries on binary trees."""

from __future__ import annotations

from typing import Optional

from dsakit.nodes import TreeNode


def is_leaf(node: TreeNode) -> bool:
    """Return True if ``node`` has no children."""
    return node.left is None and node.right is None


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""

    def walk(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_diameter = walk(node.left)
        right_height, right_diameter = walk(node.right)
        height = max(left_height, right_height) + 1
        through = left_height + right_height + 1
        return height, max(through, left_diameter, right_diameter)

    return walk(root)[1]


def largest_subtree_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values over all subtrees.

    Raise ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("tree is empty")
    best: Optional[int] = None

    def total(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        current = node.val + total(node.left) + total(node.right)
        if best is None or current > best:
            best = current
        return current

    total(root)
    assert best is not None
    return best


def leaf_to_leaf_max_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values on a path joining two leaves.

    Raise ValueError if the tree has fewer than two leaves.
    """
    if root is None:
        raise ValueError("tree is empty")
    best: Optional[int] = None

    def down(node: TreeNode) -> int:
        nonlocal best
        if is_leaf(node):
            return node.val
        if node.left is not None and node.right is not None:
            left = down(node.left)
            right = down(node.right)
            candidate = left + right + node.val
            if best is None or candidate > best:
                best = candidate
            return max(left, right) + node.val
        child = node.left if node.left is not None else node.right
        assert child is not None
        return node.val + down(child)

    down(root)
    if best is None:
        raise ValueError("tree has fewer than two leaves")
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that has both ``p`` and ``q`` as descendants.

    Nodes are matched by identity; a node is its own descendant.
    """
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def is_mirror(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Return True if tree ``b`` is the mirror image of tree ``a``."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and is_mirror(a.left, b.right) and is_mirror(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror of itself around its root."""
    if root is None:
        return True
    return is_mirror(root.left, root.right)


def find_ancestors(root: Optional[TreeNode], target: TreeNode) -> list[int]:
    """Return the values on the path from the root down to ``target``'s parent.

    Raise ValueError if ``target`` is not in the tree.
    """
    path: list[int] = []

    def search(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        if node is target:
            return True
        path.append(node.val)
        if search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    if not search(root):
        raise ValueError("target node is not in the tree")
    return path


def root_to_leaf_paths(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values on every root-to-leaf path, leftmost leaf first."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        path.append(node.val)
        if is_leaf(node):
            paths.append(list(path))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return paths


def max_root_to_leaf_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values on a root-to-leaf path.

    Raise ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("tree is empty")
    return max(sum(path) for path in root_to_leaf_paths(root))