"""Algorithms over binary search trees."""

from __future__ import annotations

from itertools import islice
from typing import Optional, Sequence

from dsakit.nodes import ListNode, TreeNode, clone_tree, iter_inorder


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced BST from a sorted linked list."""

    def build(start: Optional[ListNode], tail: Optional[ListNode]) -> Optional[TreeNode]:
        if start is tail:
            return None
        slow = fast = start
        while fast is not tail and fast.next is not tail:
            slow = slow.next
            fast = fast.next.next
        return TreeNode(slow.val, build(start, slow), build(slow.next, tail))

    return build(head, None)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based); raise IndexError if out of range."""
    if k < 1:
        raise IndexError("k must be at least 1")
    for node in islice(iter_inorder(root), k - 1, None):
        return node.val
    raise IndexError("k is larger than the number of nodes")


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], a: TreeNode, b: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of nodes ``a`` and ``b`` in a BST."""
    node = root
    while node is not None:
        if node.val > a.val and node.val > b.val:
            node = node.left
        elif node.val < a.val and node.val < b.val:
            node = node.right
        else:
            return node
    return None


def values_in_range(root: Optional[TreeNode], start: int, end: int) -> list[int]:
    """Return the values in ``[start, end]``, largest first."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        if node.val < start:
            visit(node.right)
        elif node.val <= end:
            visit(node.right)
            result.append(node.val)
            visit(node.left)
        else:
            visit(node.left)

    visit(root)
    return result


def sorted_array_to_bst(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced BST from a sorted sequence."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if end < start:
            return None
        mid = start + (end - start) // 2
        return TreeNode(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def num_trees(n: int) -> int:
    """Return the number of structurally unique BSTs on ``n`` keys."""
    if n <= 1:
        return 1
    counts = [1, 1] + [0] * (n - 1)
    for i in range(2, n + 1):
        counts[i] = sum(counts[j] * counts[i - 1 - j] for j in range(i))
    return counts[n]


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally unique BST holding the keys 1..n."""
    if n < 0:
        return []
    shapes: list[list[Optional[TreeNode]]] = [[None], [TreeNode(1)]]
    for size in range(2, n + 1):
        trees: list[Optional[TreeNode]] = []
        for root_key in range(1, size + 1):
            for left in shapes[root_key - 1]:
                for right in shapes[size - root_key]:
                    trees.append(TreeNode(root_key, clone_tree(left), clone_tree(right)))
        shapes.append(trees)

    result = shapes[n]
    for tree in result:
        for number, node in enumerate(iter_inorder(tree), start=1):
            node.val = number
    return result