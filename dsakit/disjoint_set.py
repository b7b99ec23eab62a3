"""Disjoint-set (union-find) structures."""

from __future__ import annotations


class QuickFindSet:
    """Union-find over 0..n-1 that relabels a whole set on every union."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._label = list(range(n))

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._label):
            raise IndexError(f"element {item} out of range")

    def connected(self, a: int, b: int) -> bool:
        """Return True if ``a`` and ``b`` are in the same set."""
        self._check(a)
        self._check(b)
        return self._label[a] == self._label[b]

    def union(self, a: int, b: int) -> None:
        """Merge the set holding ``a`` into the set holding ``b``."""
        self._check(a)
        self._check(b)
        old, new = self._label[a], self._label[b]
        self._label = [new if label == old else label for label in self._label]


class DisjointSet:
    """Union-find over 1..n with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, item: int) -> None:
        if not 1 <= item <= self._n:
            raise IndexError(f"element {item} out of range")

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``; the smaller joins the larger."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return
        if self._size[a] > self._size[b]:
            a, b = b, a
        self._parent[a] = b
        self._size[b] += self._size[a]