"""Directed and undirected graphs on vertices 0..n-1, held as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional


def _check_size(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")


class DirectedGraph:
    """A directed graph; neighbours are visited in the order edges were added."""

    def __init__(self, vertices: int) -> None:
        _check_size(vertices)
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)

    def bfs(self, source: int) -> list[int]:
        """Return the vertices reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        order: list[int] = []
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adj[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self) -> list[int]:
        """Return every vertex in depth-first order, starting afresh from each
        unvisited vertex in increasing order."""
        visited: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            visited.add(vertex)
            order.append(vertex)
            for neighbour in self._adj[vertex]:
                if neighbour not in visited:
                    visit(neighbour)

        for vertex in range(len(self._adj)):
            if vertex not in visited:
                visit(vertex)
        return order

    def _paths(self, source: int, destination: int) -> Iterator[list[int]]:
        path: list[int] = []
        on_path: set[int] = set()

        def walk(vertex: int) -> Iterator[list[int]]:
            path.append(vertex)
            on_path.add(vertex)
            if vertex == destination:
                yield list(path)
            else:
                for neighbour in self._adj[vertex]:
                    if neighbour not in on_path:
                        yield from walk(neighbour)
            path.pop()
            on_path.discard(vertex)

        yield from walk(source)

    def all_paths(self, source: int, destination: int) -> list[list[int]]:
        """Return every simple path from ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        return list(self._paths(source, destination))

    def _finish_order(self) -> Optional[list[int]]:
        """Return vertices in depth-first finishing order, or None on a cycle."""
        unseen, active, done = 0, 1, 2
        state = [unseen] * len(self._adj)
        finished: list[int] = []

        def visit(vertex: int) -> bool:
            state[vertex] = active
            for neighbour in self._adj[vertex]:
                if state[neighbour] == active:
                    return True
                if state[neighbour] == unseen and visit(neighbour):
                    return True
            state[vertex] = done
            finished.append(vertex)
            return False

        for vertex in range(len(self._adj)):
            if state[vertex] == unseen and visit(vertex):
                return None
        return finished

    def has_cycle(self) -> bool:
        """Return True if the graph contains a directed cycle."""
        return self._finish_order() is None

    def topological_sort(self) -> list[int]:
        """Return the vertices so every edge points forward; empty if cyclic."""
        finished = self._finish_order()
        if finished is None:
            return []
        return finished[::-1]


class UndirectedGraph:
    """An undirected multigraph; parallel edges and self-loops form cycles."""

    def __init__(self, vertices: int) -> None:
        _check_size(vertices)
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]
        self._edges = 0

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge joining ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        edge = self._edges
        self._edges += 1
        self._adj[u].append((v, edge))
        self._adj[v].append((u, edge))

    def has_cycle(self) -> bool:
        """Return True if the graph contains a cycle."""
        visited: set[int] = set()

        def visit(vertex: int, arrived_by: Optional[int]) -> bool:
            visited.add(vertex)
            for neighbour, edge in self._adj[vertex]:
                if edge == arrived_by:
                    continue
                if neighbour in visited or visit(neighbour, edge):
                    return True
            return False

        return any(
            visit(vertex, None)
            for vertex in range(len(self._adj))
            if vertex not in visited
        )