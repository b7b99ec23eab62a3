"""Graph problems: cloning, path enumeration and course scheduling."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Sequence

from dsakit.graph import DirectedGraph


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph. Nodes compare by identity."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        original = queue.popleft()
        copy = copies[original]
        for neighbour in original.neighbors:
            if neighbour not in copies:
                copies[neighbour] = GraphNode(neighbour.val)
                queue.append(neighbour)
            copy.neighbors.append(copies[neighbour])
    return copies[node]


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return every path from vertex 0 to the last vertex of an adjacency list."""
    if not graph:
        return []
    directed = DirectedGraph(len(graph))
    for vertex, neighbours in enumerate(graph):
        for neighbour in neighbours:
            directed.add_edge(vertex, neighbour)
    return directed.all_paths(0, len(graph) - 1)


def _course_graph(
    num_courses: int, prerequisites: Sequence[Sequence[int]]
) -> DirectedGraph:
    graph = DirectedGraph(num_courses)
    for course, required in prerequisites:
        graph.add_edge(required, course)
    return graph


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return True if all courses can be taken; each pair is (course, required)."""
    return not _course_graph(num_courses, prerequisites).has_cycle()


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """Return an order to take all courses in, or an empty list if none exists."""
    return _course_graph(num_courses, prerequisites).topological_sort()