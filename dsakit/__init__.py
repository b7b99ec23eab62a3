"""Classic data structures and algorithms: trees, graphs, disjoint sets and dynamic programming."""

__version__ = "0.1.0"