"""Adjacency-list graphs with BFS, DFS, Dijkstra, Prim and Kruskal, and a demo command."""

__version__ = "0.1.0"
__all__ = ["node", "graph", "structures", "algorithms", "demo"]