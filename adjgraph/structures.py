"""Helper structures used by the graph algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

from adjgraph.graph import Graph
from adjgraph.node import Node

UNREACHED = 2147483647


@dataclass
class EdgePair:
    """The endpoints of an edge; -1 marks that no edge was found."""

    start: int = -1
    end: int = -1


class VertexQueue:
    """First-in, first-out queue of vertex nodes."""

    def __init__(self) -> None:
        self._items: deque[Node] = deque()

    def push(self, vertex: Node) -> None:
        self._items.append(vertex)

    def pop(self) -> Node:
        """Remove and return the oldest vertex; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class VertexPriority:
    """Selects minimum vertices or edges by scanning the graph's colors."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def take_min_edge(self) -> Optional[int]:
        """Choose the lightest edge from a visited to an unvisited vertex.

        The destination vertex and the chosen edge are marked with color 1.
        Returns the destination index, or None if there is no such edge.
        """
        g = self.graph
        best = UNREACHED
        start: Optional[int] = None
        dest: Optional[int] = None
        for i in range(len(g)):
            if g.vertex(i).color != 1:
                continue
            for edge in g.edges(i):
                if g.vertex(edge.index).color == 0 and edge.weight < best:
                    best = edge.weight
                    start, dest = i, edge.index
        if start is None or dest is None:
            return None
        g.vertex(dest).color = 1
        for edge in g.edges(start):
            if edge.index == dest:
                edge.color = 1
                break
        return dest

    def min_vertex(self) -> Optional[int]:
        """Return the unvisited vertex of least weight (last one on ties)."""
        best = UNREACHED
        found: Optional[int] = None
        for i in range(len(self.graph)):
            vertex = self.graph.vertex(i)
            if vertex.color == 0 and vertex.weight <= best:
                best = vertex.weight
                found = vertex.index
        return found


class UnionFind:
    """Vertex sets tracked through each vertex's ``previous`` link."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def unite(self, start: int, end: int) -> None:
        """Mark the edge ``start``-``end`` chosen and merge the two sets."""
        g = self.graph
        for node in g.vertex(start):
            if node.index == end:
                node.color = 1
        start_vertex = g.vertex(start)
        end_vertex = g.vertex(end)
        if start_vertex.previous is None:
            start_vertex.previous = start_vertex
        if end_vertex.previous is None:
            end_vertex.previous = end_vertex
        absorbed = end_vertex.previous
        for i in range(len(g)):
            vertex = g.vertex(i)
            if vertex.previous is absorbed:
                vertex.previous = start_vertex.previous

    def min_edge(self) -> EdgePair:
        """Return the lightest edge joining two different sets."""
        g = self.graph
        best = UNREACHED
        pair = EdgePair()
        for i in range(len(g)):
            root = g.vertex(i).previous
            for edge in g.edges(i):
                if g.vertex(edge.index).previous is not root and edge.weight < best:
                    best = edge.weight
                    pair = EdgePair(i, edge.index)
        return pair

    def inside(self, start: int, end: int) -> bool:
        """Tell whether the edge ``start``-``end`` has been chosen."""
        return any(
            node.index == end and node.color == 1
            for node in self.graph.vertex(start)
        )