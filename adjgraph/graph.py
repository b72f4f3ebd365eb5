"""Graph stored as an array of adjacency linked lists."""

from __future__ import annotations

from collections.abc import Iterator

from adjgraph.node import Node


class Graph:
    """A graph of ``size`` vertices numbered from zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._vertices = [Node(0, i) for i in range(size)]

    def __len__(self) -> int:
        return len(self._vertices)

    def vertex(self, index: int) -> Node:
        """Return the head node of vertex ``index``."""
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex {index} does not exist")
        return self._vertices[index]

    def edges(self, index: int) -> Iterator[Node]:
        """Yield the adjacency entries of vertex ``index`` in order."""
        head = self.vertex(index)
        if head.next is not None:
            yield from head.next

    def add_edge_directed(self, origin: int, dest: int, weight: int = 1) -> None:
        """Append an edge from ``origin`` to ``dest``."""
        last = self.vertex(origin)
        while last.next is not None:
            last = last.next
        last.next = Node(weight, dest)

    def add_edge(self, origin: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge, stored once in each direction."""
        self.add_edge_directed(origin, dest, weight)
        self.add_edge_directed(dest, origin, weight)

    def remove_edge_directed(self, origin: int, dest: int) -> None:
        """Remove the first edge from ``origin`` to ``dest``."""
        if not 0 <= dest < len(self._vertices):
            raise ValueError(
                "The destination vertex does not exist. "
                "Note that the first vertex is numbered zero."
            )
        node = self.vertex(origin)
        while node.next is not None:
            if node.next.index == dest:
                node.next = node.next.next
                return
            node = node.next
        raise LookupError("edge not found")

    def remove_edge(self, origin: int, dest: int) -> None:
        """Remove an undirected edge in both directions."""
        self.remove_edge_directed(origin, dest)
        self.remove_edge_directed(dest, origin)

    def format_graph(self) -> str:
        """Describe every vertex with the destinations of its edges."""
        lines = [
            f"vertex{i} : " + "".join(f"{e.index}," for e in self.edges(i))
            for i in range(len(self))
        ]
        return "\n".join(lines) + "\n\n"

    def format_tree(self) -> str:
        """Describe only the edges marked as chosen (color 1)."""
        lines = [
            f"vertex{i} : "
            + "".join(f"{e.index}," for e in self.edges(i) if e.color == 1)
            for i in range(len(self))
        ]
        return "".join(line + "\n" for line in lines)

    def format_bfs(self) -> str:
        """List vertices by level, reading levels from vertex weights."""
        lines = []
        for level in range(len(self)):
            members = "".join(
                f"{v.index} " for v in self._vertices if v.weight == level
            )
            lines.append(f"level {level}: {members}\n")
        return "".join(lines)

    def format_dijkstra(self) -> str:
        """Describe the path back to the start from every vertex."""
        parts = []
        for i, vertex in enumerate(self._vertices):
            if vertex.previous is None:
                parts.append(f"the starting point is: {i}\n")
                continue
            path = [f"finish point: {vertex.index}"]
            node = vertex
            while node.previous is not None:
                node = node.previous
                path.append(f"<-{node.index}")
            parts.append("".join(path) + "\n")
        return "".join(parts) + "\n"