"""Graph traversal, spanning-tree and shortest-path algorithms.

The algorithms work in place on a :class:`~adjgraph.graph.Graph`.
They record their results in the ``color``, ``weight`` and ``previous``
fields of the vertex heads and adjacency entries.
"""

from __future__ import annotations

from collections.abc import Iterator

from adjgraph.graph import Graph
from adjgraph.node import Node
from adjgraph.structures import UNREACHED, UnionFind, VertexPriority, VertexQueue


def bfs(graph: Graph, start_index: int) -> Graph:
    """Breadth-first search from ``start_index``.

    Each reached vertex's ``weight`` becomes its level (edge count from
    the start) and its color ends as 2. Vertices not reached keep their
    previous values. Returns ``graph``.
    """
    start = graph.vertex(start_index)
    start.color = 1
    start.weight = 0
    queue = VertexQueue()
    queue.push(start)
    while queue:
        current = queue.pop()
        for edge in graph.edges(current.index):
            neighbour = graph.vertex(edge.index)
            if neighbour.color == 0:
                neighbour.color = 1
                neighbour.weight = current.weight + 1
                queue.push(neighbour)
        current.color = 2
    return graph


def dfs(graph: Graph, start_index: int) -> Graph:
    """Depth-first search from ``start_index``.

    Returns a one-vertex graph whose vertex 0 lists, in discovery order,
    the destination of every tree edge (each with weight 0). The vertices
    of ``graph`` are colored black as they finish.
    """
    tree = Graph(1)
    root = graph.vertex(start_index)
    root.color = 1
    stack: list[tuple[Node, Iterator[Node]]] = [(root, graph.edges(start_index))]
    while stack:
        vertex, pending = stack[-1]
        for edge in pending:
            child = graph.vertex(edge.index)
            if child.color == 0:
                tree.add_edge_directed(0, edge.index, 0)
                child.color = 1
                stack.append((child, graph.edges(edge.index)))
                break
        else:
            vertex.color = 2
            stack.pop()
    return tree


def prim(graph: Graph) -> None:
    """Mark a minimum spanning tree grown from vertex 0.

    Each chosen edge is marked with color 1 in the adjacency list of the
    vertex it was reached from. Raises ValueError if the graph is not
    connected.
    """
    if len(graph) == 0:
        return
    for i in range(len(graph)):
        vertex = graph.vertex(i)
        vertex.weight = 0
        for node in vertex:
            node.color = 0
            node.previous = None
    graph.vertex(0).color = 1
    chooser = VertexPriority(graph)
    for step in range(len(graph) - 1):
        if chooser.take_min_edge() is None:
            raise ValueError(f"no edge left to choose at step {step}")


def kruskal(graph: Graph) -> None:
    """Mark a minimum spanning forest that joins every vertex.

    The lightest edge joining two different sets is chosen each time and
    marked with color 1 in the adjacency list of its start vertex. Raises
    ValueError if the graph is not connected.
    """
    for i in range(len(graph)):
        for node in graph.vertex(i):
            node.color = 0
            node.previous = node
    sets = UnionFind(graph)
    for step in range(len(graph) - 1):
        pair = sets.min_edge()
        if pair.start == -1 or pair.end == -1:
            raise ValueError(f"no edge left to choose at step {step}")
        sets.unite(pair.start, pair.end)


def dijkstra(graph: Graph, start_index: int) -> Graph:
    """Shortest distances from ``start_index`` using edge weights.

    Each vertex's ``weight`` becomes its distance (``UNREACHED`` if there
    is no path) and ``previous`` points one step back along the path.
    Returns ``graph``.
    """
    for i in range(len(graph)):
        vertex = graph.vertex(i)
        vertex.color = 0
        vertex.previous = None
        vertex.weight = UNREACHED
    graph.vertex(start_index).weight = 0
    queue = VertexPriority(graph)
    while (index := queue.min_vertex()) is not None:
        current = graph.vertex(index)
        for edge in graph.edges(index):
            distance = current.weight + edge.weight
            neighbour = graph.vertex(edge.index)
            if neighbour.weight > distance:
                neighbour.weight = distance
                neighbour.previous = current
        current.color = 1
    return graph


def copy_node(dest: Node, origin: Node) -> None:
    """Copy color, weight and index from ``origin`` into ``dest``."""
    dest.color = origin.color
    dest.weight = origin.weight
    dest.index = origin.index