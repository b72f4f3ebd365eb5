# adjgraph

Small graphs kept as adjacency lists, with the classic textbook
algorithms run over them:

- breadth-first search (levels from a start vertex)
- depth-first search (the tree edges, in discovery order)
- Dijkstra's shortest paths from a start vertex
- Prim's and Kruskal's minimum spanning trees

The algorithms work in place. They leave their results in the `color`,
`weight` and `previous` fields of the graph's vertices and edges, and
the graph can format those results as text.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `adjgraph.node`: `Node`, one entry of a linked list. It serves as a
  vertex head and as an adjacency entry. Iterating a node yields it and
  every node linked after it.
- `adjgraph.graph`: `Graph(size)`, with vertices numbered from zero.
  - `vertex(index)` returns a vertex head (`IndexError` if it does not exist).
  - `edges(index)` yields the adjacency entries of a vertex in order.
  - `add_edge(origin, dest, weight=1)` adds an edge in both directions.
    `add_edge_directed` adds it in one direction only.
  - `remove_edge(origin, dest)` and `remove_edge_directed(origin, dest)`
    remove an edge. They raise `ValueError` for a destination out of range
    and `LookupError` when there is no such edge.
  - `format_graph()`, `format_tree()`, `format_bfs()` and
    `format_dijkstra()` return text describing the graph or an
    algorithm's result.
- `adjgraph.structures`: the helpers the algorithms use. These are
  `VertexQueue`, `VertexPriority`, `UnionFind` and `EdgePair`.
- `adjgraph.algorithms`: the algorithms.
  - `bfs(graph, start_index)` sets each reached vertex's `weight` to its
    level and returns the graph.
  - `dfs(graph, start_index)` returns a one-vertex graph whose vertex 0
    lists the tree-edge destinations in discovery order.
  - `dijkstra(graph, start_index)` sets distances in `weight` and
    predecessors in `previous`, and returns the graph.
  - `prim(graph)` and `kruskal(graph)` mark the chosen edges with
    `color == 1`. They raise `ValueError` if the graph is not connected.
  - `copy_node(dest, origin)` copies color, weight and index from one
    node to another.

## Using it

```python
from adjgraph.graph import Graph
from adjgraph.algorithms import dijkstra, prim

g = Graph(5)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(1, 3)
g.add_edge(1, 4)

dijkstra(g, 2)
print(g.vertex(3).weight)      # 3: distance from vertex 2 to vertex 3
print(g.format_dijkstra())     # the path back to the start from each vertex

t = Graph(4)
t.add_edge(0, 1)
t.add_edge(0, 2, 4)
t.add_edge(1, 2, 2)
t.add_edge(1, 3, 5)
t.add_edge(2, 3, 3)
prim(t)
print(t.format_tree())         # the edges chosen for the spanning tree
```

A vertex that Dijkstra cannot reach keeps the weight
`adjgraph.structures.UNREACHED` (2147483647).

## Demo

The `adjgraph-demo` command builds fixed sample graphs, runs one or more
algorithms over them and prints the graphs and the results. Name the
demonstrations to run, from `dijkstra`, `dfs`, `kruskal`, `bfs` and
`prim`. With no name given it runs `dijkstra`.

```
adjgraph-demo
adjgraph-demo bfs prim
```

## What it does not do

The package has no way to read or write graphs from files. The demo only
runs its own built-in sample graphs, and graphs are built in code with
`Graph` and `add_edge`.