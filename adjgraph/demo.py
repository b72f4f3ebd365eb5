"""Command-line demonstrations of the graph algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from adjgraph.algorithms import bfs, dfs, dijkstra, kruskal, prim
from adjgraph.graph import Graph


def _tree_graph() -> Graph:
    g = Graph(5)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(1, 3)
    g.add_edge(1, 4)
    return g


def _weighted_four() -> Graph:
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2, 4)
    g.add_edge(1, 2, 2)
    g.add_edge(1, 3, 5)
    g.add_edge(2, 3, 3)
    return g


def _dense_five() -> Graph:
    g = Graph(5)
    for origin, dest, weight in [
        (0, 1, 60000), (0, 2, 20), (0, 3, 3200), (0, 4, 4300), (1, 2, 30),
        (1, 3, 23), (1, 4, 57), (2, 3, 89), (2, 4, 45), (3, 4, 10),
    ]:
        g.add_edge(origin, dest, weight)
    return g


def _show(text: str) -> None:
    print(text, end="")


def demo_dijkstra() -> None:
    for graph, start in ((_tree_graph(), 2), (_dense_five(), 0)):
        _show(graph.format_graph())
        dijkstra(graph, start)
        _show(graph.format_dijkstra())


def demo_dfs() -> None:
    graph = _tree_graph()
    _show(graph.format_graph())
    _show(dfs(graph, 0).format_graph())


def demo_bfs() -> None:
    graph = _tree_graph()
    _show(graph.format_graph())
    _show(bfs(graph, 0).format_bfs())


def demo_prim() -> None:
    graph = _weighted_four()
    _show(graph.format_graph())
    prim(graph)
    _show(graph.format_tree())


def demo_kruskal() -> None:
    graph = _weighted_four()
    _show(graph.format_graph())
    kruskal(graph)
    _show(graph.format_tree())


DEMOS: dict[str, Callable[[], None]] = {
    "dijkstra": demo_dijkstra,
    "dfs": demo_dfs,
    "kruskal": demo_kruskal,
    "bfs": demo_bfs,
    "prim": demo_prim,
}


def main(argv: list[str] | None = None) -> int:
    """Run the named demonstrations (dijkstra when none is named)."""
    parser = argparse.ArgumentParser(
        prog="adjgraph", description="Demonstrate the graph algorithms."
    )
    parser.add_argument(
        "demos", nargs="*", metavar="DEMO",
        help="one or more of: " + ", ".join(DEMOS),
    )
    args = parser.parse_args(argv)
    names = args.demos or ["dijkstra"]
    unknown = [name for name in names if name not in DEMOS]
    if unknown:
        parser.error("unknown demo: " + ", ".join(unknown))
    for name in names:
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())