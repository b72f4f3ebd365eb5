import pytest

from adjgraph.algorithms import bfs, copy_node, dfs, dijkstra, kruskal, prim
from adjgraph.graph import Graph
from adjgraph.node import Node
from adjgraph.structures import UNREACHED


def _tree_graph():
    g = Graph(5)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(1, 3)
    g.add_edge(1, 4)
    return g


def _weighted_four():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2, 4)
    g.add_edge(1, 2, 2)
    g.add_edge(1, 3, 5)
    g.add_edge(2, 3, 3)
    return g


def _dense_five():
    g = Graph(5)
    g.add_edge(0, 1, 60000)
    g.add_edge(0, 2, 20)
    g.add_edge(0, 3, 3200)
    g.add_edge(0, 4, 4300)
    g.add_edge(1, 2, 30)
    g.add_edge(1, 3, 23)
    g.add_edge(1, 4, 57)
    g.add_edge(2, 3, 89)
    g.add_edge(2, 4, 45)
    g.add_edge(3, 4, 10)
    return g


def test_dfs_source_case():
    g1 = _tree_graph()
    g2 = dfs(g1, 0)
    assert g2.vertex(0).next.index == 1
    assert g2.vertex(0).next.next.index == 3
    assert len(g2) == 1


def test_dfs_discovery_order_and_colors():
    g1 = _tree_graph()
    tree = dfs(g1, 0)
    assert [e.index for e in tree.edges(0)] == [1, 3, 4, 2]
    assert all(e.weight == 0 for e in tree.edges(0))
    assert all(g1.vertex(i).color == 2 for i in range(len(g1)))


def test_dfs_tree_has_one_edge_per_other_vertex():
    g1 = _tree_graph()
    tree = dfs(g1, 3)
    reached = sorted(e.index for e in tree.edges(0))
    assert reached == [0, 1, 2, 4]


def test_dijkstra_source_case_unit_weights():
    g1 = _tree_graph()
    start_index = 2
    g1 = dijkstra(g1, start_index)
    temp = g1.vertex(start_index)
    assert temp.previous is None
    assert temp.weight == 0
    assert g1.vertex(0).weight == 1
    assert g1.vertex(1).weight == 2
    assert g1.vertex(3).weight == 3


def test_dijkstra_source_case_weighted():
    g2 = _dense_five()
    dijkstra(g2, 0)
    assert g2.vertex(0).weight == 0
    assert g2.vertex(2).weight == 20
    assert g2.vertex(1).weight == 50


def test_dijkstra_path_follows_previous_links():
    g1 = dijkstra(_tree_graph(), 2)
    path = []
    node = g1.vertex(3)
    while node is not None:
        path.append(node.index)
        node = node.previous
    assert path == [3, 1, 0, 2]


def test_dijkstra_unreachable_vertex():
    g = Graph(3)
    g.add_edge(0, 1, 7)
    dijkstra(g, 0)
    assert g.vertex(1).weight == 7
    assert g.vertex(2).weight == UNREACHED
    assert g.vertex(2).previous is None


def test_dijkstra_distances_satisfy_edge_bound():
    g = dijkstra(_dense_five(), 0)
    for i in range(len(g)):
        for edge in g.edges(i):
            assert g.vertex(edge.index).weight <= g.vertex(i).weight + edge.weight


def test_prim_source_case():
    g1 = _weighted_four()
    prim(g1)
    assert g1.vertex(0).next.color == 1
    assert g1.vertex(1).next.next.color == 1
    assert g1.vertex(2).next.next.next.color == 1


def test_prim_marks_tree_edges_only():
    g1 = _weighted_four()
    prim(g1)
    chosen = [
        (i, e.index, e.weight)
        for i in range(len(g1))
        for e in g1.edges(i)
        if e.color == 1
    ]
    assert len(chosen) == 3
    assert sum(w for _, _, w in chosen) == 1 + 2 + 3


def test_prim_disconnected_raises():
    g = Graph(3)
    g.add_edge(0, 1)
    with pytest.raises(ValueError):
        prim(g)


def test_kruskal_source_case():
    g1 = _weighted_four()
    kruskal(g1)
    assert g1.vertex(0).next.color == 1
    assert g1.vertex(1).next.next.color == 1
    assert g1.vertex(2).next.next.next.color == 1


def test_kruskal_joins_all_vertices():
    g1 = _weighted_four()
    kruskal(g1)
    roots = {g1.vertex(i).previous for i in range(len(g1))}
    assert len(roots) == 1
    chosen = [e for i in range(len(g1)) for e in g1.edges(i) if e.color == 1]
    assert len(chosen) == 3


def test_kruskal_disconnected_raises():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    with pytest.raises(ValueError):
        kruskal(g)


def test_bfs_levels():
    g = bfs(_tree_graph(), 0)
    assert [g.vertex(i).weight for i in range(5)] == [0, 1, 1, 2, 2]
    assert all(g.vertex(i).color == 2 for i in range(5))


def test_bfs_returns_same_graph_and_levels_are_consistent():
    original = _dense_five()
    g = bfs(original, 3)
    assert g is original
    assert g.vertex(3).weight == 0
    for i in range(len(g)):
        for edge in g.edges(i):
            assert abs(g.vertex(i).weight - g.vertex(edge.index).weight) <= 1


def test_bfs_format_lists_start_on_level_zero():
    g = bfs(_tree_graph(), 0)
    assert g.format_bfs().splitlines()[0] == "level 0: 0 "


def test_copy_node():
    origin = Node(9, 4)
    origin.color = 2
    dest = Node()
    copy_node(dest, origin)
    assert (dest.weight, dest.index, dest.color) == (9, 4, 2)
    assert dest.next is None