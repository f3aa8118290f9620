import networkx as nx

from skynet.graph import Graph


def test_insert_creates_both_nodes():
    g = Graph()
    g.insert_edge(1, 2)
    assert g.find_node(1)
    assert g.find_node(2)
    assert g.has_edge(1, 2)


def test_links_are_symmetric(small_graph):
    for a in range(6):
        for b in range(6):
            assert small_graph.has_edge(a, b) == small_graph.has_edge(b, a)


def test_insert_is_idempotent():
    g = Graph()
    g.insert_edge(1, 2)
    g.insert_edge(1, 2)
    g.insert_edge(2, 1)
    assert g.neighbors(1) == [2]
    assert g.neighbors(2) == [1]
    assert len(g.edges()) == 1


def test_has_edge_unknown_labels():
    g = Graph.from_edges([(1, 2)])
    assert not g.has_edge(1, 99)
    assert not g.has_edge(99, 1)
    assert not g.has_edge(98, 99)


def test_remove_edge_keeps_nodes(small_graph):
    small_graph.remove_edge(2, 3)
    assert not small_graph.has_edge(2, 3)
    assert not small_graph.has_edge(3, 2)
    assert small_graph.find_node(3)
    assert small_graph.neighbors(3) == []
    assert small_graph.degree(3) == 0


def test_remove_missing_edge_is_noop(small_graph):
    before = small_graph.edges()
    small_graph.remove_edge(0, 3)
    small_graph.remove_edge(42, 43)
    small_graph.remove_edge(0, 42)
    assert small_graph.edges() == before
    assert not small_graph.find_node(42)


def test_find_node_does_not_create():
    g = Graph()
    assert not g.find_node(7)
    assert 7 not in g
    assert len(g) == 0


def test_neighbors_sorted_and_unknown_empty(small_graph):
    assert small_graph.neighbors(1) == [0, 2, 4]
    assert small_graph.neighbors(1) == small_graph.neighbors(1)
    assert small_graph.neighbors(99) == []


def test_edges_listed_once(small_graph):
    assert small_graph.edges() == [(0, 1), (1, 2), (1, 4), (2, 3)]


def test_copy_is_independent(small_graph):
    clone = small_graph.copy()
    clone.remove_edge(0, 1)
    assert small_graph.has_edge(0, 1)
    assert not clone.has_edge(0, 1)
    assert clone.find_node(0)


def test_to_networkx_matches(small_graph):
    small_graph.remove_edge(2, 3)
    G = small_graph.to_networkx()
    assert isinstance(G, nx.Graph)
    assert set(G.nodes()) == {0, 1, 2, 3, 4}
    assert G.number_of_edges() == 3
    assert not G.has_edge(2, 3)
