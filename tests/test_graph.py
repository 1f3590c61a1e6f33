import pytest

from dsreview.graph import Graph, GraphNode


def test_add_edge_links_nodes():
    graph = Graph()
    n1 = GraphNode(1)
    graph.add_node(n1)
    n2 = GraphNode(2)
    graph.add_node(n2)
    graph.add_edge(1, 2)
    assert n1.adjacent[0] is n2
    assert n2.adjacent == []


def test_get_node_returns_registered_node():
    graph = Graph()
    node = GraphNode(7)
    graph.add_node(node)
    assert graph.get_node(7) is node
    assert node.id == 7


def test_get_unknown_node_raises():
    graph = Graph()
    with pytest.raises(KeyError):
        graph.get_node(3)


def test_add_edge_with_unknown_node_raises():
    graph = Graph()
    graph.add_node(GraphNode(1))
    with pytest.raises(KeyError):
        graph.add_edge(1, 2)


def test_adjacency_keeps_order():
    graph = Graph()
    for i in range(1, 5):
        graph.add_node(GraphNode(i))
    graph.add_edge(1, 3)
    graph.add_edge(1, 2)
    graph.add_edge(1, 4)
    assert [n.id for n in graph.get_node(1).adjacent] == [3, 2, 4]