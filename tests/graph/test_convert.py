import networkx as nx
import pytest

from augflow.graph.convert import from_networkx, network_to_networkx, to_networkx
from augflow.graph.digraph import Graph
from augflow.network import Network


def test_to_networkx_keeps_vertices_and_edges():
    g = Graph({0: [1, 2], 3: []})
    nxg = to_networkx(g)

    assert isinstance(nxg, nx.DiGraph)
    assert sorted(nxg.nodes) == [0, 1, 2, 3]
    assert sorted(nxg.edges) == [(0, 1), (0, 2)]


def test_from_networkx_directed_roundtrip():
    g = Graph.from_lists([[1], [2], [0], []])
    assert from_networkx(to_networkx(g)) == g


def test_from_networkx_undirected_is_symmetric():
    nxg = nx.Graph()
    nxg.add_edges_from([(0, 1), (1, 2)])
    nxg.add_node(5)
    g = from_networkx(nxg)

    assert g.is_symmetric()
    assert list(g.edges()) == [(0, 1), (1, 0), (1, 2), (2, 1)]
    assert 5 in g


def test_from_networkx_multigraph_collapses_parallel_edges():
    nxg = nx.MultiDiGraph()
    nxg.add_edge(0, 1)
    nxg.add_edge(0, 1)
    assert list(from_networkx(nxg).edges()) == [(0, 1)]


@pytest.mark.parametrize("label", ["A", -1, 1.5, True])
def test_from_networkx_rejects_non_vertex_labels(label):
    nxg = nx.DiGraph()
    nxg.add_node(label)
    with pytest.raises(ValueError, match="non-negative integer"):
        from_networkx(nxg)


def test_network_to_networkx_sets_capacity(line3):
    nxg = network_to_networkx(line3)
    assert nxg.edges[0, 1]["capacity"] == 5
    assert nxg.edges[1, 2]["capacity"] == 3


def test_network_to_networkx_missing_capacity_is_zero():
    net = Network(Graph({0: [1]}), source=0, sink=1)
    nxg = network_to_networkx(net, capacity_attr="cap")
    assert nxg.edges[0, 1]["cap"] == 0
