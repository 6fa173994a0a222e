"""Graph conversion utilities between augflow graphs and NetworkX graphs.

NetworkX is used as an interchange format and, in the test-suite, as an
independent reference implementation for max-flow and matching results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Union

import networkx as nx

from augflow.graph.digraph import Graph, Vertex

if TYPE_CHECKING:
    from augflow.network import Network


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Convert a Graph to a NetworkX DiGraph.

    Args:
        graph: The graph to convert.

    Returns:
        A DiGraph with the same vertices (including isolated ones) and edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    nx_graph.add_edges_from(graph.edges())
    return nx_graph


def from_networkx(nx_graph: Union[nx.Graph, nx.DiGraph]) -> Graph:
    """Convert a NetworkX graph to a Graph.

    Undirected graphs become symmetric graphs (each undirected edge is stored
    in both directions). Parallel edges of multigraphs collapse to one.

    Args:
        nx_graph: A NetworkX graph whose nodes are non-negative integers.

    Returns:
        The equivalent Graph.

    Raises:
        ValueError: If any node label is not a non-negative integer.
    """
    adj: Dict[Vertex, List[Vertex]] = {}
    for node in nx_graph.nodes:
        if isinstance(node, bool) or not isinstance(node, int) or node < 0:
            raise ValueError(
                f"Node '{node}' is not a non-negative integer; relabel the graph "
                "first (e.g. networkx.convert_node_labels_to_integers)."
            )
        adj[node] = []

    for u, v in nx_graph.edges():
        adj[u].append(v)
        if not nx_graph.is_directed():
            adj[v].append(u)
    return Graph(adj)


def network_to_networkx(network: "Network", capacity_attr: str = "capacity") -> nx.DiGraph:
    """Convert a Network to a NetworkX DiGraph carrying edge capacities.

    Args:
        network: The flow network to convert.
        capacity_attr: Name of the edge attribute holding the capacity.

    Returns:
        A DiGraph where every edge has ``capacity_attr`` set (0 when the
        network has no capacity entry for it).
    """
    nx_graph = to_networkx(network.graph)
    for u, v in network.graph.edges():
        nx_graph.edges[u, v][capacity_attr] = network.capacity_of((u, v))
    return nx_graph
