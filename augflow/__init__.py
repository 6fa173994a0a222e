"""augflow: augmenting-path max-flow and matching on immutable graphs.

Primary API:
    Graph - Immutable adjacency-list directed graph
    Network - Capacitated flow network over an asymmetric graph
    find_path(), has_path() - Strategy-driven path search over graph layers
    calc_max_flow() - Ford-Fulkerson maximum flow
    max_matching() - Augmenting-path matching (maximum on bipartite graphs)

Example:
    from augflow import Network, Strategy, calc_max_flow

    net = Network.from_edges([(0, 1, 3), (1, 2, 2)], source=0, sink=2)
    value = calc_max_flow(net, strategy=Strategy.BFS)
"""

from __future__ import annotations

from augflow import logging
from augflow._version import __version__
from augflow.algorithms.base import IterationLimitError, Strategy
from augflow.algorithms.matching import iter_matching, matching_pairs, max_matching
from augflow.algorithms.max_flow import calc_max_flow, iter_max_flow
from augflow.algorithms.search import NOT_FOUND, SearchResult, find_path, has_path
from augflow.algorithms.types import FlowSummary, MatchingSummary
from augflow.config import SOLVER_CONFIG, SolverConfig
from augflow.graph.convert import from_networkx, network_to_networkx, to_networkx
from augflow.graph.digraph import Graph
from augflow.network import ConstructionError, Network

__all__ = [
    "__version__",
    "logging",
    "Graph",
    "Network",
    "ConstructionError",
    "IterationLimitError",
    "Strategy",
    "SearchResult",
    "NOT_FOUND",
    "find_path",
    "has_path",
    "calc_max_flow",
    "iter_max_flow",
    "FlowSummary",
    "max_matching",
    "iter_matching",
    "matching_pairs",
    "MatchingSummary",
    "SolverConfig",
    "SOLVER_CONFIG",
    "from_networkx",
    "to_networkx",
    "network_to_networkx",
]
