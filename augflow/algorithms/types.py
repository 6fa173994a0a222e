"""Types and data structures for solver results.

Defines immutable summary containers returned alongside solver values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from augflow.algorithms.base import Edge, Strategy, Vertex


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Net flow leaving the source.
        edge_flow: Flow per original network edge (zero entries included).
        residual_cap: Remaining capacity per original network edge.
        reachable: Vertices reachable from the source in the final residual
            graph; the source side of a minimum cut.
        min_cut: Saturated edges leaving ``reachable``.
        iterations: Number of augmenting paths applied.
        strategy: Search strategy used for augmenting paths.
    """

    total_flow: int
    edge_flow: Dict[Edge, int]
    residual_cap: Dict[Edge, int]
    reachable: FrozenSet[Vertex]
    min_cut: List[Edge]
    iterations: int
    strategy: Strategy


@dataclass(frozen=True)
class MatchingSummary:
    """Summary of a matching computation.

    Attributes:
        size: Number of matched (undirected) edges.
        pairs: Matched pairs ``(u, v)`` with ``u < v``, sorted ascending.
        unmatched: Vertices left without a partner.
        iterations: Number of augmenting paths applied.
        strategy: Search strategy used for augmenting paths.
    """

    size: int
    pairs: List[Tuple[Vertex, Vertex]]
    unmatched: FrozenSet[Vertex]
    iterations: int
    strategy: Strategy
