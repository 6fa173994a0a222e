"""Maximum-flow computation via augmenting paths (Ford-Fulkerson).

Each iteration searches the residual graph for a source-to-sink path, pushes
the path's bottleneck along it and returns a new `FlowState`. Iterations are
pure functions of the previous state, so `iter_max_flow` can be used to log,
checkpoint or replay the run step by step.

The search strategy picks the augmenting path. Any choice converges to the
same maximum flow value, but the number of iterations differs: breadth-first
paths are shortest paths (Edmonds-Karp, polynomial), while depth-first paths
can require a number of iterations that grows with the capacity values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union, overload

from augflow.algorithms.base import Edge, IterationLimitError, Path, Strategy
from augflow.algorithms.search import find_path, reachable
from augflow.algorithms.types import FlowSummary
from augflow.config import SOLVER_CONFIG
from augflow.graph import edge_map
from augflow.graph.digraph import Graph
from augflow.logging import get_logger
from augflow.network import Network

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlowState:
    """State threaded through the augmentation loop.

    Attributes:
        residual: Residual capacity per edge, including reverse edges that
            carry cancellation capacity.
        flow: Flow per original network edge.
        iteration: Number of augmentations applied so far.
        last_path: Augmenting path applied by the last iteration.
    """

    residual: Mapping[Edge, int]
    flow: Mapping[Edge, int] = field(default_factory=dict)
    iteration: int = 0
    last_path: Optional[Path] = None


def initial_flow_state(network: Network) -> FlowState:
    """Residual equal to the capacities and an all-zero flow."""
    return FlowState(residual=edge_map.prune(network.capacity), flow={})


def residual_graph(support: Graph, residual: Mapping[Edge, int]) -> Graph:
    """Sub-graph of ``support`` holding the edges with positive residual.

    Args:
        support: Graph listing every edge that can ever carry residual
            capacity (the symmetrised network graph).
        residual: Residual capacity per edge.
    """
    return Graph(
        {
            tail: [
                head
                for head in succ
                if edge_map.lookup(residual, (tail, head)) > 0
            ]
            for tail, succ in support.adjacency()
        }
    )


def path_edges(path: Path) -> List[Edge]:
    """Consecutive vertex pairs of ``path``."""
    return list(zip(path, path[1:]))


def bottleneck(residual: Mapping[Edge, int], path: Path) -> int:
    """Smallest residual capacity along ``path``."""
    return min(edge_map.lookup(residual, edge) for edge in path_edges(path))


def augment_flow(network: Network, state: FlowState, path: Path) -> FlowState:
    """Push the bottleneck of ``path`` and return the next state.

    Residual capacity drops by the bottleneck on each path edge and rises by
    the same amount on its reverse. A path edge that belongs to the network
    adds flow to it; a reverse edge cancels flow on the network edge it
    mirrors. The network is asymmetric, so every path edge is exactly one of
    the two.

    Args:
        network: The flow network.
        state: Current state.
        path: Augmenting path in the residual graph of ``state``, at least
            two vertices long.

    Returns:
        FlowState: The state after augmentation.
    """
    amount = bottleneck(state.residual, path)
    pushed = edge_map.scale(
        edge_map.from_list((edge, 1) for edge in path_edges(path)), amount
    )

    residual = edge_map.add(
        edge_map.subtract(state.residual, pushed), edge_map.swap_keys(pushed)
    )

    forward_edges = {edge for edge in pushed if network.graph.is_edge(*edge)}
    forward = edge_map.restrict(pushed, forward_edges)
    cancelled = edge_map.swap_keys(edge_map.subtract(pushed, forward))
    flow = edge_map.subtract(edge_map.add(state.flow, forward), cancelled)

    return FlowState(
        residual=residual,
        flow=flow,
        iteration=state.iteration + 1,
        last_path=tuple(path),
    )


def iter_max_flow(
    network: Network,
    strategy: Optional[Strategy] = None,
    max_iterations: Optional[int] = None,
) -> Iterator[FlowState]:
    """Yield the state after each augmentation until no path remains.

    Args:
        network: The flow network.
        strategy: Search strategy; ``SOLVER_CONFIG.default_strategy`` if None.
        max_iterations: Bound on augmentations; ``SOLVER_CONFIG.max_iterations``
            if None.

    Yields:
        FlowState: One state per augmenting path.

    Raises:
        IterationLimitError: If another augmenting path exists after
            ``max_iterations`` augmentations.
    """
    strategy = SOLVER_CONFIG.resolve_strategy(strategy)
    limit = SOLVER_CONFIG.resolve_max_iterations(max_iterations)
    source, sink = network.source, network.sink

    # Degenerate case (s == t): the only feasible flow value is 0.
    if source == sink:
        return

    support = network.graph.symmetrise()
    state = initial_flow_state(network)
    while True:
        result = find_path(
            residual_graph(support, state.residual), source, (sink,), strategy
        )
        if not result:
            logger.debug(
                "max-flow %s: no augmenting path after %d iterations",
                strategy.name,
                state.iteration,
            )
            return
        if limit is not None and state.iteration >= limit:
            raise IterationLimitError(limit, "max-flow")

        logger.debug(
            "max-flow %s: iteration %d pushes %d along %s",
            strategy.name,
            state.iteration + 1,
            bottleneck(state.residual, result.path),
            list(result.path),
        )
        state = augment_flow(network, state, result.path)
        yield state


def build_flow_summary(
    network: Network, state: FlowState, strategy: Strategy
) -> FlowSummary:
    """Summarize a final flow state, including the minimum cut.

    Args:
        network: The flow network.
        state: State after the last augmentation.
        strategy: Strategy that produced ``state``.

    Returns:
        FlowSummary: Totals, per-edge values and min-cut analysis.
    """
    edges = network.edges()
    edge_flow: Dict[Edge, int] = {e: edge_map.lookup(state.flow, e) for e in edges}
    residual_cap: Dict[Edge, int] = {
        e: edge_map.lookup(state.residual, e) for e in edges
    }

    residual = residual_graph(network.graph.symmetrise(), state.residual)
    source_side = reachable(residual, network.source)
    min_cut = [
        (u, v)
        for (u, v) in edges
        if u in source_side
        and v not in source_side
        and network.capacity_of((u, v)) > 0
    ]

    return FlowSummary(
        total_flow=edge_map.net_at(state.flow, network.source),
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=source_side,
        min_cut=min_cut,
        iterations=state.iteration,
        strategy=strategy,
    )


@overload
def calc_max_flow(
    network: Network,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: Literal[False] = False,
    max_iterations: Optional[int] = None,
) -> int: ...


@overload
def calc_max_flow(
    network: Network,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: Literal[True],
    max_iterations: Optional[int] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    network: Network,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: bool = False,
    max_iterations: Optional[int] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``network.source`` to ``network.sink``.

    Repeatedly searches the residual graph for an augmenting path and pushes
    its bottleneck until the sink is no longer reachable.

    Args:
        network: The flow network.
        strategy: Search strategy for augmenting paths. Defaults to
            ``SOLVER_CONFIG.default_strategy`` (breadth-first).
        return_summary: If True, also return a FlowSummary.
        max_iterations: Optional bound on augmentations.

    Returns:
        Union[int, tuple]:
            - If return_summary is False: the max-flow value.
            - Otherwise: ``(value, FlowSummary)``.

    Raises:
        IterationLimitError: If ``max_iterations`` is exceeded.

    Examples:
        >>> net = Network.from_edges([(0, 1, 3), (1, 2, 2)], source=0, sink=2)
        >>> calc_max_flow(net)
        2
    """
    strategy = SOLVER_CONFIG.resolve_strategy(strategy)
    final = initial_flow_state(network)
    for final in iter_max_flow(network, strategy, max_iterations):
        pass

    total = edge_map.net_at(final.flow, network.source)
    logger.debug(
        "max-flow %s: value %d after %d iterations",
        strategy.name,
        total,
        final.iteration,
    )
    if not return_summary:
        return total
    return total, build_flow_summary(network, final, strategy)
