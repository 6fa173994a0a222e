"""Maximum-cardinality matching via alternating augmenting paths.

The state is a pair of graphs over the same vertices: ``matched`` (M) and
``unmatched`` (the remaining edges of the input). Both are symmetric, with
each undirected edge stored in both directions. An augmenting path starts at
a free vertex, alternates unmatched/matched edges and ends at another free
vertex; toggling its edges between the two graphs grows M by one edge.

The search expands each vertex once and does not shrink odd alternating
cycles (blossoms). The result is a maximum matching for bipartite graphs; on
general graphs it is a valid, but not necessarily maximum, matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Literal, Optional, Tuple, Union, overload

from augflow.algorithms.base import IterationLimitError, Path, Strategy, Vertex
from augflow.algorithms.search import NOT_FOUND, SearchResult, find_path
from augflow.algorithms.types import MatchingSummary
from augflow.config import SOLVER_CONFIG
from augflow.graph.digraph import Graph
from augflow.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchingState:
    """State threaded through the matching loop.

    Attributes:
        matched: Symmetric graph of matched edges (M).
        unmatched: Symmetric graph of the other input edges.
        iteration: Number of augmentations applied so far.
        last_path: Augmenting path applied by the last iteration.
    """

    matched: Graph
    unmatched: Graph
    iteration: int = 0
    last_path: Optional[Path] = None

    @property
    def size(self) -> int:
        """Number of matched undirected edges."""
        return self.matched.edge_count() // 2


def initial_matching_state(graph: Graph) -> MatchingState:
    """Empty matching over the vertices of ``graph``.

    The input is symmetrised, so a directed graph is read as undirected.
    """
    undirected = graph.symmetrise()
    empty = Graph({vertex: () for vertex in undirected.vertices()})
    return MatchingState(matched=empty, unmatched=undirected)


def free_vertices(state: MatchingState) -> FrozenSet[Vertex]:
    """Vertices with no matched edge."""
    return state.matched.no_successors()


def find_augmenting_path(
    state: MatchingState, strategy: Strategy = Strategy.DFS
) -> SearchResult:
    """Search for an augmenting path from each free vertex in ascending order.

    Args:
        state: Current matching state.
        strategy: Frontier discipline for each alternating-path search.

    Returns:
        SearchResult: The first augmenting path found, or ``NOT_FOUND`` when
        no free vertex starts one.
    """
    free = free_vertices(state)
    layers = (state.unmatched, state.matched)
    for start in sorted(free):
        result = find_path(layers, start, free - {start}, strategy)
        if result:
            return result
    return NOT_FOUND


def augment_matching(state: MatchingState, path: Path) -> MatchingState:
    """Toggle every edge of ``path`` between matched and unmatched.

    Args:
        state: Current matching state.
        path: Alternating path whose endpoints are both free.

    Returns:
        MatchingState: The next state, with one more matched edge.
    """
    toggled = []
    for a, b in zip(path, path[1:]):
        toggled.append((a, b))
        toggled.append((b, a))
    return MatchingState(
        matched=state.matched.xor_edges(toggled),
        unmatched=state.unmatched.xor_edges(toggled),
        iteration=state.iteration + 1,
        last_path=tuple(path),
    )


def matching_pairs(matched: Graph) -> List[Tuple[Vertex, Vertex]]:
    """Matched pairs ``(u, v)`` with ``u < v``, in ascending order."""
    return [(u, v) for u, v in matched.edges() if u < v]


def iter_matching(
    graph: Union[Graph, MatchingState],
    strategy: Optional[Strategy] = None,
    max_iterations: Optional[int] = None,
) -> Iterator[MatchingState]:
    """Yield the state after each augmentation until no augmenting path exists.

    Args:
        graph: Input graph, read as undirected, or a MatchingState to
            continue from. The iteration bound counts the augmentations
            already recorded on that state.
        strategy: Search strategy; ``SOLVER_CONFIG.default_strategy`` if None.
        max_iterations: Bound on augmentations; ``SOLVER_CONFIG.max_iterations``
            if None.

    Yields:
        MatchingState: One state per augmenting path.

    Raises:
        IterationLimitError: If another augmenting path exists after
            ``max_iterations`` augmentations.
    """
    strategy = SOLVER_CONFIG.resolve_strategy(strategy)
    limit = SOLVER_CONFIG.resolve_max_iterations(max_iterations)
    if isinstance(graph, MatchingState):
        state = graph
    else:
        state = initial_matching_state(graph)

    while free_vertices(state):
        result = find_augmenting_path(state, strategy)
        if not result:
            break
        if limit is not None and state.iteration >= limit:
            raise IterationLimitError(limit, "matching")

        state = augment_matching(state, result.path)
        logger.debug(
            "matching %s: iteration %d augmented along %s (size %d)",
            strategy.name,
            state.iteration,
            list(result.path),
            state.size,
        )
        yield state

    logger.debug(
        "matching %s: no augmenting path after %d iterations",
        strategy.name,
        state.iteration,
    )


@overload
def max_matching(
    graph: Graph,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: Literal[False] = False,
    max_iterations: Optional[int] = None,
) -> Graph: ...


@overload
def max_matching(
    graph: Graph,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: Literal[True],
    max_iterations: Optional[int] = None,
) -> Tuple[Graph, MatchingSummary]: ...


def max_matching(
    graph: Graph,
    *,
    strategy: Optional[Strategy] = None,
    return_summary: bool = False,
    max_iterations: Optional[int] = None,
) -> Union[Graph, Tuple[Graph, MatchingSummary]]:
    """Compute a matching by repeated augmentation.

    Maximum for bipartite graphs. For general graphs the result is a valid
    matching that may be smaller than the maximum, since blossoms are not
    handled.

    Args:
        graph: Input graph, read as undirected.
        strategy: Search strategy. Defaults to ``SOLVER_CONFIG.default_strategy``.
        return_summary: If True, also return a MatchingSummary.
        max_iterations: Optional bound on augmentations.

    Returns:
        Union[Graph, tuple]:
            - If return_summary is False: the symmetric graph of matched edges.
            - Otherwise: ``(matched, MatchingSummary)``.

    Raises:
        IterationLimitError: If ``max_iterations`` is exceeded.

    Examples:
        >>> g = Graph.from_edges([(0, 2), (0, 3), (1, 2)])
        >>> matching_pairs(max_matching(g))
        [(0, 3), (1, 2)]
    """
    strategy = SOLVER_CONFIG.resolve_strategy(strategy)
    final = initial_matching_state(graph)
    for final in iter_matching(final, strategy, max_iterations):
        pass

    if not return_summary:
        return final.matched
    summary = MatchingSummary(
        size=final.size,
        pairs=matching_pairs(final.matched),
        unmatched=free_vertices(final),
        iterations=final.iteration,
        strategy=strategy,
    )
    return final.matched, summary
