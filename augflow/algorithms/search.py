"""Path search over one graph or a cyclic sequence of graph layers.

The search keeps an explicit frontier (a stack for depth-first, a queue for
breadth-first) and a visited set. Each vertex is expanded at most once, so a
call performs at most ``|V|`` expansions.

With several layers, the edge leaving a vertex at depth ``d`` must exist in
``layers[d % len(layers)]``. Alternating ``[unmatched, matched]`` layers turns
the search into an alternating-path search for matching.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Collection, Deque, Dict, FrozenSet, Optional, Sequence, Tuple, Union

from augflow.algorithms.base import Path, Strategy, Vertex
from augflow.graph.digraph import Graph

Layers = Union[Graph, Sequence[Graph]]

# Frontier entry: (vertex, parent or None for the start, depth)
_Entry = Tuple[Vertex, Optional[Vertex], int]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a path search.

    Attributes:
        path: The vertices of the witness path from start to a target, or
            None when no path exists.
    """

    path: Optional[Path] = None

    @property
    def found(self) -> bool:
        """True when a witness path exists."""
        return self.path is not None

    @property
    def target(self) -> Optional[Vertex]:
        """Last vertex of the witness path."""
        return self.path[-1] if self.path is not None else None

    def __bool__(self) -> bool:
        return self.found


#: Shared result for "no path".
NOT_FOUND = SearchResult()


def _as_layers(graphs: Layers) -> Tuple[Graph, ...]:
    if isinstance(graphs, Graph):
        return (graphs,)
    return tuple(graphs)


def _explore(
    layers: Tuple[Graph, ...],
    start: Vertex,
    targets: Collection[Vertex],
    strategy: Strategy,
) -> Tuple[Optional[Vertex], Dict[Vertex, Optional[Vertex]]]:
    """
    Run the frontier loop.

    Returns:
        ``(hit, parent)`` where ``hit`` is the first expanded target (or None)
        and ``parent`` maps every expanded vertex to its tree parent.
    """
    parent: Dict[Vertex, Optional[Vertex]] = {}
    if not layers:
        return None, parent

    goal = frozenset(targets)
    depth_first = strategy == Strategy.DFS
    frontier: Deque[_Entry] = deque([(start, None, 0)])
    take = frontier.pop if depth_first else frontier.popleft
    n_layers = len(layers)

    while frontier:
        vertex, via, depth = take()
        if vertex in parent:
            continue
        parent[vertex] = via
        if vertex in goal:
            return vertex, parent

        succ = layers[depth % n_layers].successors(vertex)
        # Lowest vertex id is expanded first under both disciplines.
        ordered = reversed(succ) if depth_first else succ
        for nxt in ordered:
            if nxt not in parent:
                frontier.append((nxt, vertex, depth + 1))

    return None, parent


def _trace(parent: Dict[Vertex, Optional[Vertex]], end: Vertex) -> Path:
    path = [end]
    node = parent[end]
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return tuple(path)


def find_path(
    graphs: Layers,
    start: Vertex,
    targets: Collection[Vertex],
    strategy: Strategy = Strategy.DFS,
) -> SearchResult:
    """
    Find a simple path from ``start`` to any vertex in ``targets``.

    Args:
        graphs: A graph, or a sequence of graphs cycled through per hop.
        start: Vertex the path starts at.
        targets: Acceptable end vertices. If ``start`` is a target the result
            is the single-vertex path ``(start,)``.
        strategy: Frontier discipline; selects which witness is returned when
            several exist.

    Returns:
        SearchResult: ``found`` with the path, or ``NOT_FOUND``.
    """
    hit, parent = _explore(_as_layers(graphs), start, targets, Strategy(strategy))
    if hit is None:
        return NOT_FOUND
    return SearchResult(_trace(parent, hit))


def has_path(
    graphs: Layers,
    start: Vertex,
    targets: Collection[Vertex],
    strategy: Strategy = Strategy.DFS,
) -> bool:
    """Return True if ``find_path`` would find a path; no path is built."""
    hit, _ = _explore(_as_layers(graphs), start, targets, Strategy(strategy))
    return hit is not None


def reachable(graphs: Layers, start: Vertex) -> FrozenSet[Vertex]:
    """All vertices the search can reach from ``start`` (``start`` included)."""
    _, parent = _explore(_as_layers(graphs), start, frozenset(), Strategy.BFS)
    return frozenset(parent)
