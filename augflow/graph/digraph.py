"""Immutable adjacency-list directed graph.

`Graph` maps each vertex to a strictly increasing tuple of successors. Values
are never modified in place: every mutator (edge insertion, removal, toggling)
and every structural operation (union, intersection, transpose) returns a new
graph.

Vertices are non-negative integers. Any vertex that appears as a successor is
registered as a vertex of the graph, so isolated and sink-only vertices are
listed by `vertices()` and survive `transpose()`.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from augflow.graph import sorted_lists

Vertex = int
Edge = Tuple[Vertex, Vertex]
Path = Tuple[Vertex, ...]
Adjacency = Tuple[Vertex, ...]

_EMPTY: Adjacency = ()


class Graph:
    """
    Directed graph stored as a vertex -> sorted successor tuple mapping.

    This class guarantees:
      - Each adjacency tuple is strictly increasing (sorted, no duplicates).
      - Every successor is also a vertex of the graph.
      - ``successors(v)`` returns an empty tuple for an unknown vertex.
      - Instances are immutable; operations return new graphs.

    Equality is structural: two graphs are equal when they have the same
    vertices and the same edges.
    """

    __slots__ = ("_adj", "_transpose")

    def __init__(self, adjacency: Optional[Mapping[Vertex, Iterable[Vertex]]] = None):
        """
        Build a graph from a vertex -> successors mapping.

        Adjacency lists are normalized (sorted, deduplicated), so callers may
        pass unsorted input.

        Args:
            adjacency: Mapping from vertex to an iterable of successors.
        """
        adj: Dict[Vertex, Adjacency] = {}
        if adjacency:
            for vertex, succ in adjacency.items():
                adj[vertex] = tuple(sorted_lists.normalize(succ))
        self._adj = _register_successors(adj)
        self._transpose: Optional[Graph] = None

    @classmethod
    def _from_normalized(cls, adj: Dict[Vertex, Adjacency]) -> Graph:
        """Wrap an already normalized adjacency dict without copying it."""
        graph = cls.__new__(cls)
        graph._adj = _register_successors(adj)
        graph._transpose = None
        return graph

    #
    # Construction
    #
    @classmethod
    def from_lists(cls, lists: Sequence[Iterable[Vertex]]) -> Graph:
        """
        Build a graph from adjacency lists indexed by vertex ``0..n-1``.

        Args:
            lists: ``lists[v]`` holds the successors of vertex ``v``.

        Returns:
            Graph: A graph with vertices ``0..n-1`` plus any successor outside
            that range.
        """
        return cls({vertex: succ for vertex, succ in enumerate(lists)})

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Vertex, Iterable[Vertex]]]) -> Graph:
        """
        Build a graph from explicit ``(vertex, successors)`` pairs.

        A vertex listed more than once keeps the union of its successor lists.
        """
        adj: Dict[Vertex, Adjacency] = {}
        for vertex, succ in pairs:
            merged = sorted_lists.union(
                adj.get(vertex, _EMPTY), sorted_lists.normalize(succ)
            )
            adj[vertex] = tuple(merged)
        return cls._from_normalized(adj)

    @classmethod
    def from_edges(
        cls, edges: Iterable[Edge], vertices: Iterable[Vertex] = ()
    ) -> Graph:
        """
        Build a graph from an edge list.

        Args:
            edges: ``(tail, head)`` pairs. Duplicates are ignored.
            vertices: Extra vertices to include even if no edge touches them.
        """
        adj: Dict[Vertex, List[Vertex]] = {v: [] for v in vertices}
        for tail, head in edges:
            adj.setdefault(tail, []).append(head)
        return cls(adj)

    #
    # Queries
    #
    def successors(self, vertex: Vertex) -> Adjacency:
        """Sorted successors of ``vertex``; empty for an unknown vertex."""
        return self._adj.get(vertex, _EMPTY)

    def predecessors(self, vertex: Vertex) -> Adjacency:
        """
        Sorted predecessors of ``vertex``.

        Computed from the transpose, which is built once per graph instance
        and then reused by later calls.
        """
        return self.transpose().successors(vertex)

    def vertices(self) -> List[Vertex]:
        """All vertices in ascending order."""
        return sorted(self._adj)

    def size(self) -> int:
        """Number of vertices."""
        return len(self._adj)

    def edge_count(self) -> int:
        """Number of directed edges."""
        return sum(len(succ) for succ in self._adj.values())

    def edges(self) -> Iterator[Edge]:
        """Yield every edge in ascending ``(tail, head)`` order."""
        for tail in sorted(self._adj):
            for head in self._adj[tail]:
                yield (tail, head)

    def adjacency(self) -> Iterator[Tuple[Vertex, Adjacency]]:
        """Yield ``(vertex, successors)`` pairs in ascending vertex order."""
        for vertex in sorted(self._adj):
            yield vertex, self._adj[vertex]

    def no_successors(self) -> FrozenSet[Vertex]:
        """Vertices whose adjacency list is empty."""
        return frozenset(v for v, succ in self._adj.items() if not succ)

    def is_edge(self, tail: Vertex, head: Vertex) -> bool:
        """Return True if the edge ``(tail, head)`` exists."""
        succ = self._adj.get(tail, _EMPTY)
        idx = bisect_left(succ, head)
        return idx < len(succ) and succ[idx] == head

    def is_path(self, path: Sequence[Vertex]) -> bool:
        """Return True if every consecutive pair in ``path`` is an edge."""
        return all(self.is_edge(a, b) for a, b in zip(path, path[1:]))

    def is_symmetric(self) -> bool:
        """Return True if every edge has its reverse in the graph."""
        return all(self.is_edge(head, tail) for tail, head in self.edges())

    #
    # Edge mutation (each returns a new graph)
    #
    def add_edge(self, tail: Vertex, head: Vertex) -> Graph:
        """Return a graph with ``(tail, head)`` added; idempotent."""
        return self._combine_at(tail, (head,), sorted_lists.union)

    def add_bi_edge(self, a: Vertex, b: Vertex) -> Graph:
        """Return a graph with both ``(a, b)`` and ``(b, a)`` added."""
        return self.add_edge(a, b).add_edge(b, a)

    def remove_edge(self, tail: Vertex, head: Vertex) -> Graph:
        """Return a graph without ``(tail, head)``. Absent edges are ignored."""
        if tail not in self._adj:
            return self
        return self._combine_at(tail, (head,), sorted_lists.difference)

    def remove_bi_edge(self, a: Vertex, b: Vertex) -> Graph:
        """Return a graph without ``(a, b)`` and ``(b, a)``."""
        return self.remove_edge(a, b).remove_edge(b, a)

    def xor_edge(self, tail: Vertex, head: Vertex) -> Graph:
        """Return a graph with membership of ``(tail, head)`` toggled."""
        return self._combine_at(tail, (head,), sorted_lists.symmetric_difference)

    def xor_bi_edge(self, a: Vertex, b: Vertex) -> Graph:
        """Toggle both ``(a, b)`` and ``(b, a)``."""
        return self.xor_edge(a, b).xor_edge(b, a)

    def xor_edges(self, edges: Iterable[Edge]) -> Graph:
        """
        Toggle several edges at once with a single copy of the adjacency.

        An edge listed an even number of times ends up unchanged.
        """
        toggles: Dict[Vertex, List[Vertex]] = {}
        for tail, head in edges:
            heads = toggles.setdefault(tail, [])
            if head in heads:
                heads.remove(head)
            else:
                heads.append(head)
        adj = dict(self._adj)
        for tail, heads in toggles.items():
            if not heads:
                continue
            adj[tail] = tuple(
                sorted_lists.symmetric_difference(adj.get(tail, _EMPTY), sorted(heads))
            )
        return Graph._from_normalized(adj)

    def _combine_at(
        self,
        vertex: Vertex,
        heads: Adjacency,
        combine: Callable[[Sequence[Vertex], Sequence[Vertex]], List[Vertex]],
    ) -> Graph:
        adj = dict(self._adj)
        adj[vertex] = tuple(combine(adj.get(vertex, _EMPTY), heads))
        return Graph._from_normalized(adj)

    #
    # Structural operations
    #
    def transpose(self) -> Graph:
        """
        Return the graph with every edge reversed.

        All vertices are kept, including those with no incoming edges in the
        original graph.
        """
        if self._transpose is None:
            reversed_adj: Dict[Vertex, List[Vertex]] = {v: [] for v in self._adj}
            # Tails are visited in ascending order, so each list stays sorted.
            for tail in sorted(self._adj):
                for head in self._adj[tail]:
                    reversed_adj[head].append(tail)
            transposed = Graph._from_normalized(
                {v: tuple(succ) for v, succ in reversed_adj.items()}
            )
            transposed._transpose = self
            self._transpose = transposed
        return self._transpose

    def union(self, other: Graph) -> Graph:
        """Key-wise union of adjacency lists; vertices of either graph."""
        adj = dict(self._adj)
        for vertex, succ in other._adj.items():
            adj[vertex] = tuple(sorted_lists.union(adj.get(vertex, _EMPTY), succ))
        return Graph._from_normalized(adj)

    def intersection(self, other: Graph) -> Graph:
        """Key-wise intersection of adjacency lists; vertices of both graphs."""
        adj = {
            vertex: tuple(sorted_lists.intersection(succ, other._adj[vertex]))
            for vertex, succ in self._adj.items()
            if vertex in other._adj
        }
        return Graph._from_normalized(adj)

    def symmetrise(self) -> Graph:
        """Union of the graph with its transpose."""
        return self.union(self.transpose())

    #
    # Python protocol
    #
    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices())

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adj == other._adj

    def __hash__(self) -> int:
        return hash(frozenset(self._adj.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{v}: {list(succ)}" for v, succ in self.adjacency())
        return f"Graph({{{body}}})"


def _register_successors(adj: Dict[Vertex, Adjacency]) -> Dict[Vertex, Adjacency]:
    """Add every successor that is not yet a key, with an empty adjacency."""
    missing = {head for succ in adj.values() for head in succ if head not in adj}
    for vertex in missing:
        adj[vertex] = _EMPTY
    return adj
