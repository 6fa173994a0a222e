"""Flow network model: a graph with a source, a sink and edge capacities.

A `Network` is validated once at construction; an invalid one is never
returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from augflow.graph.digraph import Edge, Graph, Vertex


class ConstructionError(ValueError):
    """Raised when a Network is built from invalid input."""


def is_asymmetric(graph: Graph) -> bool:
    """Return True if no pair ``v, w`` has both ``(v, w)`` and ``(w, v)``.

    A self-loop ``(v, v)`` is its own reverse and makes the graph symmetric
    at ``v``.
    """
    return find_symmetric_pair(graph) is None


def find_symmetric_pair(graph: Graph) -> Optional[Edge]:
    """Return the first edge whose reverse is also present, if any."""
    for tail, head in graph.edges():
        if graph.is_edge(head, tail):
            return (tail, head)
    return None


@dataclass(frozen=True)
class Network:
    """Capacitated flow network over an asymmetric directed graph.

    Attributes:
        graph: Underlying directed graph. Must be asymmetric.
        source: Vertex where flow originates.
        sink: Vertex where flow terminates.
        capacity: Non-negative integer capacity per edge. Edges of ``graph``
            missing from the map have capacity 0.

    Raises:
        ConstructionError: If the graph has an edge in both directions, a
            capacity refers to an edge not in the graph, or a capacity is not
            a non-negative integer.
    """

    graph: Graph
    source: Vertex
    sink: Vertex
    capacity: Mapping[Edge, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        pair = find_symmetric_pair(self.graph)
        if pair is not None:
            raise ConstructionError(
                f"Graph is not asymmetric: edges {pair} and {pair[::-1]} both exist."
            )
        for edge, value in self.capacity.items():
            if not self.graph.is_edge(*edge):
                raise ConstructionError(f"Capacity given for missing edge {edge}.")
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConstructionError(
                    f"Capacity of edge {edge} must be an integer, got {value!r}."
                )
            if value < 0:
                raise ConstructionError(
                    f"Capacity of edge {edge} must be non-negative, got {value}."
                )
        object.__setattr__(self, "capacity", MappingProxyType(dict(self.capacity)))

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Vertex, Vertex, int]],
        source: Vertex,
        sink: Vertex,
    ) -> Network:
        """Build a network from ``(tail, head, capacity)`` triples.

        Args:
            edges: Edge triples. Each ``(tail, head)`` pair may appear once.
            source: Source vertex.
            sink: Sink vertex.

        Returns:
            Network: The validated network. Source and sink are vertices of
            the graph even when no edge touches them.

        Raises:
            ConstructionError: On a repeated edge or any validation failure.
        """
        capacity = {}
        edge_list: List[Edge] = []
        for tail, head, cap in edges:
            if (tail, head) in capacity:
                raise ConstructionError(f"Edge {(tail, head)} is listed twice.")
            capacity[(tail, head)] = cap
            edge_list.append((tail, head))
        graph = Graph.from_edges(edge_list, vertices=(source, sink))
        return cls(graph, source, sink, capacity)

    def capacity_of(self, edge: Edge) -> int:
        """Capacity of ``edge``; 0 for edges without an entry."""
        return self.capacity.get(edge, 0)

    def edges(self) -> List[Edge]:
        """Edges of the underlying graph in ascending order."""
        return list(self.graph.edges())

    def vertices(self) -> List[Vertex]:
        """Vertices of the underlying graph in ascending order."""
        return self.graph.vertices()
