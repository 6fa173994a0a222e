"""Pointwise arithmetic over edge-keyed integer maps.

An edge map is a plain ``dict`` from ``(tail, head)`` to ``int``. A missing
edge reads as zero, and results never store zero entries, so two maps that
agree on every lookup also compare equal.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Collection, Dict, Iterable, Mapping, Tuple

from augflow.graph.digraph import Edge, Vertex

EdgeMap = Dict[Edge, int]


def prune(values: Mapping[Edge, int]) -> EdgeMap:
    """Copy of ``values`` without zero entries."""
    return {edge: value for edge, value in values.items() if value != 0}


def from_list(items: Iterable[Tuple[Edge, int]]) -> EdgeMap:
    """Build a map from ``(edge, value)`` pairs; repeated edges are summed."""
    acc: Dict[Edge, int] = defaultdict(int)
    for edge, value in items:
        acc[edge] += value
    return prune(acc)


def lookup(values: Mapping[Edge, int], edge: Edge) -> int:
    """Value at ``edge``, or 0 when absent."""
    return values.get(edge, 0)


def add(left: Mapping[Edge, int], right: Mapping[Edge, int]) -> EdgeMap:
    """Pointwise sum."""
    acc = dict(left)
    for edge, value in right.items():
        acc[edge] = acc.get(edge, 0) + value
    return prune(acc)


def negate(values: Mapping[Edge, int]) -> EdgeMap:
    """Pointwise negation."""
    return {edge: -value for edge, value in values.items() if value != 0}


def subtract(left: Mapping[Edge, int], right: Mapping[Edge, int]) -> EdgeMap:
    """Pointwise difference ``left - right``."""
    return add(left, negate(right))


def scale(values: Mapping[Edge, int], factor: int) -> EdgeMap:
    """Multiply every value by ``factor``."""
    return prune({edge: value * factor for edge, value in values.items()})


def swap_keys(values: Mapping[Edge, int]) -> EdgeMap:
    """Re-key every entry from ``(a, b)`` to ``(b, a)``."""
    return prune({(head, tail): value for (tail, head), value in values.items()})


def restrict(values: Mapping[Edge, int], domain: Collection[Edge]) -> EdgeMap:
    """Keep only entries whose edge belongs to ``domain``."""
    return {edge: value for edge, value in values.items() if edge in domain and value}


def net_at(values: Mapping[Edge, int], vertex: Vertex) -> int:
    """Sum over edges leaving ``vertex`` minus sum over edges entering it."""
    total = 0
    for (tail, head), value in values.items():
        if tail == vertex:
            total += value
        if head == vertex:
            total -= value
    return total
