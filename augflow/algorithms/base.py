"""Shared enums, aliases and errors for the search and solver modules."""

from __future__ import annotations

from enum import IntEnum

from augflow.graph.digraph import Edge, Path, Vertex

__all__ = ["Edge", "IterationLimitError", "Path", "Strategy", "Vertex"]


class Strategy(IntEnum):
    """
    Frontier discipline used by the path search.
    """

    #: Explore the most recently discovered continuation first (stack).
    DFS = 1
    #: Explore the least recently discovered continuation first (queue).
    #: Augmenting along these shortest paths gives the Edmonds-Karp bound.
    BFS = 2


class IterationLimitError(RuntimeError):
    """Raised when a solver loop exceeds its configured iteration bound.

    Attributes:
        limit: The bound that was exceeded.
    """

    def __init__(self, limit: int, solver: str = "solver") -> None:
        super().__init__(f"{solver} exceeded max_iterations={limit}")
        self.limit = limit
