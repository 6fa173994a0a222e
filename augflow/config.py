"""Configuration classes for augflow solvers."""

from dataclasses import dataclass
from typing import Optional

from augflow.algorithms.base import Strategy


@dataclass
class SolverConfig:
    """Defaults applied when a solver call leaves an option as ``None``."""

    # Frontier discipline for augmenting-path searches
    default_strategy: Strategy = Strategy.BFS

    # Upper bound on augmentations per solver call; None means unbounded.
    # Depth-first search can need a number of augmentations that grows with
    # the capacity values, so long-running callers may want to set this.
    max_iterations: Optional[int] = None

    def resolve_strategy(self, strategy: Optional[Strategy]) -> Strategy:
        """Return ``strategy`` or the configured default."""
        return self.default_strategy if strategy is None else Strategy(strategy)

    def resolve_max_iterations(self, max_iterations: Optional[int]) -> Optional[int]:
        """Return ``max_iterations`` or the configured default."""
        return self.max_iterations if max_iterations is None else max_iterations


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
