"""Path search and augmenting-path solvers (max-flow, matching)."""
