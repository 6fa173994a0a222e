"""Graph primitives and helpers.

This package provides the immutable adjacency-list graph type `Graph`, the
sorted-list merge primitives it is built on (`sorted_lists`), edge-keyed
integer map arithmetic (`edge_map`) and NetworkX conversion (`convert`).
"""
