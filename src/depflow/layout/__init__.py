"""Layered graph layout module for left-to-right dependency and review graphs.

Nodes are ranked by longest path, ordered by the barycenter heuristic and
placed on a grid of columns (or rows) with a fixed node footprint.
"""

from .classify import EdgeType, classify_edge, classify_edges
from .layered import layout, layout_graph
from .order import count_crossings, order_nodes
from .position import compute_positions, port_sides
from .rank import compute_ranks, find_back_edges

__all__ = [
    "compute_ranks",
    "find_back_edges",
    "EdgeType",
    "classify_edge",
    "classify_edges",
    "order_nodes",
    "count_crossings",
    "compute_positions",
    "port_sides",
    "layout_graph",
    "layout",
]
