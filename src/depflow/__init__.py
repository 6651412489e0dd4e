"""Dependency and code review graphs with a layered left-to-right layout."""

from .contributors import PullRequest, build_contributor_graph, pull_requests_from_payload
from .graph import build_code_graph
from .layout import layout, layout_graph
from .models import (
    ContributorNode,
    Dependency,
    Direction,
    Graph,
    GraphEdge,
    GraphNode,
    LayoutConfig,
    LayoutResult,
    PositionedNode,
    Side,
    SourceRecord,
)
from .parse_source import extract_dependencies

__all__ = [
    "extract_dependencies",
    "build_code_graph",
    "build_contributor_graph",
    "pull_requests_from_payload",
    "layout",
    "layout_graph",
    "PullRequest",
    "SourceRecord",
    "Dependency",
    "GraphNode",
    "ContributorNode",
    "GraphEdge",
    "Graph",
    "Direction",
    "Side",
    "LayoutConfig",
    "PositionedNode",
    "LayoutResult",
]
