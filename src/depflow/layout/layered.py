"""Layered (Sugiyama-style) layout of a node/edge graph."""

from collections.abc import Sequence

from ..models import Graph, GraphEdge, GraphNode, LayoutConfig, LayoutResult, PositionedNode
from .order import order_nodes
from .position import compute_positions, port_sides
from .rank import compute_ranks


def layout_graph(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Assign rank, order, coordinates and port sides to every node.

    Edges whose source or target is not among ``nodes`` take no part in the
    layout but are still returned. Cycles are broken by ignoring back edges.

    Args:
        nodes: Nodes to place.
        edges: Directed edges between them; returned unchanged.
        config: Layout parameters; defaults to ``LayoutConfig()``.

    Returns:
        LayoutResult with one PositionedNode per input node.
    """
    config = config or LayoutConfig()
    edges = tuple(edges)
    pairs = [(edge.source, edge.target) for edge in edges]

    nodes_by_rank, node_to_rank, back_edges = compute_ranks((n.id for n in nodes), pairs)
    ordered = order_nodes(nodes_by_rank, node_to_rank, pairs, config.max_iterations)
    positions, width, height = compute_positions(ordered, config)

    order_in_rank = {node: i for rank_nodes in ordered.values() for i, node in enumerate(rank_nodes)}
    inbound, outbound = port_sides(config.direction)

    positioned = []
    for node in nodes:
        x, y = positions[node.id]
        positioned.append(
            PositionedNode(
                node=node,
                x=x,
                y=y,
                rank=node_to_rank[node.id],
                order=order_in_rank[node.id],
                inbound_side=inbound,
                outbound_side=outbound,
            )
        )

    return LayoutResult(
        nodes=tuple(positioned),
        edges=edges,
        back_edges=frozenset(back_edges),
        width=width,
        height=height,
    )


def layout(graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
    """Lay out a built graph; see ``layout_graph``."""
    return layout_graph(graph.nodes, graph.edges, config)
