"""Generate output files from built and laid out graphs."""

import json
from pathlib import Path

from .graph import compute_in_degrees
from .layout import EdgeType, classify_edge, classify_edges
from .models import ContributorNode, Graph, GraphEdge, GraphNode, LayoutResult


def node_data(node: GraphNode) -> dict:
    """Return the display attributes of a node in the renderer's key style."""
    data: dict = {"label": node.label}
    if isinstance(node, ContributorNode):
        data["avatarUrl"] = node.avatar_url
        data["prCount"] = node.pr_count
        data["reviewCount"] = node.review_count
        data["lastActivity"] = node.last_activity.isoformat() if node.last_activity else None
    return data


def edge_to_dict(edge: GraphEdge) -> dict:
    return {"id": edge.id, "source": edge.source, "target": edge.target}


def laid_out_edge_to_dict(edge: GraphEdge, node_to_rank: dict[str, int]) -> dict:
    """Like ``edge_to_dict`` plus the edge's rank relationship as ``type``.

    The type is ``None`` when an endpoint is not a laid out node.
    """
    data = edge_to_dict(edge)
    source_rank = node_to_rank.get(edge.source)
    target_rank = node_to_rank.get(edge.target)
    if source_rank is None or target_rank is None:
        data["type"] = None
    else:
        data["type"] = classify_edge(source_rank, target_rank).value
    return data


def graph_to_dict(graph: Graph) -> dict:
    """Convert a graph to plain JSON-ready data."""
    return {
        "nodes": [{"id": node.id, "data": node_data(node)} for node in graph.nodes],
        "edges": [edge_to_dict(edge) for edge in graph.edges],
    }


def layout_to_dict(result: LayoutResult) -> dict:
    """Convert a layout result to plain JSON-ready data.

    Positions are box centres; ``sourcePosition`` is the outbound side and
    ``targetPosition`` the inbound side. Each edge carries its ``type``
    (tree, skip, same or back) so the renderer can style it.
    """
    node_to_rank = {node.id: node.rank for node in result.nodes}
    return {
        "nodes": [
            {
                "id": node.id,
                "data": node_data(node.node),
                "position": {"x": node.x, "y": node.y},
                "rank": node.rank,
                "sourcePosition": node.outbound_side.value,
                "targetPosition": node.inbound_side.value,
            }
            for node in result.nodes
        ],
        "edges": [laid_out_edge_to_dict(edge, node_to_rank) for edge in result.edges],
        "backEdges": sorted(f"{source}->{target}" for source, target in result.back_edges),
        "width": result.width,
        "height": result.height,
    }


def generate_json(result: LayoutResult, output_file: Path) -> None:
    """Write the laid out graph as JSON.

    Args:
        result: Layout to write.
        output_file: Path to write the JSON file.
    """
    with open(output_file, "w") as f:
        json.dump(layout_to_dict(result), f, indent=2)


def generate_summary(graph: Graph, result: LayoutResult, output_file: Path) -> None:
    """Generate human-readable summary file.

    Args:
        graph: The built graph.
        result: Its layout.
        output_file: Path to write the summary file.
    """
    contributors = [node for node in graph.nodes if isinstance(node, ContributorNode)]
    node_to_rank = {node.id: node.rank for node in result.nodes}
    classified = classify_edges([(e.source, e.target) for e in result.edges], node_to_rank)

    with open(output_file, "w") as f:
        f.write("=" * 60 + "\n")
        f.write("depflow Graph Summary\n")
        f.write("=" * 60 + "\n\n")

        f.write(f"Nodes: {len(graph.nodes)}\n")
        f.write(f"Edges: {len(graph.edges)}\n")
        f.write(f"Ranks: {len(set(node_to_rank.values()))}\n")
        f.write(f"Back edges (cycles): {len(result.back_edges)}\n\n")

        f.write("Edge Types:\n")
        f.write("-" * 40 + "\n")
        for edge_type in EdgeType:
            f.write(f"  {len(classified[edge_type]):4d}  {edge_type.value}\n")
        f.write("\n")

        if contributors:
            f.write("Top 10 Authors:\n")
            f.write("-" * 40 + "\n")
            for node in sorted(contributors, key=lambda n: (-n.pr_count, n.id))[:10]:
                f.write(f"  {node.pr_count:4d} PRs      {node.id}\n")

            f.write("\nTop 10 Reviewers:\n")
            f.write("-" * 40 + "\n")
            for node in sorted(contributors, key=lambda n: (-n.review_count, n.id))[:10]:
                f.write(f"  {node.review_count:4d} reviews  {node.id}\n")
        else:
            f.write("Top 20 Most-Imported:\n")
            f.write("-" * 40 + "\n")
            in_degrees = compute_in_degrees(graph)
            for node_id, count in sorted(in_degrees.items(), key=lambda x: (-x[1], x[0]))[:20]:
                if count == 0:
                    break
                f.write(f"  {count:4d}x  {node_id}\n")
