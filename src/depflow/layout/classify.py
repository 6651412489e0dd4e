"""Edge classification based on rank relationships."""

from collections.abc import Iterable
from enum import Enum


class EdgeType(Enum):
    """Classification of edges based on rank relationship."""

    TREE = "tree"  # target_rank == source_rank + 1
    BACK = "back"  # target_rank < source_rank
    SAME_LEVEL = "same"  # target_rank == source_rank
    FORWARD_SKIP = "skip"  # target_rank > source_rank + 1


def classify_edge(source_rank: int, target_rank: int) -> EdgeType:
    """Return the type of a single edge from the ranks of its endpoints."""
    if target_rank == source_rank + 1:
        return EdgeType.TREE
    if target_rank < source_rank:
        return EdgeType.BACK
    if target_rank == source_rank:
        return EdgeType.SAME_LEVEL
    return EdgeType.FORWARD_SKIP


def classify_edges(
    edges: Iterable[tuple[str, str]],
    node_to_rank: dict[str, int],
) -> dict[EdgeType, list[tuple[str, str]]]:
    """Classify edges by rank relationship.

    Edges with an endpoint that has no rank are left out. Self-loops are
    classified as SAME_LEVEL.

    Args:
        edges: (source, target) pairs.
        node_to_rank: Mapping from node id to its rank.

    Returns:
        Dictionary mapping every EdgeType to its list of (source, target) tuples.
    """
    classified: dict[EdgeType, list[tuple[str, str]]] = {edge_type: [] for edge_type in EdgeType}

    for source, target in edges:
        source_rank = node_to_rank.get(source)
        target_rank = node_to_rank.get(target)
        if source_rank is None or target_rank is None:
            continue
        classified[classify_edge(source_rank, target_rank)].append((source, target))

    return classified
