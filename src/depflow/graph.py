"""Build file dependency graphs from source records."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import Dependency, Graph, GraphEdge, GraphNode, SourceRecord
from .parse_source import extract_dependencies, is_local_specifier


def node_label(node_id: str) -> str:
    """Return the last path segment of an id, or the id itself if that is empty."""
    return node_id.rsplit("/", 1)[-1] or node_id


@dataclass
class CodeGraphBuilder:
    """Accumulates file nodes and dependency edges.

    The builder owns its containers; ``build()`` hands out an immutable snapshot.
    Nodes are deduplicated by id in first-seen order, edges are not deduplicated.
    """

    local_only: bool = False
    node_ids: dict[str, None] = field(default_factory=dict)  # Ordered set
    edges: list[GraphEdge] = field(default_factory=list)

    def keeps(self, dep: Dependency) -> bool:
        """Check whether a dependency target should become a node."""
        if self.local_only:
            return is_local_specifier(dep.target)
        return True

    def add_file(self, path: str, content: str) -> int:
        """Add a file and its dependencies.

        Args:
            path: File path, used as the node id.
            content: File text to scan.

        Returns:
            Number of edges added for this file.
        """
        self.node_ids.setdefault(path, None)

        added = 0
        for dep in extract_dependencies(path, content):
            if not self.keeps(dep):
                continue
            # Targets become nodes even if they were never scanned themselves
            self.node_ids.setdefault(dep.target, None)
            self.edges.append(GraphEdge.between(dep.source, dep.target))
            added += 1
        return added

    def build(self) -> Graph:
        nodes = tuple(GraphNode(id=node_id, label=node_label(node_id)) for node_id in self.node_ids)
        return Graph(nodes=nodes, edges=tuple(self.edges))


def build_code_graph(files: Iterable[SourceRecord], local_only: bool = False) -> Graph:
    """Build a file dependency graph.

    Args:
        files: Source records in the order they should appear as nodes.
        local_only: Only keep relative or path-like targets, dropping bare
            package names such as ``react``.

    Returns:
        Graph with one node per file path and per kept target.
    """
    builder = CodeGraphBuilder(local_only=local_only)
    for record in files:
        builder.add_file(record.path, record.content)
    return builder.build()


def build_reverse_edges(graph: Graph) -> dict[str, set[str]]:
    """Map each node id to the set of node ids with an edge into it."""
    reverse: dict[str, set[str]] = {}
    for edge in graph.edges:
        reverse.setdefault(edge.target, set()).add(edge.source)
    return reverse


def compute_in_degrees(graph: Graph) -> dict[str, int]:
    """Count distinct importers of each node; nodes nobody imports get 0."""
    reverse = build_reverse_edges(graph)
    return {node_id: len(reverse.get(node_id, ())) for node_id in graph.node_ids()}
