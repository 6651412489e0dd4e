"""Longest-path rank assignment with DFS back-edge removal."""

from collections.abc import Iterable, Iterator

import networkx as nx


def find_back_edges(
    node_ids: list[str],
    successors: dict[str, list[str]],
) -> set[tuple[str, str]]:
    """Find edges that close a cycle during a depth-first search.

    The search starts from nodes in ``node_ids`` order, so the result is
    deterministic. Self-loops are always back edges.

    Args:
        node_ids: All node ids, in input order.
        successors: Adjacency list (source -> ordered targets).

    Returns:
        Set of (source, target) pairs pointing into a node on the DFS stack.
    """
    back_edges: set[tuple[str, str]] = set()
    visited: set[str] = set()
    on_stack: set[str] = set()

    for start in node_ids:
        if start in visited:
            continue
        visited.add(start)
        on_stack.add(start)
        stack: list[tuple[str, Iterator[str]]] = [(start, iter(successors.get(start, ())))]

        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                on_stack.discard(node)
                continue
            if child in on_stack:
                back_edges.add((node, child))
            elif child not in visited:
                visited.add(child)
                on_stack.add(child)
                stack.append((child, iter(successors.get(child, ()))))

    return back_edges


def compute_ranks(
    node_ids: Iterable[str],
    edges: Iterable[tuple[str, str]],
) -> tuple[dict[int, list[str]], dict[str, int], set[tuple[str, str]]]:
    """Assign each node the length of the longest path leading to it.

    Back edges are ignored, so cyclic input still terminates and every
    remaining edge ``a -> b`` satisfies ``rank[b] > rank[a]``. Edges naming
    unknown nodes are skipped.

    Args:
        node_ids: Node ids in input order.
        edges: (source, target) pairs; duplicates are allowed.

    Returns:
        nodes_by_rank: rank -> node ids at that rank, in input order.
        node_to_rank: node id -> rank.
        back_edges: (source, target) pairs excluded from ranking.
    """
    node_ids = list(dict.fromkeys(node_ids))
    known = set(node_ids)

    successors: dict[str, list[str]] = {}
    for source, target in edges:
        if source not in known or target not in known:
            continue
        children = successors.setdefault(source, [])
        if target not in children:
            children.append(target)

    back_edges = find_back_edges(node_ids, successors)

    dag = nx.DiGraph()
    dag.add_nodes_from(node_ids)
    for source, children in successors.items():
        for target in children:
            if (source, target) not in back_edges:
                dag.add_edge(source, target)

    node_to_rank: dict[str, int] = {}
    for node in nx.topological_sort(dag):
        parent_ranks = [node_to_rank[p] for p in dag.predecessors(node)]
        node_to_rank[node] = max(parent_ranks) + 1 if parent_ranks else 0

    # Group by rank, keeping input order within each rank
    nodes_by_rank: dict[int, list[str]] = {}
    for node in node_ids:
        nodes_by_rank.setdefault(node_to_rank[node], []).append(node)

    return nodes_by_rank, node_to_rank, back_edges
