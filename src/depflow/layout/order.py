"""Crossing reduction within ranks using the barycenter heuristic."""

from collections.abc import Iterable


def _adjacent_neighbors(
    edges: Iterable[tuple[str, str]],
    node_to_rank: dict[str, int],
) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """Split edges between adjacent ranks into previous/next-rank neighbour lists.

    Edge direction does not matter here, only which rank each end sits on.
    """
    prev_neighbors: dict[str, list[str]] = {}
    next_neighbors: dict[str, list[str]] = {}

    for source, target in edges:
        source_rank = node_to_rank.get(source)
        target_rank = node_to_rank.get(target)
        if source_rank is None or target_rank is None:
            continue
        if target_rank == source_rank + 1:
            upper, lower = source, target
        elif source_rank == target_rank + 1:
            upper, lower = target, source
        else:
            continue
        if lower not in next_neighbors.setdefault(upper, []):
            next_neighbors[upper].append(lower)
            prev_neighbors.setdefault(lower, []).append(upper)

    return prev_neighbors, next_neighbors


def count_crossings(
    layers: list[list[str]],
    next_neighbors: dict[str, list[str]],
) -> int:
    """Count edge crossings between each pair of consecutive layers."""
    total = 0
    for upper, lower in zip(layers, layers[1:]):
        lower_pos = {node: i for i, node in enumerate(lower)}
        segments = [
            (i, lower_pos[child])
            for i, node in enumerate(upper)
            for child in next_neighbors.get(node, ())
            if child in lower_pos
        ]
        for a in range(len(segments)):
            for b in range(a + 1, len(segments)):
                (u1, l1), (u2, l2) = segments[a], segments[b]
                if (u1 - u2) * (l1 - l2) < 0:
                    total += 1
    return total


def _reorder(
    layer: list[str],
    fixed_layer: list[str],
    neighbors: dict[str, list[str]],
) -> list[str]:
    """Sort a layer by the mean position of each node's neighbours in ``fixed_layer``.

    Nodes without neighbours there keep their slot; ties keep current order.
    """
    fixed_pos = {node: i for i, node in enumerate(fixed_layer)}

    movable: list[tuple[float, int, str]] = []
    free_slots: list[int] = []
    for i, node in enumerate(layer):
        positions = [fixed_pos[n] for n in neighbors.get(node, ()) if n in fixed_pos]
        if positions:
            movable.append((sum(positions) / len(positions), i, node))
            free_slots.append(i)

    result = list(layer)
    for slot, (_, _, node) in zip(free_slots, sorted(movable)):
        result[slot] = node
    return result


def order_nodes(
    nodes_by_rank: dict[int, list[str]],
    node_to_rank: dict[str, int],
    edges: Iterable[tuple[str, str]],
    max_iterations: int = 24,
) -> dict[int, list[str]]:
    """Order nodes within each rank to reduce edge crossings.

    Sweeps alternate downward (each rank follows the previous one) and upward
    (each rank follows the next one). The ordering with the fewest crossings
    seen is returned. Iteration stops after two consecutive sweeps that change
    nothing, when there are no crossings left, or after ``max_iterations``.

    Args:
        nodes_by_rank: rank -> node ids in initial order.
        node_to_rank: node id -> rank.
        edges: (source, target) pairs; edges not joining adjacent ranks are ignored.
        max_iterations: Maximum number of sweeps.

    Returns:
        rank -> node ids in their final order.
    """
    ranks = sorted(nodes_by_rank)
    layers = [list(nodes_by_rank[r]) for r in ranks]
    prev_neighbors, next_neighbors = _adjacent_neighbors(edges, node_to_rank)

    best = [list(layer) for layer in layers]
    best_crossings = count_crossings(layers, next_neighbors)
    unchanged_sweeps = 0

    for iteration in range(max_iterations):
        if best_crossings == 0 or unchanged_sweeps >= 2:
            break

        changed = False
        if iteration % 2 == 0:
            for i in range(1, len(layers)):
                new_layer = _reorder(layers[i], layers[i - 1], prev_neighbors)
                changed |= new_layer != layers[i]
                layers[i] = new_layer
        else:
            for i in range(len(layers) - 2, -1, -1):
                new_layer = _reorder(layers[i], layers[i + 1], next_neighbors)
                changed |= new_layer != layers[i]
                layers[i] = new_layer

        unchanged_sweeps = 0 if changed else unchanged_sweeps + 1

        crossings = count_crossings(layers, next_neighbors)
        if crossings < best_crossings:
            best = [list(layer) for layer in layers]
            best_crossings = crossings

    return dict(zip(ranks, best))
