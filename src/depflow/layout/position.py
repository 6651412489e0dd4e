"""Pixel coordinates and port sides for ranked, ordered nodes."""

from ..models import Direction, LayoutConfig, Side

_PORT_SIDES = {
    Direction.LR: (Side.LEFT, Side.RIGHT),
    Direction.RL: (Side.RIGHT, Side.LEFT),
    Direction.TB: (Side.TOP, Side.BOTTOM),
    Direction.BT: (Side.BOTTOM, Side.TOP),
}


def port_sides(direction: Direction) -> tuple[Side, Side]:
    """Return (inbound, outbound) sides for every node in a drawing."""
    return _PORT_SIDES[direction]


def _extent(count: int, size: float, gap: float) -> float:
    """Length taken by ``count`` boxes of ``size`` with ``gap`` between them."""
    if count == 0:
        return 0.0
    return count * size + (count - 1) * gap


def compute_positions(
    ordered: dict[int, list[str]],
    config: LayoutConfig,
) -> tuple[dict[str, tuple[float, float]], float, float]:
    """Compute the centre of every node box.

    Ranks are laid out along the flow axis (x for LR/RL, y for TB/BT), one
    column or row per rank. Nodes of a rank are stacked across the flow in
    their order, and each rank is centred against the largest one.

    Args:
        ordered: rank -> node ids in their final order.
        config: Layout parameters.

    Returns:
        positions: node id -> (x, y).
        width: Total drawing width including margins.
        height: Total drawing height including margins.
    """
    horizontal = config.direction.horizontal
    if horizontal:
        flow_size, cross_size = config.node_width, config.node_height
        flow_margin, cross_margin = config.margin_x, config.margin_y
    else:
        flow_size, cross_size = config.node_height, config.node_width
        flow_margin, cross_margin = config.margin_y, config.margin_x

    ranks = sorted(ordered)
    largest = max((len(ordered[r]) for r in ranks), default=0)
    flow_extent = _extent(len(ranks), flow_size, config.rank_separation)
    cross_extent = _extent(largest, cross_size, config.node_separation)

    positions: dict[str, tuple[float, float]] = {}
    for column, rank in enumerate(ranks):
        along = column * (flow_size + config.rank_separation) + flow_size / 2
        if config.direction.reversed:
            along = flow_extent - along
        along += flow_margin

        nodes = ordered[rank]
        offset = (cross_extent - _extent(len(nodes), cross_size, config.node_separation)) / 2
        for i, node in enumerate(nodes):
            across = cross_margin + offset + i * (cross_size + config.node_separation)
            across += cross_size / 2
            positions[node] = (along, across) if horizontal else (across, along)

    if horizontal:
        width = flow_extent + 2 * flow_margin
        height = cross_extent + 2 * cross_margin
    else:
        width = cross_extent + 2 * cross_margin
        height = flow_extent + 2 * flow_margin

    return positions, width, height
