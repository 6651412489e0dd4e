"""Shared records passed between the extractor, graph builders and layout engine."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum


def edge_id(source: str, target: str) -> str:
    """Return the deterministic id of the edge ``source -> target``."""
    return f"{source}->{target}"


@dataclass(frozen=True)
class SourceRecord:
    """A file path and its text, as handed over by the file retrieval layer."""

    path: str
    content: str


@dataclass(frozen=True)
class Dependency:
    """A raw, unresolved reference from a source file to a module or header."""

    source: str
    target: str


@dataclass(frozen=True)
class GraphNode:
    """A node keyed by id (file path or contributor login)."""

    id: str
    label: str


@dataclass(frozen=True)
class ContributorNode(GraphNode):
    """A contributor with aggregate authoring and reviewing activity."""

    avatar_url: str | None = None
    pr_count: int = 0
    review_count: int = 0
    last_activity: datetime | None = None


@dataclass(frozen=True)
class GraphEdge:
    """A directed edge between two node ids."""

    id: str
    source: str
    target: str

    @classmethod
    def between(cls, source: str, target: str) -> "GraphEdge":
        return cls(id=edge_id(source, target), source=source, target=target)


@dataclass(frozen=True)
class Graph:
    """Nodes (unique by id, first-seen order) and the edges between them."""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def get(self, node_id: str) -> GraphNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


class Direction(Enum):
    """Flow direction of a layered drawing."""

    LR = "LR"  # left to right
    RL = "RL"
    TB = "TB"  # top to bottom
    BT = "BT"

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LR, Direction.RL)

    @property
    def reversed(self) -> bool:
        return self in (Direction.RL, Direction.BT)


class Side(Enum):
    """Side of a node box where edges attach."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


# camelCase spellings accepted in config files
_LAYOUT_ALIASES = {
    "rankSeparation": "rank_separation",
    "ranksep": "rank_separation",
    "nodeSeparation": "node_separation",
    "nodesep": "node_separation",
    "nodeWidth": "node_width",
    "nodeHeight": "node_height",
    "marginX": "margin_x",
    "marginx": "margin_x",
    "marginY": "margin_y",
    "marginy": "margin_y",
    "maxIterations": "max_iterations",
    "rankdir": "direction",
}


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters of the layered layout. Defaults match the standard drawing."""

    direction: Direction = Direction.LR
    rank_separation: float = 100
    node_separation: float = 80
    node_width: float = 180
    node_height: float = 40
    margin_x: float = 50
    margin_y: float = 50
    max_iterations: int = 24

    @classmethod
    def from_dict(cls, values: dict | None) -> "LayoutConfig":
        """Build a config from a mapping such as the ``layout:`` config section.

        Raises:
            ValueError: If a key is not a layout parameter or a value is invalid.
        """
        return cls().with_overrides(**(values or {}))

    def with_overrides(self, **overrides) -> "LayoutConfig":
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If a key is not a layout parameter or a value is invalid.
        """
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = _LAYOUT_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown layout option: {key}")
            if value is None:
                continue
            if name == "direction":
                value = _parse_direction(value)
            elif name == "max_iterations":
                value = int(value)
                if value < 0:
                    raise ValueError(f"{key} must be >= 0, got {value}")
            else:
                value = float(value)
                if value < 0:
                    raise ValueError(f"{key} must be >= 0, got {value}")
            changes[name] = value
        return replace(self, **changes)


def _parse_direction(value: "Direction | str") -> Direction:
    if isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).upper())
    except ValueError as err:
        choices = ", ".join(d.value for d in Direction)
        raise ValueError(f"Invalid direction {value!r} (expected one of {choices})") from err


@dataclass(frozen=True)
class PositionedNode:
    """A node placed by the layout engine.

    ``x``/``y`` are the centre of the node box. The wrapped node is kept as-is.
    """

    node: GraphNode
    x: float
    y: float
    rank: int
    order: int
    inbound_side: Side
    outbound_side: Side

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def label(self) -> str:
        return self.node.label


@dataclass(frozen=True)
class LayoutResult:
    """Positioned nodes plus the unchanged input edges."""

    nodes: tuple[PositionedNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    back_edges: frozenset[tuple[str, str]] = field(default_factory=frozenset)
    width: float = 0.0
    height: float = 0.0

    def position(self, node_id: str) -> PositionedNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None
