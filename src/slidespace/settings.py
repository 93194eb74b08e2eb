"""Caller-held settings records for search and presentation."""

from dataclasses import asdict, dataclass

from slidespace.errors import validate_positive, validate_range
from slidespace.search.explorer import ExpansionPolicy, default_stop_on_goal


@dataclass
class SearchSettings:
    """Parameters for one exploration.

    Attributes:
        depth_limit: Deepest level to explore, or None to exhaust the space
        stop_on_goal: Stop at the first node whose target block exits;
            None picks the policy default (on for SLIDE, off for UNIT_STEP)
        policy: Successor generation policy
    """

    depth_limit: int | None = 8
    stop_on_goal: bool | None = None
    policy: ExpansionPolicy = ExpansionPolicy.SLIDE

    def __post_init__(self) -> None:
        if self.stop_on_goal is None:
            self.stop_on_goal = default_stop_on_goal(self.policy)


@dataclass
class GraphSettings:
    """Presentation parameters handed to the rendering layer.

    Attributes:
        node_radius: Sphere radius for nodes
        node_color: Colour of ordinary nodes
        active_color: Colour of solution-path nodes and the selected node
        goal_color: Colour of the solved node
        edge_color: Colour of ordinary edges
        node_opacity: Node opacity (0.1 - 1.0)
        edge_opacity: Edge opacity (0.1 - 1.0)
        node_brightness: Emissive multiplier for nodes
    """

    node_radius: float = 0.2
    node_color: str = "#4ecdc4"
    active_color: str = "#ff6b6b"
    goal_color: str = "#ffd700"
    edge_color: str = "#666666"
    node_opacity: float = 1.0
    edge_opacity: float = 0.6
    node_brightness: float = 1.0

    def __post_init__(self) -> None:
        validate_positive(self.node_radius, "node_radius")
        validate_range(self.node_opacity, 0.0, 1.0, "node_opacity")
        validate_range(self.edge_opacity, 0.0, 1.0, "edge_opacity")

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
