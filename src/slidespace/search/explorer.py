"""Breadth-first exploration of a board's configuration space."""

import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from slidespace.errors import ValidationError
from slidespace.model.block import DIRECTION_DELTAS, Block
from slidespace.model.board import Board
from slidespace.model.state import Configuration, Move

logger = logging.getLogger(__name__)


class ExpansionPolicy(Enum):
    """How a node's successors are generated and recorded."""

    SLIDE = "slide"  # multi-cell slides, tree edges only
    UNIT_STEP = "unit"  # one-cell steps, edges to revisited nodes kept


def default_stop_on_goal(policy: ExpansionPolicy) -> bool:
    """Slides search for the exit; unit steps map the whole space."""
    return policy is ExpansionPolicy.SLIDE


@dataclass
class SearchNode:
    """A configuration plus the provenance of its discovery.

    Attributes:
        id: Creation index (root = 0)
        depth: Number of moves from the root
        configuration: Block positions at this node
        parent: Id of the node this one was discovered from (None for root)
        move: Move that produced this node from its parent (None for root)
        children: Ids of nodes first discovered from this one
    """

    id: int
    depth: int
    configuration: Configuration
    parent: int | None = None
    move: Move | None = None
    children: list[int] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Canonical key of the configuration."""
        return self.configuration.key

    @property
    def label(self) -> str:
        """Display label: the move that produced this node, or "start"."""
        return self.move.label if self.move is not None else "start"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "depth": self.depth,
            "configuration": self.configuration.to_dict(),
            "parent": self.parent,
            "move": self.move.to_dict() if self.move is not None else None,
            "children": list(self.children),
        }

    def __repr__(self) -> str:
        return f"SearchNode({self.id}, depth={self.depth}, {self.label})"


@dataclass
class SearchResult:
    """Outcome of an exploration.

    Attributes:
        nodes: Nodes in creation order; ``nodes[i].id == i``
        index: Canonical key -> node id
        edges: (from, to) node id pairs; a multiset under UNIT_STEP
        depth_counts: Depth -> number of nodes at that depth
        solved_node_id: First node, in breadth-first order, whose target
            block reached the right boundary
        policy: Expansion policy that produced this result
    """

    nodes: list[SearchNode] = field(default_factory=list)
    index: dict[str, int] = field(default_factory=dict)
    edges: list[tuple[int, int]] = field(default_factory=list)
    depth_counts: dict[int, int] = field(default_factory=dict)
    solved_node_id: int | None = None
    policy: ExpansionPolicy = ExpansionPolicy.SLIDE

    @property
    def root(self) -> SearchNode:
        return self.nodes[0]

    @property
    def is_solved(self) -> bool:
        return self.solved_node_id is not None

    def node_for(self, configuration: Configuration) -> SearchNode | None:
        """Find the node carrying a configuration, if it was discovered."""
        node_id = self.index.get(configuration.key)
        return self.nodes[node_id] if node_id is not None else None

    @property
    def solution_path(self) -> list[int]:
        """Node ids from the root to the solved node (empty if unsolved)."""
        return extract_path(self.nodes, self.solved_node_id)

    @property
    def move_count(self) -> int | None:
        """Number of moves in the solution, or None if unsolved."""
        path = self.solution_path
        return len(path) - 1 if path else None

    def solution_moves(self) -> list[Move]:
        """Moves along the solution path, in playing order."""
        return [self.nodes[node_id].move for node_id in self.solution_path[1:]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "policy": self.policy.value,
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [list(edge) for edge in self.edges],
            "depthCounts": {str(depth): count for depth, count in sorted(self.depth_counts.items())},
            "solvedNodeId": self.solved_node_id,
        }


class Explorer:
    """Breadth-first explorer over the configurations of one board.

    Successors are enumerated in a fixed order: blocks in board order, then
    directions (left, right for horizontal blocks; up, down for vertical
    blocks; left, right, up, down for free blocks), then distance ascending.
    Node ids, and therefore which goal node is reported, follow this order.
    """

    def __init__(self, board: Board, policy: ExpansionPolicy = ExpansionPolicy.SLIDE) -> None:
        """Initialize the explorer.

        Args:
            board: Board to explore; validated here
            policy: Successor generation policy

        Raises:
            ValidationError: If the board violates its preconditions
        """
        board.validate()
        self.board = board
        self.policy = policy

    def candidate_moves(self, configuration: Configuration) -> list[Move]:
        """Enumerate the legal moves from a configuration.

        Under SLIDE every reachable distance in each direction is a separate
        move and the scan stops at the first obstruction or boundary. Under
        UNIT_STEP only the one-cell step is produced.

        Args:
            configuration: Configuration to move from

        Returns:
            Moves in enumeration order
        """
        board = self.board
        grid = configuration.occupancy(board.blocks, board.width, board.height)
        max_distance = 1 if self.policy is ExpansionPolicy.UNIT_STEP else max(board.width, board.height)

        moves: list[Move] = []
        for block in board.blocks:
            x, y = configuration[block.id]
            for direction in block.orientation.directions:
                dx, dy = DIRECTION_DELTAS[direction]
                for step in range(1, max_distance + 1):
                    nx, ny = x + dx * step, y + dy * step
                    if not self._fits(block, nx, ny, grid):
                        break
                    moves.append(Move(block.id, nx, ny, direction, step))
        return moves

    def _fits(self, block: Block, x: int, y: int, grid: list[list[str | None]]) -> bool:
        """Check that a block placed at (x, y) is in-grid and touches no other block."""
        if x < 0 or y < 0 or x + block.w > self.board.width or y + block.h > self.board.height:
            return False
        for cx, cy in block.cells(x, y):
            occupant = grid[cy][cx]
            if occupant is not None and occupant != block.id:
                return False
        return True

    def explore(self, depth_limit: int | None = 8, stop_on_goal: bool | None = None) -> SearchResult:
        """Run the breadth-first search.

        Args:
            depth_limit: Deepest level to create nodes at (>= 1), or None to
                exhaust the reachable space
            stop_on_goal: Return as soon as a node with the target block at
                the right boundary is reached. None uses the policy default:
                goal-directed for SLIDE, free exploration for UNIT_STEP

        Returns:
            The search result

        Raises:
            ValidationError: If depth_limit is below 1, or stop_on_goal is
                requested on a board without a target block
        """
        if depth_limit is not None:
            if isinstance(depth_limit, bool) or not isinstance(depth_limit, int) or depth_limit < 1:
                raise ValidationError("depth_limit", depth_limit, "integer >= 1 or None")
        if stop_on_goal is None:
            stop_on_goal = default_stop_on_goal(self.policy)
        if stop_on_goal and self.board.target is None:
            raise ValidationError("blocks.isTarget", None, "at least one target block")

        keep_revisits = self.policy is ExpansionPolicy.UNIT_STEP
        root = SearchNode(id=0, depth=0, configuration=self.board.initial_configuration())
        result = SearchResult(
            nodes=[root],
            index={root.key: root.id},
            depth_counts={0: 1},
            policy=self.policy,
        )

        if stop_on_goal and self.board.is_solved(root.configuration):
            result.solved_node_id = root.id
            logger.info("Target block already at the exit; solved at the root")
            return result

        queue: deque[SearchNode] = deque([root])
        while queue:
            current = queue.popleft()
            if depth_limit is not None and current.depth >= depth_limit:
                continue

            for move in self.candidate_moves(current.configuration):
                configuration = current.configuration.apply_move(move)
                existing = result.index.get(configuration.key)
                if existing is not None:
                    if keep_revisits:
                        result.edges.append((current.id, existing))
                    continue

                node = SearchNode(
                    id=len(result.nodes),
                    depth=current.depth + 1,
                    configuration=configuration,
                    parent=current.id,
                    move=move,
                )
                result.nodes.append(node)
                result.index[node.key] = node.id
                result.edges.append((current.id, node.id))
                result.depth_counts[node.depth] = result.depth_counts.get(node.depth, 0) + 1
                current.children.append(node.id)
                queue.append(node)

                if stop_on_goal and self.board.is_solved(configuration):
                    result.solved_node_id = node.id
                    logger.info(f"Solved at node {node.id} (depth {node.depth}) after {len(result.nodes)} states")
                    return result

        logger.info(
            f"Explored {len(result.nodes)} states, {len(result.edges)} edges "
            f"({self.policy.value}, depth limit {depth_limit})"
        )
        return result


def explore(
    board: Board,
    depth_limit: int | None = 8,
    stop_on_goal: bool | None = None,
    policy: ExpansionPolicy = ExpansionPolicy.SLIDE,
) -> SearchResult:
    """Explore a board's configuration space breadth-first.

    Convenience wrapper around ``Explorer(board, policy).explore(...)``.
    """
    return Explorer(board, policy).explore(depth_limit=depth_limit, stop_on_goal=stop_on_goal)


def extract_path(nodes: Sequence[SearchNode], goal_id: int | None) -> list[int]:
    """Walk parent links from a goal node back to the root.

    Args:
        nodes: Nodes indexed by id
        goal_id: Node to walk back from

    Returns:
        Node ids from root to goal inclusive, or an empty list when goal_id
        is None or unknown
    """
    if goal_id is None or not 0 <= goal_id < len(nodes):
        return []

    path: list[int] = []
    current: int | None = goal_id
    while current is not None:
        path.append(current)
        current = nodes[current].parent
    path.reverse()
    return path
