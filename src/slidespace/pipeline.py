"""Board -> search -> projection -> layout, packaged for rendering."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from slidespace.layout.engine import ForceLayoutEngine, LayoutConfig
from slidespace.layout.projection import compute_axes, project_all
from slidespace.model.board import Board
from slidespace.search.explorer import Explorer, SearchResult
from slidespace.settings import SearchSettings

logger = logging.getLogger(__name__)


@dataclass
class GraphLayout:
    """Everything the rendering layer consumes for one board.

    Attributes:
        board: Board that was explored
        search: Search result (nodes, edges, histogram, solved node)
        positions: Final node positions, shape (n, 3), indexed like search.nodes
        solution_path: Node ids from root to the solved node
        elapsed: Wall-clock seconds spent in search and layout
    """

    board: Board
    search: SearchResult
    positions: np.ndarray
    solution_path: list[int] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def edges(self) -> list[tuple[int, int]]:
        return self.search.edges

    @property
    def path_edges(self) -> set[tuple[int, int]]:
        """Edges whose endpoints are consecutive on the solution path."""
        steps = set(zip(self.solution_path, self.solution_path[1:]))
        return {edge for edge in self.search.edges if edge in steps or edge[::-1] in steps}

    @property
    def status(self) -> str:
        """One-line summary of the outcome."""
        states = len(self.search.nodes)
        if self.search.is_solved:
            return f"SOLVED in {len(self.solution_path) - 1} moves | {states} states"
        return f"No solution found | {states} states"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON export."""
        data = self.search.to_dict()
        data["board"] = self.board.to_dict()
        data["positions"] = self.positions.round(6).tolist()
        data["solutionPath"] = list(self.solution_path)
        return data


def build_graph(
    board: Board,
    search: SearchSettings | None = None,
    layout: LayoutConfig | None = None,
) -> GraphLayout:
    """Explore a board and lay out its configuration graph.

    Args:
        board: Validated board
        search: Search parameters (defaults if None)
        layout: Layout parameters (defaults if None)

    Returns:
        GraphLayout for the rendering layer

    Raises:
        ValidationError: If the board or search parameters are rejected
    """
    search = search or SearchSettings()
    start = time.perf_counter()

    result = Explorer(board, search.policy).explore(
        depth_limit=search.depth_limit,
        stop_on_goal=search.stop_on_goal,
    )
    logger.debug(f"Depth histogram: {dict(sorted(result.depth_counts.items()))}")

    configurations = [node.configuration for node in result.nodes]
    initial = project_all(configurations, board.blocks, compute_axes(board.blocks))
    positions = ForceLayoutEngine(layout).relax(initial, result.edges)

    elapsed = time.perf_counter() - start
    graph = GraphLayout(
        board=board,
        search=result,
        positions=positions,
        solution_path=result.solution_path,
        elapsed=elapsed,
    )
    logger.info(f"{graph.status} | {elapsed * 1000:.0f}ms")
    return graph
