"""Force-directed layout engine for configuration graphs."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from slidespace.errors import LayoutError, ValidationError, validate_positive

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        iterations: Number of relaxation passes (no convergence test)
        spring_strength: Stiffness of springs along edges
        spring_gain: Multiplier applied on top of spring_strength
        center_force_strength: Outward push away from the centroid (0 disables)
        fixed_edge_length: Length every edge is forced to
        repulsion_strength: Scale of the inverse-square push between unconnected nodes
        epsilon: Pairs closer than this are skipped for the iteration
        time_step: Euler step size
        damping: Factor applied to every position after each step
    """

    iterations: int = 150
    spring_strength: float = 0.1
    spring_gain: float = 10.0
    center_force_strength: float = 0.0
    fixed_edge_length: float = 2.0
    repulsion_strength: float = 1.0
    epsilon: float = 1e-3
    # Integration settings
    time_step: float = 0.1
    damping: float = 0.95


@dataclass
class LayoutResult:
    """Result of a layout operation.

    Attributes:
        positions: Array of shape (n, 3), indexed like the input positions
        edges: Edge list the layout was computed for
        bounds: (min corner, max corner) of the layout, None when empty
    """

    positions: np.ndarray
    edges: list[tuple[int, int]] = field(default_factory=list)
    bounds: tuple[np.ndarray, np.ndarray] | None = None


class ForceLayoutEngine:
    """Relaxes graph node positions under spring and repulsion forces.

    Every pass accumulates pairwise forces (springs between connected nodes,
    inverse-square repulsion between unconnected ones, and an optional
    centroid force), takes one Euler step, scales every position toward the
    origin by ``damping``, then moves the endpoints of each edge, in edge
    list order, so that the edge has exactly ``fixed_edge_length``.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()

    def calculate_layout(self, positions: np.ndarray, edges: Iterable[tuple[int, int]]) -> LayoutResult:
        """Relax positions and package them with their bounds.

        Args:
            positions: Initial positions, shape (n, 3)
            edges: Node index pairs; repeated pairs are allowed

        Returns:
            LayoutResult containing the final positions
        """
        edge_list = [(int(i), int(j)) for i, j in edges]
        final = self.relax(positions, edge_list)
        bounds = None
        if len(final):
            bounds = (final.min(axis=0), final.max(axis=0))
        return LayoutResult(positions=final, edges=edge_list, bounds=bounds)

    def relax(self, positions: np.ndarray, edges: Iterable[tuple[int, int]]) -> np.ndarray:
        """Run the configured number of relaxation passes.

        Args:
            positions: Initial positions, shape (n, 3); not modified
            edges: Node index pairs; repeated pairs are allowed

        Returns:
            New array of shape (n, 3)

        Raises:
            LayoutError: If positions or edges are malformed
        """
        config = self.config
        self._validate_config()

        pos = np.array(positions, dtype=np.float64, copy=True)
        if pos.size == 0:
            pos = pos.reshape(0, 3)
        if pos.ndim != 2 or pos.shape[1] != 3:
            raise LayoutError(f"positions must have shape (n, 3), got {pos.shape}")
        if not np.all(np.isfinite(pos)):
            raise LayoutError("positions must be finite")

        n = len(pos)
        edge_list = [(int(i), int(j)) for i, j in edges]
        for i, j in edge_list:
            if not (0 <= i < n and 0 <= j < n):
                raise LayoutError(f"edge ({i}, {j}) references a node outside 0..{n - 1}")

        if n == 0:
            return pos

        connected = self._adjacency(n, edge_list)
        length = config.fixed_edge_length

        for _ in range(config.iterations):
            forces = self._pair_forces(pos, connected)

            if config.center_force_strength != 0.0:
                forces += self._center_forces(pos)

            pos += forces * config.time_step
            pos *= config.damping

            for i, j in edge_list:
                delta = pos[j] - pos[i]
                dist = float(np.sqrt(delta @ delta))
                if dist > config.epsilon:
                    midpoint = (pos[i] + pos[j]) / 2
                    half = delta * (length / dist) / 2
                    pos[i] = midpoint - half
                    pos[j] = midpoint + half

        logger.debug(f"Relaxed {n} nodes / {len(edge_list)} edges over {config.iterations} iterations")
        return pos

    def _validate_config(self) -> None:
        config = self.config
        if isinstance(config.iterations, bool) or not isinstance(config.iterations, int) or config.iterations < 0:
            raise LayoutError(f"iterations must be a non-negative integer, got {config.iterations!r}")
        try:
            validate_positive(config.fixed_edge_length, "fixed_edge_length")
            validate_positive(config.epsilon, "epsilon")
            validate_positive(config.time_step, "time_step")
        except ValidationError as e:
            raise LayoutError(str(e)) from e

    @staticmethod
    def _adjacency(n: int, edges: list[tuple[int, int]]) -> np.ndarray:
        """Boolean connectivity matrix; multiplicity and direction are ignored."""
        connected = np.zeros((n, n), dtype=bool)
        for i, j in edges:
            connected[i, j] = True
            connected[j, i] = True
        return connected

    def _pair_forces(self, pos: np.ndarray, connected: np.ndarray) -> np.ndarray:
        """Accumulate spring and repulsion forces over all node pairs."""
        config = self.config
        length = config.fixed_edge_length

        # diff[i, j] points from node i to node j
        diff = pos[np.newaxis, :, :] - pos[:, np.newaxis, :]
        dist = np.sqrt(np.einsum("ijk,ijk->ij", diff, diff))
        active = dist >= config.epsilon
        np.fill_diagonal(active, False)

        safe = np.where(active, dist, 1.0)
        spring = config.spring_strength * config.spring_gain * (safe - length)
        repulsion = -config.repulsion_strength * (length * length) / (safe * safe)
        magnitude = np.where(connected, spring, repulsion)
        magnitude = np.where(active, magnitude, 0.0)

        unit = diff / safe[:, :, np.newaxis]
        return np.einsum("ij,ijk->ik", magnitude, unit)

    def _center_forces(self, pos: np.ndarray) -> np.ndarray:
        """Radial force away from the centroid, proportional to distance from it."""
        offsets = pos - pos.mean(axis=0)
        dist = np.linalg.norm(offsets, axis=1)
        forces = self.config.center_force_strength * offsets
        forces[dist <= self.config.epsilon] = 0.0
        return forces


def relax(
    initial_positions: np.ndarray,
    edges: Iterable[tuple[int, int]],
    iterations: int = 150,
    spring_strength: float = 0.1,
    center_force_strength: float = 0.0,
    fixed_edge_length: float = 2.0,
) -> np.ndarray:
    """Relax positions with default tuning apart from the given knobs.

    Returns:
        New array of shape (n, 3)
    """
    config = LayoutConfig(
        iterations=iterations,
        spring_strength=spring_strength,
        center_force_strength=center_force_strength,
        fixed_edge_length=fixed_edge_length,
    )
    return ForceLayoutEngine(config).relax(initial_positions, edges)
