"""Projection of configurations into 3D space.

Each block is given a basis direction and a configuration maps to the sum
of (block offset x basis direction). The first three blocks use the unit
axes; every further block uses a short diagonal, so boards with more than
three independently moving blocks alias in projection until the force
layout spreads the points apart.
"""

from collections.abc import Sequence

import numpy as np

from slidespace.model.block import Block
from slidespace.model.state import Configuration

UNIT_AXES: tuple[tuple[float, float, float], ...] = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)


def compute_axes(blocks: Sequence[Block]) -> np.ndarray:
    """Assign a basis direction to each block.

    Args:
        blocks: Blocks in board order

    Returns:
        Array of shape (len(blocks), 3)
    """
    axes = np.zeros((len(blocks), 3), dtype=np.float64)
    for i in range(len(blocks)):
        if i < len(UNIT_AXES):
            axes[i] = UNIT_AXES[i]
        else:
            axes[i] = 0.5 / i
    return axes


def project(configuration: Configuration, blocks: Sequence[Block], axes: np.ndarray) -> np.ndarray:
    """Map one configuration to a point in 3D space.

    Args:
        configuration: Configuration to project
        blocks: Blocks in board order
        axes: Basis directions from ``compute_axes``

    Returns:
        Array of shape (3,)
    """
    offsets = np.array([configuration.offset(block) for block in blocks], dtype=np.float64)
    if offsets.size == 0:
        return np.zeros(3, dtype=np.float64)
    return offsets @ axes


def project_all(
    configurations: Sequence[Configuration],
    blocks: Sequence[Block],
    axes: np.ndarray | None = None,
) -> np.ndarray:
    """Project many configurations at once.

    Returns:
        Array of shape (len(configurations), 3), indexed like the input
    """
    if axes is None:
        axes = compute_axes(blocks)
    positions = np.zeros((len(configurations), 3), dtype=np.float64)
    for i, configuration in enumerate(configurations):
        positions[i] = project(configuration, blocks, axes)
    return positions
