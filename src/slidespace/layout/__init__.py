"""Layout engine for 3D configuration graph visualization.

This module contains the projection of configurations into 3D space and
the force-directed solver that spreads them apart.
"""

from slidespace.layout.engine import ForceLayoutEngine, LayoutConfig, LayoutResult, relax
from slidespace.layout.projection import compute_axes, project, project_all

__all__ = [
    "ForceLayoutEngine",
    "LayoutConfig",
    "LayoutResult",
    "relax",
    "compute_axes",
    "project",
    "project_all",
]
