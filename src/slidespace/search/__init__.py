"""State-space search for slidespace.

Breadth-first exploration of reachable configurations and solution path
extraction. The Qt worker lives in ``slidespace.search.worker`` and is not
imported here so the search core does not require PyQt6.
"""

from slidespace.search.explorer import (
    ExpansionPolicy,
    Explorer,
    SearchNode,
    SearchResult,
    explore,
    extract_path,
)

__all__ = [
    "ExpansionPolicy",
    "Explorer",
    "SearchNode",
    "SearchResult",
    "explore",
    "extract_path",
]
