"""
Operations — Операции над отдельными мешами (геометрия, иерархия, соседи)
"""

from jismesh.operations.bounds import bounds, center, contains
from jismesh.operations.hierarchy import children, parent, to_level
from jismesh.operations.neighbors import neighbor, neighbors

__all__ = [
    # Bounds
    "bounds",
    "center",
    "contains",
    # Hierarchy
    "parent",
    "children",
    "to_level",
    # Neighbors
    "neighbor",
    "neighbors",
]
