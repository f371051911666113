"""
Domain models and value objects.

Contains the fundamental value types: Coordinate, GridLevel, GridCode,
BoundingBox, Direction.
"""

from jismesh.core.domain.bounding_box import BoundingBox
from jismesh.core.domain.coordinate import (
    ENVELOPE_LAT_MAX,
    ENVELOPE_LAT_MIN,
    ENVELOPE_LON_MAX,
    ENVELOPE_LON_MIN,
    Coordinate,
    is_in_envelope,
)
from jismesh.core.domain.direction import Direction
from jismesh.core.domain.grid_code import GridCode
from jismesh.core.domain.grid_level import (
    LEVEL_CATALOG,
    GridLevel,
    LevelParams,
    SuffixPacking,
)

__all__ = [
    # Coordinate
    "Coordinate",
    "ENVELOPE_LAT_MIN",
    "ENVELOPE_LAT_MAX",
    "ENVELOPE_LON_MIN",
    "ENVELOPE_LON_MAX",
    "is_in_envelope",
    # Level catalog
    "GridLevel",
    "LevelParams",
    "SuffixPacking",
    "LEVEL_CATALOG",
    # Grid code
    "GridCode",
    # Geometry
    "BoundingBox",
    "Direction",
]
