"""
Spatial — Ленивое перечисление мешей в области (прямоугольник, круг)
"""

from jismesh.spatial.radius import (
    DEFAULT_RADIUS_CONFIG,
    RadiusGridIterator,
    RadiusSearchConfig,
    grid_codes_in_radius,
    grid_codes_in_radius_from_code,
    radius_bounding_box,
)
from jismesh.spatial.range import GridCodeIterator, grid_codes_in_bbox

__all__ = [
    # Range
    "GridCodeIterator",
    "grid_codes_in_bbox",
    # Radius
    "RadiusSearchConfig",
    "DEFAULT_RADIUS_CONFIG",
    "RadiusGridIterator",
    "grid_codes_in_radius",
    "grid_codes_in_radius_from_code",
    "radius_bounding_box",
]
