"""
Core math modules для jismesh

Численные примитивы и расчёт расстояний.
"""

# Numerical Safeguards
from jismesh.core.math.numerical_safeguards import (
    EPS_DEGREES,
    clamp,
    floor_bucket,
    is_valid_float,
)

# Distance
from jismesh.core.math.distance import (
    EARTH_RADIUS_METERS,
    METERS_PER_DEGREE_LAT,
    bbox_offsets,
    haversine_distance,
)

__all__ = [
    # Numerical Safeguards
    "EPS_DEGREES",
    "clamp",
    "floor_bucket",
    "is_valid_float",
    # Distance — Constants
    "EARTH_RADIUS_METERS",
    "METERS_PER_DEGREE_LAT",
    # Distance — Functions
    "bbox_offsets",
    "haversine_distance",
]
