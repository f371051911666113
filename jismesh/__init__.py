"""
jismesh — Региональный меш Японии (JIS X 0410)

Кодирование координат в коды меша семи уровней (от 1次 ≈ 80 km до 100m),
обратное декодирование в прямоугольники, навигация по иерархии,
поиск соседей и ленивое перечисление мешей в прямоугольнике или круге.

Examples:
    >>> from jismesh import Coordinate, GridLevel, encode, parent
    >>> tokyo = Coordinate.new(35.6812, 139.7671)
    >>> code = encode(tokyo, GridLevel.LEVEL3)
    >>> str(code), str(parent(code))
    ('53394611', '533946')
"""

from jismesh.convert import decode, decode_center, encode, south_west_corner
from jismesh.core.domain import (
    LEVEL_CATALOG,
    BoundingBox,
    Coordinate,
    Direction,
    GridCode,
    GridLevel,
    LevelParams,
)
from jismesh.core.errors import (
    CoordinateError,
    EmptyGridCodeError,
    GridCodeFormatError,
    InvalidCodeLengthError,
    InvalidDigitError,
    JisMeshError,
    LatitudeOutOfRangeError,
    LongitudeOutOfRangeError,
    OutOfEnvelopeError,
    UnsupportedRefinementError,
)
from jismesh.core.math import bbox_offsets, haversine_distance
from jismesh.operations import (
    bounds,
    center,
    children,
    contains,
    neighbor,
    neighbors,
    parent,
    to_level,
)
from jismesh.spatial import (
    GridCodeIterator,
    RadiusGridIterator,
    RadiusSearchConfig,
    grid_codes_in_bbox,
    grid_codes_in_radius,
    grid_codes_in_radius_from_code,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Coordinate",
    "GridLevel",
    "LevelParams",
    "LEVEL_CATALOG",
    "GridCode",
    "BoundingBox",
    "Direction",
    # Errors
    "JisMeshError",
    "CoordinateError",
    "LatitudeOutOfRangeError",
    "LongitudeOutOfRangeError",
    "OutOfEnvelopeError",
    "GridCodeFormatError",
    "EmptyGridCodeError",
    "InvalidDigitError",
    "InvalidCodeLengthError",
    "UnsupportedRefinementError",
    # Convert
    "encode",
    "decode",
    "decode_center",
    "south_west_corner",
    # Operations
    "bounds",
    "center",
    "contains",
    "parent",
    "children",
    "to_level",
    "neighbor",
    "neighbors",
    # Spatial
    "GridCodeIterator",
    "grid_codes_in_bbox",
    "RadiusSearchConfig",
    "RadiusGridIterator",
    "grid_codes_in_radius",
    "grid_codes_in_radius_from_code",
    # Distance
    "haversine_distance",
    "bbox_offsets",
]
