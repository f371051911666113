"""
Bounds — Геометрия отдельной ячейки меша
"""

from jismesh.convert.decoder import decode, decode_center
from jismesh.core.domain.bounding_box import BoundingBox
from jismesh.core.domain.coordinate import Coordinate
from jismesh.core.domain.grid_code import GridCode


def bounds(code: GridCode) -> BoundingBox:
    return decode(code)


def center(code: GridCode) -> Coordinate:
    return decode_center(code)


def contains(code: GridCode, coordinate: Coordinate) -> bool:
    """Точка внутри ячейки меша (границы включительно)"""
    return decode(code).contains(coordinate)
