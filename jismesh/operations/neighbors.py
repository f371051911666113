"""
Neighbors — Соседние меши того же уровня

Сосед вычисляется сдвигом центра ячейки на один размер ячейки в заданном
направлении и повторным кодированием. Сдвинутая точка вне зоны покрытия
означает отсутствие соседа.
"""

import logging
from typing import Optional

from jismesh.convert.decoder import decode_center
from jismesh.convert.encoder import encode
from jismesh.core.domain.coordinate import Coordinate, is_in_envelope
from jismesh.core.domain.direction import Direction
from jismesh.core.domain.grid_code import GridCode

logger = logging.getLogger(__name__)


def neighbor(code: GridCode, direction: Direction) -> Optional[GridCode]:
    """
    Соседний меш в направлении direction.

    Returns:
        Код соседа того же уровня, или None если сосед вне зоны покрытия

    Examples:
        >>> str(neighbor(GridCode.parse("53394611"), Direction.EAST))
        '53394612'
    """
    level = code.level
    center = decode_center(code)
    dx, dy = direction.offset

    lat = center.lat + dy * level.lat_size_degrees
    lon = center.lon + dx * level.lon_size_degrees

    if not is_in_envelope(lat, lon):
        logger.debug(f"No {direction.value} neighbor for {code}: ({lat:.6f}, {lon:.6f}) out of envelope")
        return None

    return encode(Coordinate.unchecked(lat, lon), level)


def neighbors(code: GridCode) -> list[GridCode]:
    """
    Все существующие соседи (0..8) в порядке Direction.

    У ячеек на границе зоны покрытия соседей меньше восьми.
    """
    result = []
    for direction in Direction:
        adjacent = neighbor(code, direction)
        if adjacent is not None:
            result.append(adjacent)
    return result
