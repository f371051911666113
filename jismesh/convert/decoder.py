"""
Decoder — Код меша → прямоугольник / центр

Обращение Encoder: суффиксы снимаются с числового кода от мелкого уровня
к крупному, затем юго-западный угол восстанавливается от крупного к мелкому
той же последовательностью операций с float, что и в Encoder.
Поэтому decode(encode(c, L)) всегда содержит c.

Северо-восточный угол = юго-западный + размер ячейки уровня.
"""

from jismesh.convert.packing import root_origin, split_suffixes, unpack_root, unpack_suffix
from jismesh.core.domain.bounding_box import BoundingBox
from jismesh.core.domain.coordinate import Coordinate
from jismesh.core.domain.grid_code import GridCode


def south_west_corner(code: GridCode) -> tuple[float, float]:
    """(широта, долгота) юго-западного угла ячейки"""
    root, suffixes = split_suffixes(code.code, code.level)

    south, west = root_origin(*unpack_root(root))

    for step, suffix in suffixes:
        row, col = unpack_suffix(step, suffix)
        south += row * step.lat_size_degrees
        west += col * step.lon_size_degrees

    return south, west


def decode(code: GridCode) -> BoundingBox:
    """
    Прямоугольник ячейки меша.

    Examples:
        >>> box = decode(GridCode.parse("5339"))
        >>> round(box.min_lat, 6), box.min_lon
        (35.333333, 139.0)
    """
    south, west = south_west_corner(code)
    level = code.level

    return BoundingBox.unchecked(
        south_west=Coordinate.unchecked(south, west),
        north_east=Coordinate.unchecked(
            south + level.lat_size_degrees,
            west + level.lon_size_degrees,
        ),
    )


def decode_center(code: GridCode) -> Coordinate:
    """Центр ячейки меша"""
    return decode(code).center()
