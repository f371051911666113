"""
Encoder — Координата → код меша

JIS X 0410: вычисление кода от крупного уровня к мелкому.

Алгоритм:
1. 1次: pq = floor(lat * 1.5), rs = floor(lon - 100); юго-западный угол
   (pq / 1.5, rs + 100)
2. Каждый следующий уровень цепочки (LEVEL2, LEVEL3, затем 4次/5次):
   row = floor((lat - south) / lat_size), col = floor((lon - west) / lon_size),
   индексы насыщаются в [0, rows - 1] / [0, cols - 1];
   код = код_родителя * 10^suffix_width + упакованный (row, col);
   угол сдвигается на (row * lat_size, col * lon_size)

Для координат внутри зоны покрытия Encoder не имеет пути ошибки.

Точка ровно на границе ячеек может попасть в любую из двух соседних ячеек
в зависимости от округления float. Это свойство арифметики с плавающей
точкой на полуоткрытых интервалах; epsilon-поправки не применяются.
"""

from jismesh.convert.packing import (
    append_suffix,
    pack_root,
    pack_suffix,
    root_indices,
    root_origin,
)
from jismesh.core.domain.coordinate import Coordinate
from jismesh.core.domain.grid_code import GridCode
from jismesh.core.domain.grid_level import GridLevel
from jismesh.core.math.numerical_safeguards import floor_bucket


def encode(coordinate: Coordinate, level: GridLevel) -> GridCode:
    """
    Код меша уровня level, содержащего coordinate.

    Args:
        coordinate: Координата (обычно проверенная через Coordinate.new)
        level: Уровень меша

    Returns:
        GridCode уровня level

    Examples:
        >>> tokyo = Coordinate(lat=35.6812, lon=139.7671)
        >>> str(encode(tokyo, GridLevel.LEVEL1))
        '5339'
        >>> str(encode(tokyo, GridLevel.LEVEL3))
        '53394611'
    """
    lat = coordinate.lat
    lon = coordinate.lon

    lat_index, lon_index = root_indices(lat, lon)
    value = pack_root(lat_index, lon_index)
    south, west = root_origin(lat_index, lon_index)

    for step in level.lineage[1:]:
        params = step.params
        row = floor_bucket(lat - south, params.lat_size_degrees, params.rows)
        col = floor_bucket(lon - west, params.lon_size_degrees, params.cols)

        value = append_suffix(value, step, pack_suffix(step, row, col))
        south += row * params.lat_size_degrees
        west += col * params.lon_size_degrees

    return GridCode(level=level, code=value)
