"""
Range — Ленивое перечисление мешей внутри прямоугольника

Обход выборочных точек с шагом в размер ячейки уровня:
- строки с юга на север, внутри строки с запада на восток
- точка = (min_lat + row * lat_step, min_lon + col * lon_step), без накопления
  ошибки сложения
- верхние границы включительно
- каждая точка кодируется на уровне level; точки вне зоны покрытия
  пропускаются

Коды не дедуплицируются: соседние выборочные точки могут попасть в одну
ячейку, если граница прямоугольника не выровнена по сетке.

Перевёрнутый (south_west севернее/восточнее north_east) или NaN прямоугольник
даёт пустой обход.
"""

import logging
from typing import Iterator

from jismesh.convert.encoder import encode
from jismesh.core.domain.bounding_box import BoundingBox
from jismesh.core.domain.coordinate import Coordinate, is_in_envelope
from jismesh.core.domain.grid_code import GridCode
from jismesh.core.domain.grid_level import GridLevel

logger = logging.getLogger(__name__)


class GridCodeIterator:
    """
    Итератор кодов меша в прямоугольнике (курсор по строкам и столбцам).

    Состояние:
    - _row: индекс текущей строки выборки
    - _col: индекс следующего столбца в текущей строке

    Examples:
        >>> box = BoundingBox(
        ...     south_west=Coordinate(lat=35.6, lon=139.7),
        ...     north_east=Coordinate(lat=35.7, lon=139.8),
        ... )
        >>> codes = list(GridCodeIterator(box, GridLevel.LEVEL3))
        >>> all(c.level is GridLevel.LEVEL3 for c in codes)
        True
    """

    def __init__(self, bbox: BoundingBox, level: GridLevel):
        self.bbox = bbox
        self.level = level
        self.lat_step = level.lat_size_degrees
        self.lon_step = level.lon_size_degrees

        self._row = 0
        self._col = 0

        logger.debug(
            f"Bbox sweep: [{bbox.min_lat}, {bbox.min_lon}] - [{bbox.max_lat}, {bbox.max_lon}] "
            f"level={level.value} step=({self.lat_step}, {self.lon_step})"
        )

    def __iter__(self) -> Iterator[GridCode]:
        return self

    def __next__(self) -> GridCode:
        bbox = self.bbox

        while True:
            lat = bbox.min_lat + self._row * self.lat_step
            # NaN тоже завершает обход
            if not lat <= bbox.max_lat:
                raise StopIteration

            while True:
                lon = bbox.min_lon + self._col * self.lon_step
                if not lon <= bbox.max_lon:
                    break

                self._col += 1
                if is_in_envelope(lat, lon):
                    return encode(Coordinate.unchecked(lat, lon), self.level)

            self._row += 1
            self._col = 0

    def restart(self) -> None:
        """Сброс курсора в юго-западный угол"""
        self._row = 0
        self._col = 0


def grid_codes_in_bbox(bbox: BoundingBox, level: GridLevel) -> GridCodeIterator:
    """
    Коды меша уровня level внутри прямоугольника bbox (лениво).

    Args:
        bbox: Область поиска
        level: Уровень меша

    Returns:
        GridCodeIterator
    """
    return GridCodeIterator(bbox, level)
