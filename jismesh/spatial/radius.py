"""
Radius — Ленивое перечисление мешей в круге заданного радиуса

Алгоритм:
1. Отрицательный или нечисловой (NaN/Inf) радиус → пустой результат
2. Нулевой радиус → ровно один код: меш, содержащий центр (без обхода)
3. Положительный радиус:
   - описанный прямоугольник: lat ± r / meters_per_degree,
     lon ± r / (meters_per_degree * cos(lat))
   - прямоугольник обрезается по зоне покрытия сетки
   - обход через GridCodeIterator
   - код остаётся, если haversine(центр, центр ячейки) <= r

Критерий — расстояние до центра ячейки, а не пересечение ячейки с кругом:
ячейка, задетая кругом краем, может не попасть в результат.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from jismesh.convert.decoder import decode_center
from jismesh.convert.encoder import encode
from jismesh.core.domain.bounding_box import BoundingBox
from jismesh.core.domain.coordinate import (
    ENVELOPE_LAT_MAX,
    ENVELOPE_LAT_MIN,
    ENVELOPE_LON_MAX,
    ENVELOPE_LON_MIN,
    Coordinate,
)
from jismesh.core.domain.grid_code import GridCode
from jismesh.core.domain.grid_level import GridLevel
from jismesh.core.math.distance import (
    EARTH_RADIUS_METERS,
    METERS_PER_DEGREE_LAT,
    bbox_offsets,
    haversine_distance,
)
from jismesh.core.math.numerical_safeguards import is_valid_float
from jismesh.spatial.range import GridCodeIterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RadiusSearchConfig:
    """Параметры поиска по радиусу.

    - earth_radius_meters — радиус сферы для haversine
    - meters_per_degree — длина градуса широты для описанного прямоугольника
    - clamp_to_envelope — обрезать прямоугольник по зоне покрытия сетки
    """
    earth_radius_meters: float = EARTH_RADIUS_METERS
    meters_per_degree: float = METERS_PER_DEGREE_LAT
    clamp_to_envelope: bool = True


DEFAULT_RADIUS_CONFIG = RadiusSearchConfig()


def radius_bounding_box(
    center: Coordinate,
    radius_meters: float,
    config: RadiusSearchConfig = DEFAULT_RADIUS_CONFIG,
) -> BoundingBox:
    """
    Прямоугольник, описанный вокруг круга (с обрезкой по зоне покрытия).

    Args:
        center: Центр круга
        radius_meters: Радиус (метры, >= 0)
        config: Параметры поиска

    Returns:
        BoundingBox (углы без проверок)
    """
    lat_offset, lon_offset = bbox_offsets(center, radius_meters, config.meters_per_degree)

    min_lat = center.lat - lat_offset
    max_lat = center.lat + lat_offset
    min_lon = center.lon - lon_offset
    max_lon = center.lon + lon_offset

    if config.clamp_to_envelope:
        min_lat = max(min_lat, ENVELOPE_LAT_MIN)
        max_lat = min(max_lat, ENVELOPE_LAT_MAX)
        min_lon = max(min_lon, ENVELOPE_LON_MIN)
        max_lon = min(max_lon, ENVELOPE_LON_MAX)

    return BoundingBox.unchecked(
        south_west=Coordinate.unchecked(min_lat, min_lon),
        north_east=Coordinate.unchecked(max_lat, max_lon),
    )


class RadiusGridIterator:
    """
    Итератор кодов меша в круге.

    Режимы:
    - пустой (радиус < 0 или не число)
    - одиночный (радиус == 0): один код, затем StopIteration
    - обход (радиус > 0): GridCodeIterator + фильтр по расстоянию

    Examples:
        >>> tokyo = Coordinate(lat=35.6812, lon=139.7671)
        >>> codes = list(RadiusGridIterator(tokyo, 0.0, GridLevel.LEVEL3))
        >>> [str(c) for c in codes]
        ['53394611']
    """

    def __init__(
        self,
        center: Coordinate,
        radius_meters: float,
        level: GridLevel,
        config: Optional[RadiusSearchConfig] = None,
    ):
        self.center = center
        self.radius_meters = radius_meters
        self.level = level
        self.config = config or DEFAULT_RADIUS_CONFIG

        self._sweep: Optional[GridCodeIterator] = None
        self._is_empty = not is_valid_float(radius_meters) or radius_meters < 0.0
        self._is_single = not self._is_empty and radius_meters == 0.0
        self._single_emitted = False

        if self._is_empty:
            logger.debug(f"Radius search: radius={radius_meters} yields nothing")
        elif self._is_single:
            logger.debug(f"Radius search: zero radius at ({center.lat}, {center.lon}), single cell")
        else:
            bbox = radius_bounding_box(center, radius_meters, self.config)
            self._sweep = GridCodeIterator(bbox, level)

    def __iter__(self) -> Iterator[GridCode]:
        return self

    def __next__(self) -> GridCode:
        if self._is_single:
            if self._single_emitted:
                raise StopIteration
            self._single_emitted = True
            return encode(self.center, self.level)

        # Пустой режим: обхода нет
        if self._sweep is None:
            raise StopIteration

        for candidate in self._sweep:
            distance = haversine_distance(
                self.center,
                decode_center(candidate),
                self.config.earth_radius_meters,
            )
            if distance <= self.radius_meters:
                return candidate

        raise StopIteration

    def restart(self) -> None:
        """Сброс итератора в начальное состояние"""
        self._single_emitted = False
        if self._sweep is not None:
            self._sweep.restart()


def grid_codes_in_radius(
    center: Coordinate,
    radius_meters: float,
    level: GridLevel,
    config: Optional[RadiusSearchConfig] = None,
) -> RadiusGridIterator:
    """
    Коды меша уровня level в круге радиуса radius_meters вокруг center (лениво).

    Args:
        center: Центр круга
        radius_meters: Радиус (метры)
        level: Уровень меша
        config: Параметры поиска (default: RadiusSearchConfig())

    Returns:
        RadiusGridIterator
    """
    return RadiusGridIterator(center, radius_meters, level, config)


def grid_codes_in_radius_from_code(
    code: GridCode,
    radius_meters: float,
    config: Optional[RadiusSearchConfig] = None,
) -> RadiusGridIterator:
    """
    Коды меша того же уровня в круге вокруг центра ячейки code.

    При радиусе >= 0 результат содержит сам code.
    """
    return RadiusGridIterator(decode_center(code), radius_meters, code.level, config)
